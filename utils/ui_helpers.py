"""
UI Helper Functions
===================

- Blueprint-specific assets (CSS/JS) injected by the context processor
- Render state for the interactive parts of the page, computed with the
  `interactions` state machines on a virtual clock:
    * typewriter timeline replayed by static/js/typewriter.js
    * server-rendered modal state for /?project=<id>
"""

from flask import request, current_app
from typing import Dict, List, Optional

from interactions import (
    Document,
    ManualScheduler,
    ModalController,
    ScrollLock,
    TypewriterConfig,
    build_timeline,
    DISMISS_ELEMENT_ID,
)


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    CSS files of a blueprint

    Example:
        >>> get_blueprint_styles('pages')
        ['css/site.css']
    """
    if not blueprint_name:
        return []

    blueprint_css_map = {
        'pages': [
            'css/site.css',
        ],
        'portfolio': [
            'css/site.css',
        ],
    }

    return blueprint_css_map.get(blueprint_name, [])


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """JavaScript files of a blueprint"""
    if not blueprint_name:
        return []

    blueprint_js_map = {
        'pages': [
            'js/typewriter.js',
            'js/modal.js',
        ],
        'portfolio': [],
    }

    return blueprint_js_map.get(blueprint_name, [])


def inject_blueprint_assets() -> Dict[str, List[str]]:
    """
    Assets of the blueprint serving the current request

    Example in a template:
        {% for style_file in blueprint_styles %}
        <link rel="stylesheet" href="{{ url_for('static', filename=style_file) }}">
        {% endfor %}
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for <body>

    Example:
        >>> get_page_specific_class('pages', 'index')
        'page-pages page-pages-index'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


# ========== INTERACTIVE STATE ========== #

def get_typewriter_config(texts) -> TypewriterConfig:
    """Typewriter settings from the app config"""
    cfg = current_app.config
    return TypewriterConfig(
        texts=tuple(texts),
        type_speed=cfg.get('TYPEWRITER_TYPE_SPEED_MS', 80),
        delete_speed=cfg.get('TYPEWRITER_DELETE_SPEED_MS', 40),
        delay_between=cfg.get('TYPEWRITER_DELAY_BETWEEN_MS', 1800),
    )


def get_typewriter_payload(texts) -> Dict:
    """
    Everything the browser needs to play the typewriter

    Returns:
        dict: texts, speeds, and `frames` ([{'text', 'hold'}]) for one full
        cycle; the client replays the frames in a loop
    """
    config = get_typewriter_config(texts)
    frames = build_timeline(config)
    return {
        'texts': list(config.texts),
        'type_speed': config.type_speed,
        'delete_speed': config.delete_speed,
        'delay_between': config.delay_between,
        'frames': [{'text': text, 'hold': hold} for text, hold in frames],
    }


def get_modal_context(project) -> Dict:
    """
    Render state of the project modal with `project` opened (or closed when
    None), as produced by ModalController after its first render pass.
    """
    close_delay = current_app.config.get('MODAL_CLOSE_DELAY_MS', 300)
    scheduler = ManualScheduler()
    # A request renders one page: it gets its own lock, not the process one
    document = Document(scroll_lock=ScrollLock())

    with ModalController(scheduler, document, close_delay=close_delay) as modal:
        if project is not None:
            modal.open(project)
            document.mount(DISMISS_ELEMENT_ID)
            scheduler.run_soon()

        return {
            'modal': modal.state,
            'scroll_locked': document.scroll_lock.locked,
            'autofocus_id': document.focused,
            'dismiss_id': DISMISS_ELEMENT_ID,
            'close_delay': close_delay,
        }


def get_ui_config() -> Dict:
    """General UI settings exposed to templates and scripts"""
    return {
        'enable_animations': True,
        'modal_close_delay': current_app.config.get('MODAL_CLOSE_DELAY_MS', 300),
        'dismiss_id': DISMISS_ELEMENT_ID,
    }
