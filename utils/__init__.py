"""
Utils Package - Centralized utility modules initialization
"""

from .data import load_data, load_data_from_json, get_default_portfolio_data, get_global_meta
from .helpers import (
    parse_project_id,
    find_project,
    is_special_href,
    link_attrs,
    button_class
)
from .ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    inject_blueprint_assets,
    get_page_specific_class,
    get_typewriter_config,
    get_typewriter_payload,
    get_modal_context,
    get_ui_config
)

__all__ = [
    # Data
    'load_data',
    'load_data_from_json',
    'get_default_portfolio_data',
    'get_global_meta',

    # Helpers
    'parse_project_id',
    'find_project',
    'is_special_href',
    'link_attrs',
    'button_class',

    # UI Helpers
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class',
    'get_typewriter_config',
    'get_typewriter_payload',
    'get_modal_context',
    'get_ui_config'
]
