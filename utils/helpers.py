"""
Helpers Module - Utility functions for common operations
"""

from flask import current_app

SPECIAL_HREF_PREFIXES = ('#', 'mailto:', 'http')

BUTTON_BASE_CLASS = 'btn'
BUTTON_VARIANTS = {
    'primary': 'btn-primary',
    'outline': 'btn-outline',
}


def parse_project_id(value):
    """Convert a project id from the URL/query string to int, or None"""
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def find_project(profile, project_id):
    """Find a project by id (int or numeric string)"""
    project_id = parse_project_id(project_id)
    if project_id is None:
        return None
    return next((p for p in profile.projects if p.id == project_id), None)


def is_special_href(href):
    """In-page anchors, mail links and absolute URLs render as plain <a>"""
    return bool(href) and href.startswith(SPECIAL_HREF_PREFIXES)


def link_attrs(href, external=False):
    """
    Build the attributes of a button rendered as a link

    Args:
        href (str): Target
        external (bool): Open in a new tab

    Returns:
        dict: Attributes for the <a> element
    """
    attrs = {'href': href}
    if not is_special_href(href):
        # Internal route: resolve relative to the application root
        attrs['href'] = '/' + href.lstrip('/')
    if external:
        attrs['target'] = '_blank'
        attrs['rel'] = 'noopener noreferrer'
    return attrs


def button_class(variant='primary', extra=''):
    """CSS classes of a button or button-styled link"""
    if variant not in BUTTON_VARIANTS:
        current_app.logger.warning(f"Unknown button variant '{variant}', using primary")
        variant = 'primary'
    classes = [BUTTON_BASE_CLASS, BUTTON_VARIANTS[variant]]
    if extra:
        classes.append(extra)
    return ' '.join(classes)


__all__ = [
    'parse_project_id',
    'find_project',
    'is_special_href',
    'link_attrs',
    'button_class'
]
