"""
Data Management Module - Loads the portfolio content
Content lives in a JSON file (CONTENT_PATH); built-in defaults are used when
it is missing or broken so the page always renders.
"""

import json
import os
from flask import current_app
from models import Profile


def get_default_portfolio_data():
    """Return default portfolio template"""
    return {
        'name': 'Your Name',
        'tagline_texts': ['Welcome to my portfolio'],
        'intro': 'Projects, skills, and ways to get in touch.',
        'about_heading': 'Things I like working on',
        'about_blurb': '',
        'projects_heading': 'Projects',
        'projects_blurb': '',
        'contact_heading': 'Say hello',
        'contact_blurb': '',
        'email': '',
        'linkedin_url': '',
        'location_note': '',
        'skills': [],
        'projects': []
    }


def load_data_from_json(path=None):
    """
    Load raw content from the JSON file

    Args:
        path (str, optional): Content file; defaults to CONTENT_PATH

    Returns:
        dict: Content data, or the default template on any error
    """
    path = path or current_app.config.get('CONTENT_PATH')
    try:
        if not path or not os.path.exists(path):
            current_app.logger.warning(f"Content file not found: {path}, using defaults")
            return get_default_portfolio_data()

        with open(path, 'r', encoding='utf-8') as file:
            data = json.load(file)

        if not isinstance(data, dict) or not data.get('name'):
            current_app.logger.error(f"Content file {path} has no 'name', using defaults")
            return get_default_portfolio_data()
        return data
    except (OSError, json.JSONDecodeError) as e:
        current_app.logger.error(f"Error loading content from JSON: {str(e)}")
        return get_default_portfolio_data()


def load_data(path=None):
    """
    Load the portfolio profile

    Returns:
        Profile: Parsed content (defaults when the file is unusable)
    """
    data = load_data_from_json(path)
    try:
        return Profile.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        current_app.logger.error(f"Invalid portfolio content: {str(e)}")
        return Profile.from_dict(get_default_portfolio_data())


def get_global_meta(profile=None):
    """Get default SEO meta tags"""
    title = current_app.config.get('SITE_TITLE', '')
    if profile is not None and profile.name:
        title = profile.name
    return {
        'title': f'{title} | Portfolio',
        'description': current_app.config.get('SITE_DESCRIPTION', ''),
        'keywords': 'portfolio, projects, software, student'
    }


__all__ = [
    'get_default_portfolio_data',
    'load_data_from_json',
    'load_data',
    'get_global_meta'
]
