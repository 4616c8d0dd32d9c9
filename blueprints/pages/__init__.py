"""
Pages Blueprint - The public portfolio page
Handles: Landing page with hero, skills, projects and contact; sitemap; robots
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
