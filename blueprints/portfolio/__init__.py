"""
Portfolio Blueprint - Project details and interactive data
Handles: Project modal fragments, project JSON, typewriter timeline
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
