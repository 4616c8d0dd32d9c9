"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern

This module creates the Flask application, loads configuration and wires
logging, blueprints, error handlers and request hooks. Route handling lives
in the blueprints.
"""

import logging
import os
from datetime import datetime
from flask import Flask, render_template, request
from config import TIMING_SETTINGS, get_config
from interactions import setup_logging

from blueprints.pages import pages_bp
from blueprints.portfolio import portfolio_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    configure_logging(app)
    check_timing_settings(app)

    # Register Jinja helpers
    from utils.helpers import link_attrs, button_class
    app.jinja_env.globals['link_attrs'] = link_attrs
    app.jinja_env.globals['button_class'] = button_class
    app.logger.info('✓ Registered Jinja helpers: link_attrs, button_class')

    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def configure_logging(app):
    """Apply LOG_LEVEL to the Flask logger and the interactions package"""
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)
    setup_logging(level)


def check_timing_settings(app):
    """Replace unusable timing values (non-integer or below minimum) with defaults"""
    for name, (default, minimum) in TIMING_SETTINGS.items():
        value = app.config.get(name, default)
        try:
            value = int(value)
        except (TypeError, ValueError):
            value = None
        if value is None or value < minimum:
            app.logger.warning(
                f"Invalid {name}={app.config.get(name)!r} (expected an integer >= {minimum}); "
                f"using {default}"
            )
            value = default
        app.config[name] = value


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(portfolio_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        if request.path.startswith('/api/'):
            return {'error': 'Not found'}, 404
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if request.path.startswith('/api/'):
            return {'error': 'Internal server error'}, 500
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values available in every template"""
        from utils.data import get_global_meta
        from utils.ui_helpers import inject_blueprint_assets, get_page_specific_class, get_ui_config

        blueprint_assets = inject_blueprint_assets()

        page_class = get_page_specific_class(
            blueprint_assets.get('current_blueprint'),
            request.endpoint.split('.')[-1] if request.endpoint else None
        )

        return {
            'current_year': datetime.now().year,
            'default_meta': get_global_meta(),
            'ui_config': get_ui_config(),
            # Blueprint Assets
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': page_class
        }

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data: https:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')

    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
