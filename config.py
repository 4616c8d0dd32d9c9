import os


def _int_env(name, default):
    value = os.environ.get(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        # left as-is; create_app() reports it and falls back to the default
        return value


# Timing settings checked by create_app(): name -> (default, minimum)
TIMING_SETTINGS = {
    'TYPEWRITER_TYPE_SPEED_MS': (80, 1),
    'TYPEWRITER_DELETE_SPEED_MS': (40, 1),
    'TYPEWRITER_DELAY_BETWEEN_MS': (1800, 1),
    'MODAL_CLOSE_DELAY_MS': (300, 0),
}


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')

    # JSON Settings
    JSON_AS_ASCII = False

    # Content Settings
    CONTENT_PATH = os.environ.get(
        'CONTENT_PATH',
        os.path.join(os.path.dirname(os.path.abspath(__file__)), 'content', 'portfolio.json')
    )

    # Typewriter Settings (milliseconds)
    TYPEWRITER_TYPE_SPEED_MS = _int_env('TYPEWRITER_TYPE_SPEED_MS', 80)
    TYPEWRITER_DELETE_SPEED_MS = _int_env('TYPEWRITER_DELETE_SPEED_MS', 40)
    TYPEWRITER_DELAY_BETWEEN_MS = _int_env('TYPEWRITER_DELAY_BETWEEN_MS', 1800)

    # Modal Settings - must match the overlay's CSS exit transition
    MODAL_CLOSE_DELAY_MS = _int_env('MODAL_CLOSE_DELAY_MS', 300)

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Site
    SITE_TITLE = os.environ.get('SITE_TITLE', 'James Zhang')
    SITE_DESCRIPTION = os.environ.get(
        'SITE_DESCRIPTION',
        'Student at Vanderbilt. Projects, skills, and ways to get in touch.'
    )


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration by name, or based on FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
