"""
Application Configuration

Centralizes all Flask and ingredient engine configuration settings.
"""

import os

from constants import DEFAULT_MAX_MULTIPLIER, DEFAULT_MAX_INGREDIENT_LINES


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')
    JSON_SORT_KEYS = False
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max request body

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Engine settings
    DEFAULT_MEASUREMENT_SYSTEM = os.environ.get('DEFAULT_MEASUREMENT_SYSTEM', 'us')
    # Convert to DEFAULT_MEASUREMENT_SYSTEM when a request names no system
    APPLY_CONVERSION_BY_DEFAULT = _env_flag('APPLY_CONVERSION_BY_DEFAULT', False)
    MAX_MULTIPLIER = float(os.environ.get('MAX_MULTIPLIER', DEFAULT_MAX_MULTIPLIER))
    MAX_INGREDIENT_LINES = int(os.environ.get('MAX_INGREDIENT_LINES', DEFAULT_MAX_INGREDIENT_LINES))


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    APPLY_CONVERSION_BY_DEFAULT = False
    MAX_INGREDIENT_LINES = 20


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
