"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5050))
    ORIGIN = os.getenv('ORIGIN')

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'klusuwaqn')

    # Authentication Settings
    JWT_SECRET = os.getenv('JWT_SECRET')
    JWT_EXPIRATION_DAYS = int(os.getenv('JWT_EXPIRATION_DAYS', 7))

    # Media Settings
    UPLOAD_DIR = os.getenv('UPLOAD_DIR', 'public')

    # Search Settings
    SEARCH_THRESHOLD = float(os.getenv('SEARCH_THRESHOLD', 0.3))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    JWT_SECRET = 'testing-secret-key'


def validate_environment(config_class=Config) -> List[str]:
    """
    Check the settings the server cannot start without.

    Returns:
        List[str]: Human readable problems, empty when the configuration is usable
    """
    problems = []

    if not config_class.MONGO_URI:
        problems.append("MONGO_URI is not set")

    if not config_class.JWT_SECRET or len(config_class.JWT_SECRET) < 10:
        problems.append("JWT_SECRET must be at least 10 characters long")

    if config_class.PORT <= 0:
        problems.append(f"PORT must be positive, got {config_class.PORT}")

    return problems


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
