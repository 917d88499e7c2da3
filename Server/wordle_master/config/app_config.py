"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import WORD_LENGTH as DEFAULT_WORD_LENGTH, MAX_ATTEMPTS as DEFAULT_MAX_ATTEMPTS

# Load environment variables from config.env (missing file is ignored)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8080))

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', DEFAULT_WORD_LENGTH))
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', DEFAULT_MAX_ATTEMPTS))
    DICTIONARY_FILE = os.getenv('DICTIONARY_FILE')  # None selects the packaged word list

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


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
