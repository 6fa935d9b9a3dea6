"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import ANSWERS_FILE, DICTIONARY_FILE, MAX_GUESSES, WORD_LENGTH

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(name):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""

    # Game Settings
    WORD_LENGTH = int(os.getenv('WORDLE_WORD_LENGTH', WORD_LENGTH))
    MAX_GUESSES = int(os.getenv('WORDLE_MAX_GUESSES', MAX_GUESSES))
    ANSWERS_FILE = os.getenv('WORDLE_ANSWERS_FILE', ANSWERS_FILE)
    DICTIONARY_FILE = os.getenv('WORDLE_DICTIONARY_FILE', DICTIONARY_FILE)
    RANDOM_SEED = _optional_int('WORDLE_RANDOM_SEED')

    # Console Settings
    MAX_PROMPT_ATTEMPTS = int(os.getenv('WORDLE_MAX_PROMPT_ATTEMPTS', 10))
    COLOR_OUTPUT = os.getenv('WORDLE_COLOR_OUTPUT', 'True').lower() == 'true'

    # Logging Settings
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    RANDOM_SEED = 0
    COLOR_OUTPUT = False
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
