"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Runtime configuration (environment-based)
- game_settings.py: Game rules, constants and word list loading
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_GUESSES,
    WORD_LENGTH,
    load_vocabulary,
    load_word_list,
    normalize_word_list,
    validate_word_list_integrity,
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_GUESSES', 'load_word_list', 'load_vocabulary',
    'validate_word_list_integrity', 'normalize_word_list'
]
