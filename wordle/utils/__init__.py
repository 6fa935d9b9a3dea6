"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import require_in_progress, require_not_started
from .game_logger import GameLogger, get_game_logger, initialize_game_logger
from .helpers import colorize, render_board, render_game, render_intro, render_letter_status

__all__ = [
    'require_in_progress', 'require_not_started',
    'GameLogger', 'get_game_logger', 'initialize_game_logger',
    'colorize', 'render_board', 'render_game', 'render_intro', 'render_letter_status'
]
