"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import Game, grade_guess
from .vocabulary import Vocabulary

__all__ = [
    'Game', 'grade_guess',
    'Vocabulary'
]
