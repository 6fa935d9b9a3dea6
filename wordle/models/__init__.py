"""
Data Models Package

Contains all data models used throughout the game.
"""

from .game import GameState, GameStatus, GradedLetter, GradedRow, LetterStatus

__all__ = ['GameState', 'GameStatus', 'GradedLetter', 'GradedRow', 'LetterStatus']
