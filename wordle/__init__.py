"""
Wordle Game Package

This package contains a modular implementation of a single-player Wordle game:
vocabulary handling, letter grading, the game state machine and a console front end.
"""

import random
from typing import Optional

from .config import Config, load_vocabulary
from .exceptions import ConfigurationError, InvalidGuessError, InvalidStateError, WordleError
from .models import GameState, GameStatus, GradedLetter, LetterStatus
from .services import Game, Vocabulary, grade_guess


def create_game(config_class=Config, answer: Optional[str] = None) -> Game:
    """
    Factory for Game instances wired from configuration.

    Args:
        config_class: Configuration class to use
        answer: Explicit answer, or None to draw one at random

    Returns:
        A new, not yet started Game

    Raises:
        FileNotFoundError: If a word list file is missing
        ConfigurationError: If a word list is empty or malformed
    """
    rng = random.Random(config_class.RANDOM_SEED)
    vocabulary = load_vocabulary(
        config_class.ANSWERS_FILE,
        config_class.DICTIONARY_FILE,
        word_length=config_class.WORD_LENGTH,
        rng=rng,
    )
    return Game(vocabulary, answer=answer, max_guesses=config_class.MAX_GUESSES)


__all__ = [
    'create_game',
    'Game', 'Vocabulary', 'grade_guess',
    'GameState', 'GameStatus', 'GradedLetter', 'LetterStatus',
    'WordleError', 'InvalidGuessError', 'InvalidStateError', 'ConfigurationError',
]
