"""
Pytest configuration for the Wordle game.

Provides a small deterministic vocabulary so tests never depend on the
shipped word lists or on process-wide random state.
"""

import random

import pytest

from wordle.services.vocabulary import Vocabulary
from wordle.utils.game_logger import GameLogger

ANSWERS = ["speed", "allow", "crane", "apple", "level"]
DICTIONARY = ["erase", "lolly", "stare", "raise", "belle", "lemon", "trace", "pizza", "mount", "fjord", "steep"]


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def vocabulary(rng):
    return Vocabulary.merge(ANSWERS, DICTIONARY, rng=rng)


@pytest.fixture
def game_logger():
    return GameLogger(log_dir=None)
