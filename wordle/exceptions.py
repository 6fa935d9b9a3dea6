"""
Wordle Exceptions

Error kinds raised by the vocabulary and game services.
"""


class WordleError(Exception):
    """Base class for all game errors."""


class InvalidGuessError(WordleError, ValueError):
    """A guess or answer failed length or dictionary validation."""

    def __init__(self, word, reason: str = "Word not in word list"):
        super().__init__(f"Invalid word {word!r}: {reason}")
        self.word = word
        self.reason = reason


class InvalidStateError(WordleError, RuntimeError):
    """An operation was attempted in a game state that forbids it."""


class ConfigurationError(WordleError, ValueError):
    """Word lists are empty or contain malformed words."""
