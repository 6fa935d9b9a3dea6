"""
Game Configuration Constants Module

This module defines the game rule constants and the word list loader.
Word lists are plain text files with one word per line.
"""

import logging
import os
import random
from collections import Counter
from typing import Final, Iterable, List, Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every answer and guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_GUESSES: Final[int] = 5
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

CONFIG_DIR: Final[str] = os.path.dirname(os.path.abspath(__file__))
ANSWERS_FILE: Final[str] = os.path.join(CONFIG_DIR, 'answers_list.txt')
DICTIONARY_FILE: Final[str] = os.path.join(CONFIG_DIR, 'dictionary_list.txt')


def load_word_list(filepath: str) -> List[str]:
    """
    Load a word list from a text file.

    Args:
        filepath: Path to the word list (one word per line)

    Returns:
        List[str]: Lowercase words in file order, blank lines skipped

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Word list file not found: {filepath}")

    words = []
    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word.lower())

    logger.debug("Loaded %d words from %s", len(words), filepath)
    return words


def load_vocabulary(answers_file: str = ANSWERS_FILE,
                    dictionary_file: str = DICTIONARY_FILE,
                    word_length: int = WORD_LENGTH,
                    rng: Optional[random.Random] = None):
    """
    Load both word lists and merge them into a Vocabulary.

    Raises:
        FileNotFoundError: If either word list is missing
        ConfigurationError: If either list is empty or malformed
    """
    from ..services.vocabulary import Vocabulary

    answers = load_word_list(answers_file)
    logger.info("Loaded %d potential answers from disk", len(answers))
    dictionary = load_word_list(dictionary_file)
    logger.info("Loaded %d dictionary words from disk", len(dictionary))

    return Vocabulary.merge(answers, dictionary, word_length=word_length, rng=rng)


def normalize_word_list(words: Iterable[str],
                        word_length: int = WORD_LENGTH,
                        label: str = 'word list',
                        allow_empty: bool = False) -> List[str]:
    """
    Strip and lowercase every word, rejecting malformed entries.

    Raises:
        ConfigurationError: If a word is not a string of word_length letters,
            or if the list is empty and allow_empty is False
    """
    normalized = []
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise ConfigurationError(
                f"Word at index {index} {word!r} in {label} is not a string"
            )
        word = word.strip().lower()
        if len(word) != word_length:
            raise ConfigurationError(
                f"Word at index {index} '{word}' in {label} is not {word_length} characters long"
            )
        if not word.isalpha():
            raise ConfigurationError(
                f"Word at index {index} '{word}' in {label} contains non-alphabetic characters"
            )
        normalized.append(word)

    if not normalized and not allow_empty:
        raise ConfigurationError(f"The {label} cannot be empty")
    return normalized


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list file's contents.

    On top of normalize_word_list's length and character checks, words must
    already be stored lowercase without padding, and appear only once.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ConfigurationError: If any validation check fails with detailed error message
    """
    normalized = normalize_word_list(words, word_length)

    for index, (word, expected) in enumerate(zip(words, normalized)):
        if word != expected:
            raise ConfigurationError(f"Word at index {index} '{word}' is not in lowercase format")

    duplicates = sorted(word for word, count in Counter(normalized).items() if count > 1)
    if duplicates:
        raise ConfigurationError(f"Duplicate words found in word list: {duplicates}")

    return True


if __name__ == "__main__":

    try:
        for path in (ANSWERS_FILE, DICTIONARY_FILE):
            word_list = load_word_list(path)
            validate_word_list_integrity(word_list)
            print(f" {os.path.basename(path)} validation passed ({len(word_list)} words)")

        print(" All configuration validation checks passed")
    except (FileNotFoundError, ConfigurationError) as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
