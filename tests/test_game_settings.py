"""
Tests for configuration and word list loading.
"""

import pytest

from wordle import create_game
from wordle.config import TestingConfig, config
from wordle.config.game_settings import (
    ANSWERS_FILE,
    DICTIONARY_FILE,
    load_vocabulary,
    load_word_list,
    normalize_word_list,
    validate_word_list_integrity,
)
from wordle.exceptions import ConfigurationError
from wordle.models.game import GameStatus


def test_load_word_list_strips_and_lowercases(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Speed\n\n  erase \nALLOW\n", encoding="utf-8")

    assert load_word_list(str(path)) == ["speed", "erase", "allow"]


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.txt"))


def test_shipped_word_lists_are_valid():
    answers = load_word_list(ANSWERS_FILE)
    dictionary = load_word_list(DICTIONARY_FILE)

    assert validate_word_list_integrity(answers)
    assert validate_word_list_integrity(dictionary)


def test_load_vocabulary_merges_answers():
    vocabulary = load_vocabulary()

    for word in vocabulary.answers:
        assert vocabulary.validate(word)
    assert vocabulary.validate("erase")
    assert vocabulary.validate("speed")


def test_load_vocabulary_rejects_bad_list(tmp_path):
    answers = tmp_path / "answers.txt"
    dictionary = tmp_path / "dictionary.txt"
    answers.write_text("speed\ntoolong\n", encoding="utf-8")
    dictionary.write_text("erase\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_vocabulary(str(answers), str(dictionary))


@pytest.mark.parametrize("words", [
    [],
    ["speed", "eras"],
    ["speed", "er4se"],
    ["speed", "ERASE"],
    ["speed", "erase", "speed"],
])
def test_validate_word_list_integrity_failures(words):
    with pytest.raises(ConfigurationError):
        validate_word_list_integrity(words)


def test_normalize_word_list_strips_and_lowercases():
    assert normalize_word_list([" Speed\n", "ERASE"]) == ["speed", "erase"]
    assert normalize_word_list(["tree"], word_length=4) == ["tree"]
    assert normalize_word_list([], allow_empty=True) == []


@pytest.mark.parametrize("words", [
    [],
    ["speed", 12345],
    ["speed", None],
    ["speed", "toolong"],
    ["speed", "er4se"],
])
def test_normalize_word_list_failures(words):
    with pytest.raises(ConfigurationError):
        normalize_word_list(words, label="answers list")


def test_validate_word_list_integrity_rejects_padding():
    with pytest.raises(ConfigurationError, match="lowercase"):
        validate_word_list_integrity(["speed", " erase"])


def test_config_mapping():
    assert config['testing'] is TestingConfig
    assert config['default'] is config['development']
    assert TestingConfig.LOG_DIR is None
    assert TestingConfig.WORD_LENGTH == 5


def test_create_game_from_config():
    game = create_game(TestingConfig, answer="Crane")

    assert game.answer == "crane"
    assert game.max_guesses == TestingConfig.MAX_GUESSES
    assert game.status is GameStatus.NOT_STARTED


def test_create_game_seeded_answer_is_reproducible():
    first = create_game(TestingConfig)
    second = create_game(TestingConfig)

    assert first.answer == second.answer
    assert first.answer in first.vocabulary.answers
