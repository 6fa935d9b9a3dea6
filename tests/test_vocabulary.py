"""
Tests for wordle.services.vocabulary module.
"""

import random

import pytest

from wordle.exceptions import ConfigurationError
from wordle.services.vocabulary import Vocabulary

from conftest import ANSWERS, DICTIONARY


def test_merge_includes_every_answer(vocabulary):
    for word in ANSWERS:
        assert vocabulary.validate(word)
        assert word in vocabulary.dictionary


def test_merge_keeps_answers_in_order(vocabulary):
    assert vocabulary.answers == tuple(ANSWERS)
    assert len(vocabulary) == len(set(ANSWERS) | set(DICTIONARY))


def test_validate_is_case_insensitive(vocabulary):
    for word in DICTIONARY + ANSWERS:
        assert vocabulary.validate(word.upper())
        assert vocabulary.validate(word.capitalize())
    assert "SPEED" in vocabulary


def test_validate_rejects_unknown_and_malformed(vocabulary):
    assert not vocabulary.validate("zzzzz")
    assert not vocabulary.validate("spee")
    assert not vocabulary.validate("speeds")
    assert not vocabulary.validate("")
    assert not vocabulary.validate(None)
    assert not vocabulary.validate(12345)


def test_merge_normalizes_case_and_whitespace():
    vocabulary = Vocabulary.merge([" Speed\n"], ["ERASE"])
    assert vocabulary.answers == ("speed",)
    assert vocabulary.dictionary == frozenset({"speed", "erase"})


@pytest.mark.parametrize("answers,dictionary", [
    ([], ["erase"]),
    (["speed"], []),
    (["speedy"], ["erase"]),
    (["speed"], ["eras"]),
    (["spe3d"], ["erase"]),
])
def test_merge_rejects_bad_lists(answers, dictionary):
    with pytest.raises(ConfigurationError):
        Vocabulary.merge(answers, dictionary)


def test_merge_with_custom_word_length():
    vocabulary = Vocabulary.merge(["tree"], ["bush", "vine"], word_length=4)
    assert vocabulary.word_length == 4
    assert vocabulary.validate("TREE")
    with pytest.raises(ConfigurationError):
        Vocabulary.merge(["speed"], ["bush"], word_length=4)


def test_constructor_requires_answers_in_dictionary():
    with pytest.raises(ConfigurationError):
        Vocabulary(["speed"], ["erase"])


def test_pick_random_answer_uses_injected_rng():
    first = Vocabulary.merge(ANSWERS, DICTIONARY, rng=random.Random(7))
    second = Vocabulary.merge(ANSWERS, DICTIONARY, rng=random.Random(7))
    picks = [first.pick_random_answer() for _ in range(20)]
    assert picks == [second.pick_random_answer() for _ in range(20)]
    assert set(picks) <= set(ANSWERS)


def test_pick_random_answer_covers_pool(vocabulary):
    picks = {vocabulary.pick_random_answer() for _ in range(500)}
    assert picks == set(ANSWERS)


def test_pick_random_answer_empty_pool():
    vocabulary = Vocabulary([], ["erase"])
    with pytest.raises(ConfigurationError):
        vocabulary.pick_random_answer()


def test_repeated_validation_of_large_dictionary():
    dictionary = [
        a + b + c + d + e
        for a in "abcd" for b in "efgh" for c in "ijkl" for d in "mnop" for e in "qrst"
    ]
    vocabulary = Vocabulary.merge(dictionary[:10], dictionary)
    for _ in range(20):
        for word in dictionary:
            assert vocabulary.validate(word)


def test_constructor_normalizes_words():
    vocabulary = Vocabulary(["Speed"], [" SPEED ", "erase"])

    assert vocabulary.answers == ("speed",)
    assert vocabulary.dictionary == frozenset({"speed", "erase"})
    for word in vocabulary.dictionary:
        assert vocabulary.validate(word.upper())
    assert vocabulary.validate("Speed")


@pytest.mark.parametrize("answers,dictionary", [
    (["Speed"], ["Speed", "toolong"]),
    (["speed"], ["speed", "er4se"]),
    (["spee"], ["spee"]),
    (["speed"], ["speed", None]),
])
def test_constructor_rejects_malformed_words(answers, dictionary):
    with pytest.raises(ConfigurationError):
        Vocabulary(answers, dictionary)


@pytest.mark.parametrize("answers,dictionary", [
    (["speed", 12345], ["erase"]),
    (["speed"], [None]),
    (["speed"], [b"erase"]),
])
def test_merge_rejects_non_string_words(answers, dictionary):
    with pytest.raises(ConfigurationError):
        Vocabulary.merge(answers, dictionary)
