"""
Vocabulary Service

Holds the pool of possible answers and the set of accepted guesses.
"""

import random
from typing import FrozenSet, Iterable, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, normalize_word_list
from ..exceptions import ConfigurationError


class Vocabulary:
    """
    Immutable answers/dictionary pair.

    The dictionary always contains every answer. Membership checks go
    through a frozenset, so validating a word costs a single hash lookup.
    Instances are read-only and may be shared between games.
    """

    __slots__ = ('_answers', '_dictionary', '_word_length', '_rng')

    def __init__(self,
                 answers: Iterable[str],
                 dictionary: Iterable[str],
                 word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None):
        self._answers: Tuple[str, ...] = tuple(
            normalize_word_list(answers, word_length, 'answers list', allow_empty=True)
        )
        self._dictionary: FrozenSet[str] = frozenset(
            normalize_word_list(dictionary, word_length, 'dictionary list', allow_empty=True)
        )
        self._word_length = word_length
        self._rng = rng if rng is not None else random.Random()

        missing = [word for word in self._answers if word not in self._dictionary]
        if missing:
            raise ConfigurationError(f"Answers missing from dictionary: {missing[:10]}")

    @classmethod
    def merge(cls,
              answers: Iterable[str],
              dictionary: Iterable[str],
              word_length: int = WORD_LENGTH,
              rng: Optional[random.Random] = None) -> 'Vocabulary':
        """
        Build a Vocabulary whose dictionary is the union of both lists.

        Args:
            answers: Words an answer may be drawn from
            dictionary: Additional words accepted as guesses
            word_length: Required length of every word
            rng: Random source used by pick_random_answer

        Raises:
            ConfigurationError: If either list is empty or holds a malformed word
        """
        answer_words = normalize_word_list(answers, word_length, 'answers list')
        dictionary_words = normalize_word_list(dictionary, word_length, 'dictionary list')
        return cls(
            answer_words,
            frozenset(dictionary_words).union(answer_words),
            word_length=word_length,
            rng=rng,
        )

    @property
    def answers(self) -> Tuple[str, ...]:
        return self._answers

    @property
    def dictionary(self) -> FrozenSet[str]:
        return self._dictionary

    @property
    def word_length(self) -> int:
        return self._word_length

    def validate(self, word) -> bool:
        """Case-insensitive dictionary membership test."""
        if not isinstance(word, str):
            return False
        return word.lower() in self._dictionary

    def pick_random_answer(self) -> str:
        """Select an answer uniformly at random."""
        if not self._answers:
            raise ConfigurationError("Answer list cannot be empty")
        return self._rng.choice(self._answers)

    def __contains__(self, word) -> bool:
        return self.validate(word)

    def __len__(self) -> int:
        return len(self._dictionary)

    def __repr__(self) -> str:
        return (f"Vocabulary(answers={len(self._answers)}, "
                f"dictionary={len(self._dictionary)}, word_length={self._word_length})")
