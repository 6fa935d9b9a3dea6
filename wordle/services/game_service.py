"""
Game Service

Contains the core game logic: letter grading and the single-game state machine.
"""

import uuid
from collections import Counter
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_GUESSES
from ..exceptions import InvalidGuessError, InvalidStateError
from ..models.game import (
    LETTER_STATUS_RANK,
    GameState,
    GameStatus,
    GradedLetter,
    GradedRow,
    LetterStatus,
)
from ..utils.decorators import require_in_progress, require_not_started
from .vocabulary import Vocabulary


def grade_guess(guess: str, answer: str) -> GradedRow:
    """
    Grades a guess against the answer with multiset letter accounting.

    Exact matches are consumed from the answer's letter counts before any
    misplaced letter is credited, so a repeated guess letter is never
    credited more times than it occurs in the answer.

    Args:
        guess: The guessed word
        answer: The secret word, same length as the guess

    Returns:
        One GradedLetter per position of the guess

    Raises:
        ValueError: If the words differ in length
    """
    if len(guess) != len(answer):
        raise ValueError(f"Guess '{guess}' and answer must have the same length")

    remaining = Counter(answer)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            statuses[i] = LetterStatus.CORRECT
            remaining[g] -= 1

    # Second pass: misplaced letters while unclaimed copies remain
    for i, g in enumerate(guess):
        if statuses[i] is not None:
            continue
        if remaining[g] > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[g] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return tuple(GradedLetter(letter, status) for letter, status in zip(guess, statuses))


class Game:
    """
    A single round of Wordle.

    This class handles:
    - Answer selection and validation against the vocabulary
    - Guess validation and grading
    - Board history bounded by max_guesses
    - NOT_STARTED -> IN_PROGRESS -> WON/LOST transitions

    A Game is not safe for concurrent mutation; callers sharing one across
    threads must serialize submit_guess themselves.
    """

    def __init__(self,
                 vocabulary: Vocabulary,
                 answer: Optional[str] = None,
                 max_guesses: int = MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError("max_guesses must be at least 1")

        self.game_id = str(uuid.uuid4())
        self._vocabulary = vocabulary
        self._max_guesses = max_guesses
        self._board: List[GradedRow] = []
        self._guesses: List[str] = []
        self._letter_status: Dict[str, LetterStatus] = {}
        self._last_guess = ""
        self._started = False
        self._answer = ""

        self.set_answer(answer if answer is not None else vocabulary.pick_random_answer())

    @property
    def answer(self) -> str:
        return self._answer

    def set_answer(self, answer: str) -> None:
        """
        Set the answer for this game.

        The word is validated first, so an invalid word is reported as such
        even after the game has started.

        Raises:
            InvalidGuessError: If the answer is not a valid dictionary word
            InvalidStateError: If the game has already started
        """
        if not self._vocabulary.validate(answer):
            raise InvalidGuessError(answer, "Answer must be a valid word in the dictionary")
        if self._started:
            raise InvalidStateError("Game has already started.")
        self._answer = answer.lower()

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @vocabulary.setter
    @require_not_started
    def vocabulary(self, vocabulary: Vocabulary) -> None:
        if not vocabulary.validate(self._answer):
            raise InvalidGuessError(self._answer, "Current answer is not in the new dictionary")
        self._vocabulary = vocabulary

    @property
    def board(self) -> Tuple[GradedRow, ...]:
        return tuple(self._board)

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._guesses)

    @property
    def last_guess(self) -> str:
        return self._last_guess

    @property
    def guesses_made(self) -> int:
        return len(self._board)

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def remaining_guesses(self) -> int:
        return self._max_guesses - self.guesses_made

    @property
    def word_length(self) -> int:
        return self._vocabulary.word_length

    @property
    def started(self) -> bool:
        return self._started

    @property
    def winner(self) -> bool:
        # Before any guess last_guess is "" so this is False
        return self._last_guess.lower() == self._answer.lower()

    @property
    def complete(self) -> bool:
        return self.guesses_made >= self._max_guesses or self.winner

    @property
    def status(self) -> GameStatus:
        if self.winner:
            return GameStatus.WON
        if self.complete:
            return GameStatus.LOST
        if self._started:
            return GameStatus.IN_PROGRESS
        return GameStatus.NOT_STARTED

    @property
    def letter_status(self) -> Dict[str, LetterStatus]:
        """Best grade seen so far for every letter that has been guessed."""
        return dict(self._letter_status)

    def start(self) -> None:
        """Mark the game as started, freezing the answer and vocabulary."""
        self._started = True

    @require_in_progress
    def submit_guess(self, guess: str) -> GradedRow:
        """
        Validates, grades and records a guess.

        Args:
            guess: The guessed word, any letter case

        Returns:
            The graded row appended to the board

        Raises:
            InvalidStateError: If the game is already complete
            InvalidGuessError: If the guess is not a dictionary word
        """
        if not self._vocabulary.validate(guess):
            raise InvalidGuessError(guess, f"Guess must be a valid {self.word_length}-letter word")

        normalized_guess = guess.lower()
        row = grade_guess(normalized_guess, self._answer)

        self._board.append(row)
        self._guesses.append(normalized_guess)
        self._last_guess = normalized_guess
        self._update_letter_status(row)
        self._started = True

        return row

    def _update_letter_status(self, row: GradedRow) -> None:
        # Status can only progress in rank order
        for cell in row:
            current = self._letter_status.get(cell.letter, LetterStatus.UNUSED)
            if LETTER_STATUS_RANK[cell.status] > LETTER_STATUS_RANK[current]:
                self._letter_status[cell.letter] = cell.status

    def get_state(self) -> GameState:
        """
        Returns a snapshot of the game (without revealing the answer until it is over).
        """
        return GameState(
            game_id=self.game_id,
            status=self.status,
            guesses_made=self.guesses_made,
            max_guesses=self._max_guesses,
            word_length=self.word_length,
            guesses=self.guesses,
            board=self.board,
            letter_status={letter: status.value for letter, status in self._letter_status.items()},
            answer=self._answer if self.complete else None,
        )

    def __repr__(self) -> str:
        return (f"Game(game_id={self.game_id!r}, status={self.status.value}, "
                f"guesses_made={self.guesses_made}/{self._max_guesses})")
