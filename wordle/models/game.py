"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class LetterStatus(Enum):
    """Grade tag for a single guessed letter."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"


# Order in which keyboard letter status may be upgraded
LETTER_STATUS_RANK: Dict[LetterStatus, int] = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class GameStatus(Enum):
    """Lifecycle state of a single game."""
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_complete(self) -> bool:
        return self in (GameStatus.WON, GameStatus.LOST)


@dataclass(frozen=True)
class GradedLetter:
    """One cell of the board: a letter and its grade."""
    letter: str
    status: LetterStatus


GradedRow = Tuple[GradedLetter, ...]


@dataclass(frozen=True)
class GameState:
    """Read-only snapshot of a game, safe to hand to renderers and loggers."""
    game_id: str
    status: GameStatus
    guesses_made: int
    max_guesses: int
    word_length: int
    guesses: Tuple[str, ...]
    board: Tuple[GradedRow, ...]
    letter_status: Dict[str, str]
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status.is_complete

    @property
    def won(self) -> bool:
        return self.status is GameStatus.WON

    def to_dict(self) -> Dict:
        """Plain-data form used for structured logging."""
        return {
            'game_id': self.game_id,
            'status': self.status.value,
            'guesses_made': self.guesses_made,
            'max_guesses': self.max_guesses,
            'word_length': self.word_length,
            'guesses': list(self.guesses),
            'board': [
                [(cell.letter, cell.status.value) for cell in row]
                for row in self.board
            ],
            'letter_status': dict(self.letter_status),
            'answer': self.answer,
        }
