"""
Helper Functions

Console rendering helpers for boards and letter summaries.
"""

import string
from typing import Dict, Sequence

from colorama import Fore, Style

from ..models.game import GradedRow, LetterStatus

STATUS_COLORS: Dict[LetterStatus, str] = {
    LetterStatus.CORRECT: Fore.GREEN,
    LetterStatus.PRESENT: Fore.YELLOW,
    LetterStatus.ABSENT: Fore.WHITE,
    LetterStatus.UNUSED: '',
}


def colorize(text: str, status: LetterStatus, color: bool = True) -> str:
    """Wrap text in the color for a letter status."""
    if not color or status is LetterStatus.UNUSED:
        return text
    return f"{STATUS_COLORS[status]}{text}{Style.RESET_ALL}"


def render_row(row: GradedRow, color: bool = True) -> str:
    return "".join(colorize(cell.letter.upper(), cell.status, color) for cell in row)


def render_board(board: Sequence[GradedRow],
                 word_length: int,
                 guesses_made: int,
                 remaining_guesses: int,
                 color: bool = True) -> str:
    """
    Draw the populated rows of a board inside a border, followed by guess counts.

    Returns an empty string before the first guess.
    """
    if guesses_made == 0:
        return ""

    border = f"+{'-' * word_length}+"
    lines = [border]
    for row in board[:guesses_made]:
        lines.append(f"|{render_row(row, color)}|")
    lines.append(border)
    lines.append(f"Guesses made: {guesses_made}")
    lines.append(f"Guesses left: {remaining_guesses}")
    return "\n".join(lines)


def render_game(game, color: bool = True) -> str:
    return render_board(game.board, game.word_length, game.guesses_made,
                        game.remaining_guesses, color)


def render_letter_status(letter_status: Dict[str, LetterStatus], color: bool = True) -> str:
    """Alphabet summary with every guessed letter in its best known color."""
    letters = []
    for letter in string.ascii_lowercase:
        status = letter_status.get(letter, LetterStatus.UNUSED)
        letters.append(colorize(letter.upper(), status, color))
    return " ".join(letters)


def render_intro(word_length: int, max_guesses: int, color: bool = True) -> str:
    return "\n".join([
        "Welcome to Wordle!",
        f"You have {max_guesses} guesses to guess the {word_length} letter word.",
        f"{colorize('Green', LetterStatus.CORRECT, color)} letters are in the word at the correct position",
        f"{colorize('Yellow', LetterStatus.PRESENT, color)} letters are in the word at the wrong position",
        f"{colorize('White', LetterStatus.ABSENT, color)} letters are not in the word at all",
    ])
