"""
Console Controller

Runs an interactive game in a terminal: prompts for guesses, draws the board
and reports the result.
"""

import sys
from typing import Callable, Optional, TextIO

from ..exceptions import InvalidGuessError
from ..models.game import GameState
from ..services.game_service import Game
from ..utils.game_logger import GameLogger, get_game_logger
from ..utils.helpers import render_game, render_intro, render_letter_status


class ConsoleController:
    """
    Drives one Game from an input source.

    The input function and output stream are injected so that sessions can
    be scripted in tests. Invalid input is re-prompted at most
    max_prompt_attempts times per guess before the session is abandoned.
    """

    def __init__(self,
                 game: Game,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Optional[TextIO] = None,
                 max_prompt_attempts: int = 10,
                 color: bool = True,
                 game_logger: Optional[GameLogger] = None):
        self.game = game
        self.input_func = input_func if input_func is not None else input
        self.output = output if output is not None else sys.stdout
        self.max_prompt_attempts = max_prompt_attempts
        self.color = color
        self.game_logger = game_logger if game_logger is not None else get_game_logger()

    def _print(self, text: str = "") -> None:
        print(text, file=self.output)

    def prompt_guess(self) -> Optional[str]:
        """
        Ask for a guess until a dictionary word is entered.

        Returns:
            The accepted word, or None if input ended or attempts ran out
        """
        for attempt in range(1, self.max_prompt_attempts + 1):
            try:
                guess = self.input_func("Enter your guess: ").strip()
            except EOFError:
                return None

            # Redundant with Game validation, keeps the retry loop out of the game
            if self.game.vocabulary.validate(guess):
                return guess

            self._print("Invalid guess, try again!")
            self.game_logger.log_user_action(
                'invalid_guess', self.game.game_id, guess=guess, attempt=attempt
            )

        self.game_logger.log_game_event(
            self.game.game_id, 'prompt_attempts_exhausted',
            max_prompt_attempts=self.max_prompt_attempts
        )
        return None

    def print_board(self) -> None:
        board = render_game(self.game, self.color)
        if board:
            self._print(board)
            self._print(render_letter_status(self.game.letter_status, self.color))

    def play(self) -> GameState:
        """
        Play the game to completion in the console.

        Returns:
            Final GameState snapshot (incomplete if the session was abandoned)
        """
        self.game.start()
        self.game_logger.log_game_event(
            self.game.game_id, 'game_started',
            word_length=self.game.word_length, max_guesses=self.game.max_guesses
        )
        self._print(render_intro(self.game.word_length, self.game.max_guesses, self.color))

        while not self.game.complete:
            self.print_board()

            guess = self.prompt_guess()
            if guess is None:
                self._print("Game abandoned.")
                self.game_logger.log_game_event(self.game.game_id, 'game_abandoned',
                                                guesses_made=self.game.guesses_made)
                return self.game.get_state()

            try:
                row = self.game.submit_guess(guess)
            except InvalidGuessError as e:
                self.game_logger.log_error(e, 'submit_guess', self.game.game_id)
                self._print(str(e))
                continue

            self.game_logger.log_user_action(
                'submit_guess', self.game.game_id,
                guess=self.game.last_guess,
                result=[cell.status.value for cell in row]
            )

        self.print_board()
        state = self.game.get_state()
        self.game_logger.log_state(state, 'game_over')

        if self.game.winner:
            self._print("You win!")
            self.game_logger.log_game_event(self.game.game_id, 'game_won',
                                            guesses_made=self.game.guesses_made)
        else:
            self._print(f"You lose! The answer was: {self.game.answer.upper()}")
            self.game_logger.log_game_event(self.game.game_id, 'game_lost',
                                            answer=self.game.answer)

        return state
