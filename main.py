"""
Wordle - Main Entry Point

This is the main entry point for playing Wordle in a terminal.
It loads configuration and word lists, then starts a console session.
"""

import argparse
import sys

import colorama

from wordle import ConfigurationError, InvalidGuessError, create_game
from wordle.config import config
from wordle.controllers import ConsoleController
from wordle.utils.game_logger import initialize_game_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Wordle in the terminal.")
    parser.add_argument("--answer", default=None, help="Use a fixed answer instead of a random one")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random answer selection")
    parser.add_argument("--env", choices=sorted(config), default="default",
                        help="Configuration profile to load")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main function to load the game and run a console session."""
    args = parse_args(argv)
    config_class = config[args.env]
    if args.seed is not None:
        config_class = type(config_class.__name__, (config_class,), {'RANDOM_SEED': args.seed})

    try:
        game_logger = initialize_game_logger(config_class)
    except ConfigurationError as e:
        print(f"Error configuring logging: {e}", file=sys.stderr)
        return 1

    color = config_class.COLOR_OUTPUT and not args.no_color
    if color:
        colorama.just_fix_windows_console()

    try:
        game = create_game(config_class, answer=args.answer)
    except (FileNotFoundError, ConfigurationError, InvalidGuessError) as e:
        game_logger.log_error(e, 'startup')
        print(f"Error starting game: {e}", file=sys.stderr)
        return 1

    game_logger.logger.info("Wordle session starting (game %s)", game.game_id)

    controller = ConsoleController(
        game,
        max_prompt_attempts=config_class.MAX_PROMPT_ATTEMPTS,
        color=color,
        game_logger=game_logger,
    )

    try:
        controller.play()
    except KeyboardInterrupt:
        print("\nGoodbye!")
        game_logger.log_game_event(game.game_id, 'game_interrupted',
                                   guesses_made=game.guesses_made)
    return 0


if __name__ == '__main__':
    sys.exit(main())
