"""
Game Logger Module for Wordle

This module provides structured logging for player actions, game events
and errors raised while a console session is running. The game core itself
never logs; the application layer reports through this module.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..exceptions import ConfigurationError


def resolve_log_level(level) -> int:
    """Translate a level name such as 'INFO' (or a numeric level) to an int."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level: {level!r}")
    return resolved


class GameLogger:
    """
    Centralized logging system for Wordle sessions.

    Features:
    - Player action tracking (guesses, rejected input)
    - Game event logging (start, win, loss)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = "logs", level: str = "INFO"):
        self.level = resolve_log_level(level)
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = self._setup_logger()

    @property
    def log_file(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        """Setup the game logger with file and console handlers."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        if self.log_file is not None:
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player actions with full context.

        Args:
            action: Type of action (e.g., 'submit_guess', 'invalid_guess')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events (starts, wins, losses, etc.).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_started', 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_state(self, state, event: str = 'state_snapshot'):
        """Log a GameState snapshot at debug level."""
        details = self._sanitize_state(state.to_dict())
        self.logger.debug(self._create_log_entry('GAME_STATE', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def _sanitize_state(self, state: Dict[str, Any]) -> Dict[str, Any]:
        """Keep essential game state info but limit verbosity."""
        return {
            'game_id': state.get('game_id'),
            'status': state.get('status'),
            'guesses_made': state.get('guesses_made'),
            'max_guesses': state.get('max_guesses'),
            'guesses_count': len(state.get('guesses', [])),
            'answer_revealed': state.get('answer') is not None
        }

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events for today's log file."""
        log_file = self.log_file
        if log_file is None:
            return {'error': 'File logging is disabled'}
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'game_events': 0,
            'errors': 0
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif '"ERROR"' in line:
                        stats['errors'] += 1

        return stats


# Global logger instance
_game_logger = None


def get_game_logger() -> GameLogger:
    """Get the global game logger, creating a console-only one if needed."""
    global _game_logger
    if _game_logger is None:
        _game_logger = GameLogger(log_dir=None)
    return _game_logger


def initialize_game_logger(config_class) -> GameLogger:
    """Initialize the global game logger from a configuration class."""
    global _game_logger
    _game_logger = GameLogger(log_dir=config_class.LOG_DIR, level=config_class.LOG_LEVEL)
    return _game_logger
