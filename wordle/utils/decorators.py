"""
Game State Decorators

Contains decorators guarding Game methods against forbidden state transitions.
"""

from functools import wraps

from ..exceptions import InvalidStateError


def require_not_started(f):
    """
    Decorator rejecting calls once the game has started.
    """
    @wraps(f)
    def decorated_function(self, *args, **kwargs):
        if self.started:
            raise InvalidStateError("Game has already started.")
        return f(self, *args, **kwargs)

    return decorated_function


def require_in_progress(f):
    """Decorator rejecting calls once the game is complete."""
    @wraps(f)
    def decorated_function(self, *args, **kwargs):
        if self.complete:
            raise InvalidStateError("Game has already ended.")
        return f(self, *args, **kwargs)

    return decorated_function
