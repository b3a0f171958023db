"""
Exceptions shared across layers.

NOTE: an illegal move is NOT an exception. The rules engine answers with an IllegalReason (see src/core/shared_types.py).
These errors are for everything that should not happen during normal play: malformed requests, corrupted stored state, etc.
"""


class GameError(Exception):
    """Base class for all errors raised by this application."""


class InvalidRequestError(GameError):
    """The request could not be interpreted (missing or malformed fields)."""


class GameStateError(GameError):
    """Stored game data cannot be turned back into a valid Game."""


class RepositoryError(GameError):
    """The repository could not provide the requested game."""
