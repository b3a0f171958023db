"""Implementation of (Game)Repository that keeps the single game in process memory"""

from copy import deepcopy

from src.core.models import GameModel


class InMemoryGameRepository:
    """
    Data stored in a plain attribute. State is lost when the process stops.

    Models are copied going in and coming out, so a caller mutating its GameModel never touches the stored record
    (the same guarantee a real database gives).
    """

    def __init__(self) -> None:
        self._game: GameModel | None = None

    def get_game(self) -> GameModel | None:
        """Get the current game, if one is stored."""
        return deepcopy(self._game)

    def save_game(self, game: GameModel) -> GameModel:
        """Store the game (replacing whatever was stored) and return the stored data."""
        self._game = deepcopy(game)
        return deepcopy(self._game)

    def clear(self) -> None:
        """Remove the stored game."""
        self._game = None
