"""Protocol repository (Chess Lite keeps a single game in memory, but the Service only depends on this protocol)"""

from typing import Protocol

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self) -> GameModel | None:
        """Get the current game, if one is stored."""
        ...

    def save_game(self, game: GameModel) -> GameModel:
        """Store the game (replacing whatever was stored) and return the stored data."""
        ...

    def clear(self) -> None:
        """Remove the stored game."""
        ...
