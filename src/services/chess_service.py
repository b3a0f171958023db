"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
import threading

from src.api.models import GameStateResponse, MoveRequest, MoveResponse
from src.chess_lite.game import Game
from src.chess_lite.square import Square
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class ChessService:
    """
    Orchestration of layers for the (single) Chess Lite game.

    Every operation runs while holding one lock: a move is validated, applied, notated and stored as a single unit,
    and a reset can never land in the middle of a move.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository
        self._lock = threading.Lock()

        # The game exists from the moment the service starts
        if self.repo.get_game() is None:
            self.repo.save_game(Game.new_game().to_model())

    # -- API routes logic ---
    def get_game_state(self) -> GameStateResponse:
        """Retrieve current game state."""
        with self._lock:
            game_model = self._fetch_game()
        return GameStateResponse.from_model(game_model)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt."""
        # for the typechecker: MoveRequest refuses to be built without both squares
        assert request.from_square is not None and request.to_square is not None
        from_square = Square(request.from_square.r, request.from_square.c)
        to_square = Square(request.to_square.r, request.to_square.c)

        with self._lock:
            # Retrieve stored GameModel and create a new Game instance from it
            game = Game.from_model(self._fetch_game())

            # Attempt the move
            verdict = game.make_move(from_square, to_square)
            if not verdict.ok:
                # nothing gets stored: the rejected attempt leaves the stored game untouched
                logger.debug(
                    "Rejected move %s -> %s: %s", from_square, to_square, verdict.reason
                )
                return MoveResponse(ok=False, reason=str(verdict.reason))

            # Capture updated state in GameModel and store it
            after_move = self.repo.save_game(game.to_model())

        logger.info("Accepted move %s (%s)", game.moves[-1], after_move.turn)
        return MoveResponse(ok=True, game=GameStateResponse.from_model(after_move))

    def reset_game(self) -> MoveResponse:
        """Throw away the current game and start from the initial position."""
        with self._lock:
            fresh_game = self.repo.save_game(Game.new_game().to_model())
        logger.info("Game reset.")
        return MoveResponse(ok=True, game=GameStateResponse.from_model(fresh_game))

    # -- Internal helpers --
    def _fetch_game(self) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game()
        if game_model is None:
            raise RepositoryError("No game found. Reset to start a new one.")
        return game_model
