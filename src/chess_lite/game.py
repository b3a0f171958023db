"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of Chess Lite -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess_lite.board import Board
from src.chess_lite.moves import (
    AcceptedMove,
    EnPassantWindow,
    Move,
    Verdict,
    pawn_direction,
    validate_move,
)
from src.chess_lite.notation import describe
from src.chess_lite.pieces import (
    COLOR_TO_CODE,
    Color,
    PieceType,
    color_from_code,
    opponent,
)
from src.chess_lite.square import BOARD_SIZE, Square
from src.core.exceptions import GameStateError
from src.core.models import GameModel, RowCol
from src.core.shared_types import IllegalReason

logger = logging.getLogger(__name__)

# White always opens. The move number goes up every time the turn comes back to this color.
STARTING_COLOR = Color.WHITE


def _square_from_model(row_col: Optional[RowCol]) -> Optional[Square]:
    return Square(*row_col) if row_col is not None else None


def _square_to_model(square: Optional[Square]) -> Optional[RowCol]:
    return (square.row, square.col) if square is not None else None


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Color = STARTING_COLOR
    move_number: int = 1
    is_over: bool = False
    en_passant: Optional[EnPassantWindow] = None
    moves: list[str] = field(default_factory=list)  # notation strings, append-only

    @classmethod
    def new_game(cls) -> Self:
        """Fresh game from the starting position"""
        return cls(board=Board.starting_position())

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if len(model.board) != BOARD_SIZE or any(
            len(row) != BOARD_SIZE for row in model.board
        ):
            raise GameStateError(
                f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got {len(model.board)} rows."
            )
        if (model.en_passant_target is None) != (model.en_passant_pawn is None):
            raise GameStateError(
                "En passant target and pawn must either both be set or both be empty."
            )

        # create the Game
        target = _square_from_model(model.en_passant_target)
        victim = _square_from_model(model.en_passant_pawn)
        en_passant = (
            EnPassantWindow(target, victim)
            if target is not None and victim is not None
            else None
        )
        return cls(
            board=Board.from_codes(model.board),
            turn=color_from_code(model.turn),
            move_number=model.move_number,
            is_over=model.is_over,
            en_passant=en_passant,
            moves=list(model.moves),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_codes(),
            turn=COLOR_TO_CODE[self.turn],
            move_number=self.move_number,
            is_over=self.is_over,
            en_passant_target=_square_to_model(
                self.en_passant.target if self.en_passant else None
            ),
            en_passant_pawn=_square_to_model(
                self.en_passant.victim if self.en_passant else None
            ),
            moves=list(self.moves),
        )

    def make_move(self, from_square: Square, to_square: Square) -> Verdict:
        """
        Attempt to make a move
        -----

        1. refuse if the game already ended (a King got taken)
        2. check legality of the move
        3. snapshot what the move does (capture? en passant?) BEFORE touching the board
        4. update the board (NOTE: en passant also removes the pawn that got passed)
        5. update the en passant window
        6. promote the pawn if it reached the far rank
        7. end the game if a King got taken
        8. update turn + move counter
        9. record the move

        Nothing gets mutated when the move is rejected.
        """
        if self.is_over:
            return Verdict.illegal(IllegalReason.GAME_OVER)

        move = Move(from_square, to_square)
        verdict = validate_move(self.board, move, self.turn, self.en_passant)
        if not verdict.ok:
            return verdict

        # Store move info before update
        accepted_move = AcceptedMove.from_move_and_board(
            move, self.board, self.en_passant
        )

        self._update_board(accepted_move)
        self._update_en_passant_window(accepted_move)
        if accepted_move.is_promotion:
            self._promote_pawn(move.to_square)
        if accepted_move.captures_king:
            self._end_game()
        self._update_turn()
        self._update_moves(accepted_move)
        return verdict

    # -- PRIVATE HELPERS ---
    def _update_board(self, move: AcceptedMove) -> None:
        self.board.move_piece(move.move)
        if move.is_en_passant:
            # for the typechecker: en passant always has a captured square
            assert move.captured_square is not None
            self.board.remove_piece(move.captured_square)

    def _update_en_passant_window(self, move: AcceptedMove) -> None:
        """The window of the previous move always closes. Only a pawn double-step opens a new one."""
        self.en_passant = None
        if move.is_double_step:
            direction = pawn_direction(move.moving_piece.color)
            skipped = move.move.from_square.shifted(direction, 0)
            self.en_passant = EnPassantWindow(
                target=skipped, victim=move.move.to_square
            )

    def _promote_pawn(self, square: Square) -> None:
        """Auto-promotion: always a Queen"""
        self.board.promote_piece(square, to=PieceType.QUEEN)

    def _end_game(self) -> None:
        logger.info(
            "%s captured the king after %d moves. Game over.",
            self.turn.name.lower(),
            len(self.moves) + 1,
        )
        self.is_over = True

    def _update_turn(self) -> None:
        self.turn = opponent(self.turn)
        if self.turn == STARTING_COLOR:
            self.move_number += 1

    def _update_moves(self, move: AcceptedMove) -> None:
        self.moves.append(
            describe(
                move.move,
                move.moving_piece.type,
                is_capture=move.is_capture,
                is_promotion=move.is_promotion,
                is_en_passant=move.is_en_passant,
                is_game_ending=move.captures_king,
            )
        )
