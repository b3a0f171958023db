"""
Geometry/movement rules

Key idea: Use strategy pattern to define the movement shape of each piece type.
Each rule answers "may this piece go from A to B on this board?" (no move generation).

The generic checks shared by all pieces (bounds, turn, friendly fire) are done in `validate_move()` before the rule is consulted.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.chess_lite.pieces import Color, Piece, PieceType
from src.chess_lite.square import BOARD_SIZE, Square
from src.core.shared_types import IllegalReason


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...
    def path_clear(self, from_square: Square, to_square: Square) -> bool: ...


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @property
    def d_row(self) -> int:
        return self.to_square.row - self.from_square.row

    @property
    def d_col(self) -> int:
        return self.to_square.col - self.from_square.col


@dataclass(frozen=True)
class EnPassantWindow:
    """
    Created by a pawn double-step, lives for exactly one move.

    * target: the square that was skipped over (where the capturing pawn lands)
    * victim: the square of the pawn that just double-stepped (the pawn that gets removed)
    """

    target: Square
    victim: Square


@dataclass(frozen=True)
class Verdict:
    """Outcome of a legality check: no reason means the move is legal."""

    reason: Optional[IllegalReason] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def legal(cls) -> Self:
        return cls()

    @classmethod
    def illegal(cls, reason: IllegalReason) -> Self:
        return cls(reason)


# --- PAWN GEOMETRY ---
def pawn_direction(color: Color) -> int:
    """White moves UP the board (towards row 0), Black moves DOWN"""
    return -1 if color == Color.WHITE else 1


def pawn_starting_row(color: Color) -> int:
    return BOARD_SIZE - 2 if color == Color.WHITE else 1


def promotion_row(color: Color) -> int:
    """The rank farthest away from the pawn's own side"""
    return 0 if color == Color.WHITE else BOARD_SIZE - 1


def is_double_step(move: Move, color: Color) -> bool:
    return (
        move.from_square.row == pawn_starting_row(color)
        and move.d_col == 0
        and move.d_row == 2 * pawn_direction(color)
    )


def is_en_passant_capture(
    move: Move, board: Board, color: Color, en_passant: Optional[EnPassantWindow]
) -> bool:
    """
    Diagonal pawn step onto the (empty) en passant target.

    The victim must stand on the row the pawn started from, in the file the pawn moves into,
    and must actually be an opponent's pawn.
    """
    if en_passant is None:
        return False
    if abs(move.d_col) != 1 or move.d_row != pawn_direction(color):
        return False
    if move.to_square != en_passant.target or not board.is_empty(move.to_square):
        return False
    if en_passant.victim != Square(move.from_square.row, move.to_square.col):
        return False
    victim = board.piece(en_passant.victim)
    return (
        victim is not None
        and victim.type == PieceType.PAWN
        and victim.color != color
    )


# --- MOVEMENT RULES ---
def is_legal_pawn_move(
    move: Move, board: Board, color: Color, en_passant: Optional[EnPassantWindow]
) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - can move by two from its starting rank, if both squares are empty.
    - takes diagonally (one square forward).
    - takes en passant, right after an opponent's pawn double-stepped past it.
    """
    direction = pawn_direction(color)
    target = board.piece(move.to_square)

    # pawn pushes
    if move.d_col == 0:
        if move.d_row == direction:
            return target is None
        if is_double_step(move, color):
            skipped = move.from_square.shifted(direction, 0)
            return target is None and board.is_empty(skipped)
        return False

    # diagonal captures
    if abs(move.d_col) == 1 and move.d_row == direction:
        if target is not None:
            return target.color != color
        return is_en_passant_capture(move, board, color, en_passant)

    return False


def is_legal_knight_move(
    move: Move, board: Board, color: Color, en_passant: Optional[EnPassantWindow]
) -> bool:
    """Knights always move such that |delta_row| + |delta_col| = 3 (and never in a straight line)"""
    return {abs(move.d_row), abs(move.d_col)} == {1, 2}


def is_legal_bishop_move(
    move: Move, board: Board, color: Color, en_passant: Optional[EnPassantWindow]
) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    is_diagonal = abs(move.d_row) == abs(move.d_col) > 0
    return is_diagonal and board.path_clear(move.from_square, move.to_square)


def is_legal_rook_move(
    move: Move, board: Board, color: Color, en_passant: Optional[EnPassantWindow]
) -> bool:
    """Rooks move either horizontally or vertically"""
    is_straight = (move.d_row == 0) != (move.d_col == 0)
    return is_straight and board.path_clear(move.from_square, move.to_square)


def is_legal_queen_move(
    move: Move, board: Board, color: Color, en_passant: Optional[EnPassantWindow]
) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_legal_bishop_move(move, board, color, en_passant) or is_legal_rook_move(
        move, board, color, en_passant
    )


def is_legal_king_move(
    move: Move, board: Board, color: Color, en_passant: Optional[EnPassantWindow]
) -> bool:
    """
    The king can move by a single square at the time. No castling in Chess Lite.

    The Noble moves exactly like the King, so it shares this rule.
    """
    return abs(move.d_row) <= 1 and abs(move.d_col) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Move, Board, Color, Optional[EnPassantWindow]], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: is_legal_pawn_move,
    PieceType.KNIGHT: is_legal_knight_move,
    PieceType.BISHOP: is_legal_bishop_move,
    PieceType.ROOK: is_legal_rook_move,
    PieceType.QUEEN: is_legal_queen_move,
    PieceType.KING: is_legal_king_move,
    PieceType.NOBLE: is_legal_king_move,
}

ILLEGAL_MOVE_REASONS: dict[PieceType, IllegalReason] = {
    PieceType.PAWN: IllegalReason.ILLEGAL_PAWN_MOVE,
    PieceType.KNIGHT: IllegalReason.ILLEGAL_KNIGHT_MOVE,
    PieceType.BISHOP: IllegalReason.ILLEGAL_BISHOP_MOVE,
    PieceType.ROOK: IllegalReason.ILLEGAL_ROOK_MOVE,
    PieceType.QUEEN: IllegalReason.ILLEGAL_QUEEN_MOVE,
    PieceType.KING: IllegalReason.ILLEGAL_KING_MOVE,
    PieceType.NOBLE: IllegalReason.ILLEGAL_NOBLE_MOVE,
}


def validate_move(
    board: Board,
    move: Move,
    turn_color: Color,
    en_passant: Optional[EnPassantWindow] = None,
) -> Verdict:
    """
    Check if the move is legal for the player whose turn it is
    ----

    Checks in order, the first failing check decides the reason:

    1. Both squares on the board
    2. Actually moving somewhere
    3. There is a piece to move
    4. It is your piece
    5. You are not taking your own piece
    6. The piece's own movement rule
    """
    if not (move.from_square.is_within_bounds() and move.to_square.is_within_bounds()):
        return Verdict.illegal(IllegalReason.OUT_OF_BOUNDS)

    if move.from_square == move.to_square:
        return Verdict.illegal(IllegalReason.SAME_SQUARE)

    piece = board.piece(move.from_square)
    if piece is None:
        return Verdict.illegal(IllegalReason.EMPTY_SOURCE)

    if piece.color != turn_color:
        return Verdict.illegal(IllegalReason.WRONG_TURN)

    target = board.piece(move.to_square)
    if target is not None and target.color == turn_color:
        return Verdict.illegal(IllegalReason.SELF_CAPTURE)

    movement_rule = MOVEMENT_RULES.get(piece.type)
    if movement_rule is None:
        return Verdict.illegal(IllegalReason.UNKNOWN_PIECE)

    if not movement_rule(move, board, piece.color, en_passant):
        return Verdict.illegal(ILLEGAL_MOVE_REASONS[piece.type])

    return Verdict.legal()


@dataclass(frozen=True)
class AcceptedMove:
    """Snapshot of what a (validated) move does, taken before the board gets updated."""

    move: Move
    moving_piece: Piece
    captured_piece: Optional[Piece]
    captured_square: Optional[Square]
    is_en_passant: bool

    @classmethod
    def from_move_and_board(
        cls, move: Move, board: Board, en_passant: Optional[EnPassantWindow]
    ) -> Self:
        moving_piece = board.piece(move.from_square)
        # for the typechecker: only called on validated moves
        assert moving_piece is not None

        en_passant_capture = (
            moving_piece.type == PieceType.PAWN
            and is_en_passant_capture(move, board, moving_piece.color, en_passant)
        )
        if en_passant_capture:
            assert en_passant is not None
            captured_square: Optional[Square] = en_passant.victim
        elif not board.is_empty(move.to_square):
            captured_square = move.to_square
        else:
            captured_square = None

        captured_piece = board.piece(captured_square) if captured_square else None
        return cls(
            move=move,
            moving_piece=moving_piece,
            captured_piece=captured_piece,
            captured_square=captured_square,
            is_en_passant=en_passant_capture,
        )

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None

    @property
    def is_pawn_move(self) -> bool:
        return self.moving_piece.type == PieceType.PAWN

    @property
    def captures_king(self) -> bool:
        return (
            self.captured_piece is not None
            and self.captured_piece.type == PieceType.KING
        )

    @property
    def is_promotion(self) -> bool:
        return self.is_pawn_move and self.move.to_square.row == promotion_row(
            self.moving_piece.color
        )

    @property
    def is_double_step(self) -> bool:
        return self.is_pawn_move and is_double_step(
            self.move, self.moving_piece.color
        )
