"""The Game board holds the `position` (the configuration of pieces on the 10x10 board) and answers occupancy questions"""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess_lite.moves import Move
from src.chess_lite.pieces import Color, Piece, PieceType
from src.chess_lite.square import BOARD_SIZE, Square

# Left to right, the same for both colors. The Nobles flank the Queen and King.
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.NOBLE,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.NOBLE,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Board codes: a 2D grid with either None (empty square) or a code like "wP" / "bA"
CodeGrid = list[list[Optional[str]]]


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass
class Board:
    # Only occupied squares are stored. A square missing from the dict is empty.
    position: dict[Square, Piece]

    @classmethod
    def empty(cls) -> Self:
        return cls({})

    @classmethod
    def starting_position(cls) -> Self:
        """
        Black at the top (rows 0 and 1), White at the bottom (rows BOARD_SIZE - 2 and BOARD_SIZE - 1).
        Each back rank reads R N B A Q K A B N R, with a full rank of pawns in front of it.
        """
        position: dict[Square, Piece] = {}
        home_ranks = {
            Color.BLACK: (0, 1),
            Color.WHITE: (BOARD_SIZE - 1, BOARD_SIZE - 2),
        }
        for color, (back_row, pawn_row) in home_ranks.items():
            for col, piece_type in enumerate(BACK_RANK):
                position[Square(back_row, col)] = Piece(color, piece_type)
                position[Square(pawn_row, col)] = Piece(color, PieceType.PAWN)
        return cls(position)

    @classmethod
    def from_codes(cls, grid: CodeGrid) -> Self:
        """Inverse of `to_codes()`. Raises GameStateError (via Piece.from_code) on unknown codes."""
        position: dict[Square, Piece] = {}
        for row, cells in enumerate(grid):
            for col, code in enumerate(cells):
                if code is not None:
                    position[Square(row, col)] = Piece.from_code(code)
        return cls(position)

    def to_codes(self) -> CodeGrid:
        return [
            [self._code(Square(row, col)) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    def _code(self, square: Square) -> Optional[str]:
        piece = self.piece(square)
        return piece.to_code() if piece else None

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def is_empty(self, square: Square) -> bool:
        return square not in self.position

    def path_clear(self, from_square: Square, to_square: Square) -> bool:
        """
        Walk from `from_square` towards `to_square` one step at a time (both endpoints excluded).

        NOTE: Only meaningful for horizontal, vertical, or diagonal lines. The caller checks the shape first.
        """
        d_row = sign(to_square.row - from_square.row)
        d_col = sign(to_square.col - from_square.col)
        square = from_square.shifted(d_row, d_col)
        while square != to_square:
            if not self.is_empty(square):
                return False
            square = square.shifted(d_row, d_col)
        return True

    def locate_pieces(
        self, piece_type: PieceType, color: Optional[Color] = None
    ) -> list[Square]:
        return [
            square
            for square, piece in self.position.items()
            if piece.type == piece_type and (color is None or piece.color == color)
        ]

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        self.position.pop(square, None)

    def move_piece(self, move: Move) -> None:
        """Update the position on the board. Whatever stood on the target square is gone."""
        piece_that_moved = self.position.pop(move.from_square)
        self.position[move.to_square] = piece_that_moved

    def promote_piece(self, square: Square, to: PieceType) -> None:
        piece = self.position[square]
        self.position[square] = Piece(piece.color, to)
