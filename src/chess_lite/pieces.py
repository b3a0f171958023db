"""Defines the types of pieces, including the Noble"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import GameStateError


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()
    NOBLE = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()


CODE_TO_PIECE: dict[str, PieceType] = {
    "P": PieceType.PAWN,
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
    "A": PieceType.NOBLE,
}

PIECE_TO_CODE: dict[PieceType, str] = {
    value: key for key, value in CODE_TO_PIECE.items()
}

CODE_TO_COLOR: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}

COLOR_TO_CODE: dict[Color, str] = {
    value: key for key, value in CODE_TO_COLOR.items()
}


def opponent(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK


def color_from_code(code: str) -> Color:
    if code not in CODE_TO_COLOR:
        raise GameStateError(
            f"Invalid color code: {code!r}. Pick one from {','.join(CODE_TO_COLOR)}"
        )
    return CODE_TO_COLOR[code]


@dataclass(frozen=True)
class Piece:
    color: Color
    type: PieceType

    @classmethod
    def from_code(cls, code: str) -> Self:
        """Two characters: color ('w' or 'b') followed by the piece letter, ex. 'wP' or 'bA'"""
        if len(code) != 2 or code[1] not in CODE_TO_PIECE:
            raise GameStateError(f"Cannot interpret {code!r} as a piece.")
        return cls(color_from_code(code[0]), CODE_TO_PIECE[code[1]])

    def to_code(self) -> str:
        return f"{COLOR_TO_CODE[self.color]}{PIECE_TO_CODE[self.type]}"
