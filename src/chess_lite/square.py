"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess Lite is played on a 10x10 board. Row 0 is Black's home rank, row BOARD_SIZE - 1 is White's.
BOARD_SIZE = 10


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a1' - 'j10' get converted to (9,0) - (0,9)"""
        col = ord(sq[0]) - ord("a")
        rank = int(sq[1:])
        return cls(BOARD_SIZE - rank, col)

    def to_algebraic(self) -> str:
        return f"{self.file_letter()}{BOARD_SIZE - self.row}"

    def file_letter(self) -> str:
        return chr(self.col + ord("a"))

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def shifted(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)
