"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PieceCode = str
ColorCode = str
RowCol = tuple[int, int]


@dataclass
class GameModel:
    """Transport-safe representation of a Chess Lite game used between API, Service, DB, and Game layers."""

    board: list[list[Optional[PieceCode]]]
    turn: ColorCode
    move_number: int
    is_over: bool = False
    en_passant_target: Optional[RowCol] = None
    en_passant_pawn: Optional[RowCol] = None
    moves: list[str] = field(default_factory=list)
