"""Requests and Response models"""

from typing import Any, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from src.core.exceptions import InvalidRequestError
from src.core.models import GameModel

PieceCode = str


# --- SHARED MODELS ---
class SquarePayload(BaseModel):
    """A square as the browser client sends it: row `r` (0 = top row) and column `c` (0 = left-most file)."""

    r: int
    c: int

    @field_validator("r", "c", mode="before")
    @classmethod
    def validate_coordinate(cls, value: Any) -> int:
        # NOTE: range is deliberately not checked here. The rules engine answers with "Out of bounds." instead.
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a row/column index."
            )
        return value


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """Body of a move submission: {"from": {"r": 8, "c": 4}, "to": {"r": 6, "c": 4}}"""

    model_config = ConfigDict(populate_by_name=True)

    from_square: Optional[SquarePayload] = Field(default=None, alias="from")
    to_square: Optional[SquarePayload] = Field(default=None, alias="to")

    @model_validator(mode="after")
    def validate_both_squares(self) -> Self:
        if self.from_square is None or self.to_square is None:
            raise InvalidRequestError("Missing from/to.")
        return self


# --- RESPONSE MODELS ---
class GameStateResponse(BaseModel):
    """
    Full game state as the browser client reads it.

    Dump with `model_dump(by_alias=True)` to get the camelCase keys the client expects (moveNumber, isOver, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    size: int
    board: list[list[Optional[PieceCode]]]
    turn: str
    move_number: int
    is_over: bool
    en_passant_target: Optional[SquarePayload]
    en_passant_pawn: Optional[SquarePayload]
    moves: list[str]

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        return cls(
            size=len(model.board),
            board=model.board,
            turn=model.turn,
            move_number=model.move_number,
            is_over=model.is_over,
            en_passant_target=_square_payload(model.en_passant_target),
            en_passant_pawn=_square_payload(model.en_passant_pawn),
            moves=model.moves,
        )


class MoveResponse(BaseModel):
    """Either {ok: false, reason: "..."} or {ok: true, game: {...}}"""

    ok: bool
    reason: Optional[str] = None
    game: Optional[GameStateResponse] = None


def _square_payload(row_col: Optional[tuple[int, int]]) -> Optional[SquarePayload]:
    if row_col is None:
        return None
    row, col = row_col
    return SquarePayload(r=row, c=col)
