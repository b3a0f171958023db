"""
Algebraic notation for the move history
----

Square names use the file letter ('a' for the left-most column) and the rank number counted from White's side,
so on the 10x10 board the squares run from a1 (bottom left) to j10 (top right).

Examples:
* "e4": pawn push
* "dxe5": pawn from the d-file takes on e5
* "Nxf3": knight takes on f3
* "Ad9": a Noble moves to d9
* "b10=Q": pawn promotes
* "Qxf10#": the King got taken, game over
* "dxe7 e.p.": en passant
"""

from src.chess_lite.moves import Move
from src.chess_lite.pieces import PIECE_TO_CODE, PieceType

EN_PASSANT_MARKER = " e.p."
PROMOTION_SUFFIX = "=Q"
GAME_END_SUFFIX = "#"


def describe(
    move: Move,
    piece_type: PieceType,
    is_capture: bool = False,
    is_promotion: bool = False,
    is_en_passant: bool = False,
    is_game_ending: bool = False,
) -> str:
    destination = move.to_square.to_algebraic()
    capture_mark = "x" if is_capture else ""

    if piece_type == PieceType.PAWN:
        # pawns have no letter. A capture is identified by the file the pawn came from.
        origin = move.from_square.file_letter() if is_capture else ""
        notation = f"{origin}{capture_mark}{destination}"
    else:
        notation = f"{PIECE_TO_CODE[piece_type]}{capture_mark}{destination}"

    if is_promotion:
        notation += PROMOTION_SUFFIX
    if is_game_ending:
        notation += GAME_END_SUFFIX
    if is_en_passant:
        notation += EN_PASSANT_MARKER
    return notation
