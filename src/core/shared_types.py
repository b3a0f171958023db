"""
Type definitions used across layers
"""

from enum import StrEnum


class IllegalReason(StrEnum):
    """
    Closed set of reasons a move gets rejected.

    The values are the messages shown to the player, so the API layer can pass them on as-is.
    """

    OUT_OF_BOUNDS = "Out of bounds."
    SAME_SQUARE = "You must move to a different square."
    EMPTY_SOURCE = "No piece on that square."
    WRONG_TURN = "Not your piece / not your turn."
    SELF_CAPTURE = "You can't capture your own piece."
    ILLEGAL_PAWN_MOVE = "Illegal pawn move."
    ILLEGAL_KNIGHT_MOVE = "Illegal knight move."
    ILLEGAL_BISHOP_MOVE = "Illegal bishop move."
    ILLEGAL_ROOK_MOVE = "Illegal rook move."
    ILLEGAL_QUEEN_MOVE = "Illegal queen move."
    ILLEGAL_KING_MOVE = "Illegal king move."
    ILLEGAL_NOBLE_MOVE = "Illegal noble move."
    UNKNOWN_PIECE = "Unknown piece."
    GAME_OVER = "The game is already over."
