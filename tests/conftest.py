"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.chess_lite.board import Board
from src.chess_lite.pieces import Piece
from src.chess_lite.square import Square
from src.db.memory_repository import InMemoryGameRepository

WHITE_KING_HOME = Square(9, 5)
BLACK_KING_HOME = Square(0, 5)

BoardFactory = Callable[[dict[tuple[int, int], str]], Board]


@pytest.fixture
def board_with_pieces() -> BoardFactory:
    """Call the inner function with {(row, col): code} to get a board with exactly those pieces on it."""

    def _create_board(pieces: dict[tuple[int, int], str]) -> Board:
        board = Board.empty()
        for (row, col), code in pieces.items():
            board.place_piece(Piece.from_code(code), Square(row, col))
        return board

    return _create_board


@pytest.fixture
def kings_only_board(board_with_pieces: BoardFactory) -> Board:
    """Both kings on their home squares, nothing else."""
    return board_with_pieces(
        {
            (WHITE_KING_HOME.row, WHITE_KING_HOME.col): "wK",
            (BLACK_KING_HOME.row, BLACK_KING_HOME.col): "bK",
        }
    )


@pytest.fixture
def memory_repository() -> Generator[InMemoryGameRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()
