"""Unit tests for src/services/chess_service.py"""

import threading
from unittest.mock import patch

import pytest

from src.api.models import GameStateResponse, MoveRequest, MoveResponse, SquarePayload
from src.core.exceptions import RepositoryError
from src.core.shared_types import IllegalReason
from src.db.memory_repository import InMemoryGameRepository
from src.services.chess_service import ChessService


def move_request(from_rc: tuple[int, int], to_rc: tuple[int, int]) -> MoveRequest:
    return MoveRequest.model_validate(
        {
            "from": {"r": from_rc[0], "c": from_rc[1]},
            "to": {"r": to_rc[0], "c": to_rc[1]},
        }
    )


@pytest.fixture
def service(memory_repository: InMemoryGameRepository) -> ChessService:
    return ChessService(memory_repository)


# --- SERVICE - STARTUP ----
def test_service_creates_game_on_startup(
    memory_repository: InMemoryGameRepository,
) -> None:
    assert memory_repository.get_game() is None
    ChessService(memory_repository)
    stored = memory_repository.get_game()
    assert stored is not None
    assert stored.turn == "w"
    assert stored.move_number == 1


def test_service_keeps_existing_game(memory_repository: InMemoryGameRepository) -> None:
    first = ChessService(memory_repository)
    first.make_move(move_request((8, 4), (6, 4)))

    second = ChessService(memory_repository)
    assert second.get_game_state().moves == ["e4"]


# --- SERVICE - GET STATE ----
def test_get_game_state(service: ChessService) -> None:
    state = service.get_game_state()
    assert isinstance(state, GameStateResponse)
    assert state.size == 10
    assert state.turn == "w"
    assert state.move_number == 1
    assert not state.is_over
    assert state.en_passant_target is None
    assert state.en_passant_pawn is None
    assert state.moves == []
    assert state.board[0][5] == "bK"
    assert state.board[9][3] == "wA"


def test_game_state_serialization(service: ChessService) -> None:
    """The browser client reads camelCase keys"""
    data = service.get_game_state().model_dump(by_alias=True)
    assert set(data.keys()) == {
        "size",
        "board",
        "turn",
        "moveNumber",
        "isOver",
        "enPassantTarget",
        "enPassantPawn",
        "moves",
    }


# --- SERVICE - MOVES ----
def test_make_legal_move(service: ChessService) -> None:
    response = service.make_move(move_request((8, 4), (6, 4)))

    assert isinstance(response, MoveResponse)
    assert response.ok
    assert response.reason is None
    assert response.game is not None
    assert response.game.turn == "b"
    assert response.game.board[6][4] == "wP"
    assert response.game.board[8][4] is None
    assert response.game.en_passant_target == SquarePayload(r=7, c=4)
    assert response.game.en_passant_pawn == SquarePayload(r=6, c=4)
    assert response.game.moves == ["e4"]


def test_legal_move_is_stored(service: ChessService) -> None:
    service.make_move(move_request((8, 4), (6, 4)))
    assert service.get_game_state().turn == "b"


def test_make_illegal_move(service: ChessService) -> None:
    before = service.get_game_state()
    response = service.make_move(move_request((9, 2), (6, 5)))

    assert not response.ok
    assert response.reason == "Illegal bishop move."
    assert response.game is None
    assert service.get_game_state() == before


def test_out_of_bounds_move(service: ChessService) -> None:
    response = service.make_move(move_request((9, 5), (10, 5)))
    assert response.reason == IllegalReason.OUT_OF_BOUNDS


def test_illegal_move_serialization(service: ChessService) -> None:
    response = service.make_move(move_request((1, 4), (2, 4)))
    assert response.model_dump(exclude_none=True) == {
        "ok": False,
        "reason": "Not your piece / not your turn.",
    }


def test_game_over_rejects_moves(service: ChessService) -> None:
    """The white queen walks up to the black king and takes it"""
    moves = [
        ((8, 4), (6, 4)),  # e4
        ((1, 5), (3, 5)),  # f7
        ((9, 4), (7, 4)),  # Qe3
        ((1, 0), (2, 0)),  # a8
        ((7, 4), (3, 8)),  # Qi7
        ((2, 0), (3, 0)),  # a7
        ((3, 8), (1, 6)),  # Qxg9
        ((3, 0), (4, 0)),  # a6
    ]
    for from_rc, to_rc in moves:
        assert service.make_move(move_request(from_rc, to_rc)).ok

    response = service.make_move(move_request((1, 6), (0, 5)))
    assert response.ok
    assert response.game is not None
    assert response.game.is_over
    assert response.game.moves[-1] == "Qxf10#"

    frozen = service.get_game_state()
    response = service.make_move(move_request((0, 0), (1, 0)))
    assert not response.ok
    assert response.reason == IllegalReason.GAME_OVER
    assert service.get_game_state() == frozen


# --- SERVICE - RESET ----
def test_reset_game(service: ChessService) -> None:
    service.make_move(move_request((8, 4), (6, 4)))
    response = service.reset_game()

    assert response.ok
    assert response.game is not None
    assert response.game.moves == []
    assert response.game.turn == "w"
    assert response.game.move_number == 1
    assert response.game.en_passant_target is None
    assert response.game == service.get_game_state()


# --- SERVICE - ERRORS ----
def test_missing_game_raises(memory_repository: InMemoryGameRepository) -> None:
    service = ChessService(memory_repository)
    memory_repository.clear()
    with pytest.raises(RepositoryError):
        service.get_game_state()
    with pytest.raises(RepositoryError):
        service.make_move(move_request((8, 4), (6, 4)))


def test_reset_recovers_from_missing_game(
    memory_repository: InMemoryGameRepository,
) -> None:
    service = ChessService(memory_repository)
    memory_repository.clear()
    service.reset_game()
    assert service.get_game_state().move_number == 1


# --- SERVICE - SINGLE WRITER ----
def test_rejected_move_does_not_touch_repository(service: ChessService) -> None:
    with patch.object(service.repo, "save_game") as mock_save:
        service.make_move(move_request((5, 5), (4, 5)))
    mock_save.assert_not_called()


def test_concurrent_moves_are_applied_one_at_a_time(service: ChessService) -> None:
    """
    Many threads submit the same white opening move at once.
    Exactly one can succeed: after it, it is black's turn and the pawn has left its square.
    """
    results: list[MoveResponse] = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def submit() -> None:
        barrier.wait()
        response = service.make_move(move_request((8, 4), (6, 4)))
        with results_lock:
            results.append(response)

    threads = [threading.Thread(target=submit) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sum(response.ok for response in results) == 1
    state = service.get_game_state()
    assert state.moves == ["e4"]
    assert state.turn == "b"
