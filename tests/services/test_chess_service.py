"""Unit tests for src/services/chess_service.py"""

import pytest

from src.chess.game import Game
from src.core.exceptions import IllegalDestinationError, MoveRejectedError, WrongColorError
from src.core.shared_types import Color, PieceType, Status
from src.services.chess_service import (
    ChessService,
    GameResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)


@pytest.fixture
def service() -> ChessService:
    return ChessService()


# --- SERVICE - GAME STATE ----
def test_initial_game_state(service: ChessService) -> None:
    response = service.get_game_state()
    assert isinstance(response, GameResponse)
    assert response.color_to_move == Color.WHITE
    assert response.status == Status.IN_PROGRESS
    assert not response.in_check
    assert response.moves_played == 0
    assert len(response.board) == 32
    assert response.board["e1"].type == PieceType.KING
    assert response.board["e1"].color == Color.WHITE
    assert not response.board["e1"].has_moved


def test_service_uses_given_game() -> None:
    game = Game.new_game()
    service = ChessService(game)
    service.make_move(MoveRequest(from_square="d2", to_square="d4"))
    assert game.color_to_move.name == "BLACK"


# --- SERVICE - LEGAL MOVES ----
def test_legal_moves_for_knight(service: ChessService) -> None:
    response = service.legal_moves(LegalMovesRequest(square="b1"))
    assert isinstance(response, LegalMovesResponse)
    assert response.square == "b1"
    assert set(response.destinations) == {"a3", "c3"}


@pytest.mark.parametrize("square", ["e4", "e7"])
def test_no_legal_moves_for_empty_square_or_opponent(
    service: ChessService, square: str
) -> None:
    response = service.legal_moves(LegalMovesRequest(square=square))
    assert response.destinations == []


# --- SERVICE - MAKE MOVE ----
def test_make_move(service: ChessService) -> None:
    response = service.make_move(MoveRequest(from_square="e2", to_square="e4"))
    assert response.color_to_move == Color.BLACK
    assert response.moves_played == 1
    assert "e2" not in response.board
    assert response.board["e4"].has_moved


def test_rejected_move_propagates_and_changes_nothing(service: ChessService) -> None:
    before = service.get_game_state()
    with pytest.raises(WrongColorError):
        service.make_move(MoveRequest(from_square="e7", to_square="e5"))
    with pytest.raises(IllegalDestinationError):
        service.make_move(MoveRequest(from_square="e2", to_square="e5"))
    assert service.get_game_state() == before


def test_game_ends_in_checkmate(service: ChessService) -> None:
    for from_square, to_square in [("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")]:
        response = service.make_move(MoveRequest(from_square=from_square, to_square=to_square))
    assert response.status == Status.CHECKMATE
    assert response.in_check

    with pytest.raises(MoveRejectedError):
        service.make_move(MoveRequest(from_square="a2", to_square="a3"))


# --- SERVICE - UNDO / NEW GAME ----
def test_undo_move(service: ChessService) -> None:
    start = service.get_game_state()
    service.make_move(MoveRequest(from_square="g1", to_square="f3"))
    assert service.undo_move() == start


def test_new_game_resets(service: ChessService) -> None:
    start = service.get_game_state()
    service.make_move(MoveRequest(from_square="g1", to_square="f3"))
    assert service.new_game() == start
