"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/helpers required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, Figure, PieceType
from src.chess.position import Position

# square name -> (piece type, color[, has moved])
Placement = dict[str, tuple[PieceType, Color] | tuple[PieceType, Color, bool]]


def build_board(placement: Placement) -> Board:
    """Board with exactly the pieces given. ex) {"e1": (PieceType.KING, Color.WHITE)}"""
    board = Board()
    for square_name, piece_info in placement.items():
        board.place(Position.from_algebraic(square_name), Figure(*piece_info))
    return board


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def board_from() -> Callable[[Placement], Board]:
    """Call the returned function with the desired placement of pieces"""
    return build_board


@pytest.fixture
def sq() -> Callable[[str], Position]:
    """Short hand for squares in tests: sq("e4")"""
    return Position.from_algebraic
