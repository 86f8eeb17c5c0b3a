"""Unit tests for src/chess/position.py"""

from string import ascii_lowercase

import pytest

from src.chess.pieces import Color
from src.chess.position import (
    BOARD_DIMENSIONS,
    DIAGONALS,
    Direction,
    Orthogonal,
    Position,
)
from src.core.exceptions import OutOfBoundsError


@pytest.mark.parametrize(
    "file, rank, notation",
    [
        (file, rank, f"{ascii_lowercase[file - 1]}{rank}")
        for file in range(1, 9)
        for rank in range(1, 9)
    ],
)
def test_creating_from_algebraic(file: int, rank: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to file 1, rank 1, etc. And back again."""
    position = Position.from_algebraic(notation)
    assert position == Position(file, rank)
    assert position.to_algebraic() == notation


@pytest.mark.parametrize("notation", ["i1", "a9", "a0", "e", "e44", "ee"])
def test_invalid_algebraic(notation: str) -> None:
    with pytest.raises(OutOfBoundsError):
        _ = Position.from_algebraic(notation)


def test_all_positions_within_bounds() -> None:
    """happy case: every square of the board can be created"""
    positions = {
        Position(file, rank)
        for file in range(1, BOARD_DIMENSIONS[0] + 1)
        for rank in range(1, BOARD_DIMENSIONS[1] + 1)
    }
    assert len(positions) == 64


@pytest.mark.parametrize("file, rank", [(9, 1), (1, 9), (0, 4), (4, 0), (-1, -1)])
def test_position_out_of_bounds(file: int, rank: int) -> None:
    """Creating a position off the board fails. ex) file 9"""
    with pytest.raises(OutOfBoundsError):
        _ = Position(file, rank)


def test_positions_compare_by_value() -> None:
    assert Position(5, 4) == Position(5, 4)
    assert hash(Position(5, 4)) == hash(Position(5, 4))
    assert Position(5, 4) != Position(4, 5)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.LEFT, (3, 4)),
        (Direction.RIGHT, (5, 4)),
        (Direction.UP, (4, 5)),
        (Direction.DOWN, (4, 3)),
        (Direction.UP_LEFT, (3, 5)),
        (Direction.UP_RIGHT, (5, 5)),
        (Direction.DOWN_LEFT, (3, 3)),
        (Direction.DOWN_RIGHT, (5, 3)),
    ],
)
def test_move_in_direction(direction: Direction, expected: tuple[int, int]) -> None:
    """Starting from d4"""
    assert Position(4, 4).move_in(direction) == Position(*expected)


@pytest.mark.parametrize(
    "start, direction",
    [
        ((1, 1), Direction.LEFT),
        ((1, 1), Direction.DOWN),
        ((8, 8), Direction.UP),
        ((8, 8), Direction.RIGHT),
        ((8, 1), Direction.DOWN_RIGHT),
        ((1, 8), Direction.UP_LEFT),
    ],
)
def test_move_off_the_board(start: tuple[int, int], direction: Direction) -> None:
    with pytest.raises(OutOfBoundsError):
        _ = Position(*start).move_in(direction)


def test_advance_depends_on_color() -> None:
    """White pawns go UP the board, black pawns go DOWN"""
    e4 = Position.from_algebraic("e4")
    assert e4.advance(Color.WHITE) == Position.from_algebraic("e5")
    assert e4.advance(Color.BLACK) == Position.from_algebraic("e3")


@pytest.mark.parametrize(
    "orthogonal, expected",
    [
        (Orthogonal.UP, {Direction.UP_LEFT, Direction.UP_RIGHT}),
        (Orthogonal.DOWN, {Direction.DOWN_LEFT, Direction.DOWN_RIGHT}),
        (Orthogonal.LEFT, {Direction.UP_LEFT, Direction.DOWN_LEFT}),
        (Orthogonal.RIGHT, {Direction.UP_RIGHT, Direction.DOWN_RIGHT}),
    ],
)
def test_diagonals_of_orthogonal(
    orthogonal: Orthogonal, expected: set[Direction]
) -> None:
    diagonals = orthogonal.diagonals()
    assert set(diagonals) == expected
    assert all(diagonal in DIAGONALS for diagonal in diagonals)


def test_diagonal_directions_cannot_be_decomposed() -> None:
    """Only the narrowed Orthogonal type knows about diagonals"""
    assert not hasattr(Direction.UP_LEFT, "diagonals")
    assert {o.direction for o in Orthogonal}.isdisjoint(DIAGONALS)
