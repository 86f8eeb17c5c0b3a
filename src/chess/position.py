"""
A position (square) on the board, and the directions you can move in from it.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.chess.pieces import Color
from src.core.exceptions import OutOfBoundsError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]


class Direction(Enum):
    """The eight compass directions. Values are the (delta_file, delta_rank) unit vectors."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, 1)
    DOWN = (0, -1)
    UP_LEFT = (-1, 1)
    UP_RIGHT = (1, 1)
    DOWN_LEFT = (-1, -1)
    DOWN_RIGHT = (1, -1)

    @property
    def vector(self) -> Vector:
        return self.value


class Orthogonal(Enum):
    """
    The four straight directions.

    Only these can be split into their two neighbouring diagonals. A separate type means asking for the
    diagonals of a diagonal simply does not type check.
    """

    LEFT = Direction.LEFT
    RIGHT = Direction.RIGHT
    UP = Direction.UP
    DOWN = Direction.DOWN

    @property
    def direction(self) -> Direction:
        return self.value

    def diagonals(self) -> tuple[Direction, Direction]:
        """The two diagonals that keep moving along this direction. ex) UP -> UP_LEFT, UP_RIGHT"""
        return ORTHOGONAL_TO_DIAGONALS[self]


ORTHOGONAL_TO_DIAGONALS: dict[Orthogonal, tuple[Direction, Direction]] = {
    Orthogonal.LEFT: (Direction.UP_LEFT, Direction.DOWN_LEFT),
    Orthogonal.RIGHT: (Direction.UP_RIGHT, Direction.DOWN_RIGHT),
    Orthogonal.UP: (Direction.UP_LEFT, Direction.UP_RIGHT),
    Orthogonal.DOWN: (Direction.DOWN_LEFT, Direction.DOWN_RIGHT),
}

ORTHOGONALS: tuple[Direction, ...] = tuple(o.direction for o in Orthogonal)
DIAGONALS: tuple[Direction, ...] = (
    Direction.UP_LEFT,
    Direction.UP_RIGHT,
    Direction.DOWN_LEFT,
    Direction.DOWN_RIGHT,
)


def is_within_bounds(file: int, rank: int) -> bool:
    return (1 <= file <= BOARD_DIMENSIONS[0]) and (1 <= rank <= BOARD_DIMENSIONS[1])


@dataclass(frozen=True)
class Position:
    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_within_bounds(self.file, self.rank):
            raise OutOfBoundsError(
                f"Position (file={self.file}, rank={self.rank}) is not on the board."
            )

    @classmethod
    def from_algebraic(cls, sq: str) -> Position:
        """Algebraic notation: 'a1' - 'h8' get converted to (1,1) - (8,8)"""
        if len(sq) != 2 or not sq[1].isdigit():
            raise OutOfBoundsError(f"Cannot interpret {sq!r} as a square name.")
        file = ord(sq[0].lower()) - ord("a") + 1
        rank = int(sq[1])
        return cls(file, rank)

    def to_algebraic(self) -> str:
        return f"{chr(self.file + ord('a') - 1)}{self.rank}"

    def move_in(self, direction: Direction) -> Position:
        """
        One step along the direction.

        Raises OutOfBoundsError when stepping off the board. (The ray casting uses that to know when to stop.)
        """
        df, dr = direction.vector
        return Position(self.file + df, self.rank + dr)

    def advance(self, color: Color) -> Position:
        """Pawn push: White moves UP the board, Black moves DOWN."""
        return self.move_in(Direction.UP if color == Color.WHITE else Direction.DOWN)
