"""Defines the types of chess pieces"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


PIECE_POINTS: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
}

# Same glyph for both colors, the renderer decides on the color.
PIECE_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "♟︎",
    PieceType.ROOK: "♜",
    PieceType.KNIGHT: "♞",
    PieceType.BISHOP: "♝",
    PieceType.QUEEN: "♛",
    PieceType.KING: "♚",
}


@dataclass(frozen=True)
class Figure:
    """
    A piece standing on the board.

    Figures are values: the Board owns them by placing them on a square. Moving a piece for the
    first time replaces it with a copy that has `has_moved` set.
    """

    type: PieceType
    color: Color
    has_moved: bool = False

    @property
    def points(self) -> int:
        # NOTE: The King's worth is undefined (does not count towards total points)
        return PIECE_POINTS.get(self.type, 0)

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[self.type]

    def moved(self, has_moved: bool = True) -> Self:
        return replace(self, has_moved=has_moved)
