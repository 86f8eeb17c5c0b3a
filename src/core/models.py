"""
Boundary layer data model(s).

The presentation layer only ever needs to read the board and the turn. These snapshots are what the Service
hands out, so nothing outside the domain layer holds a reference to the live Board.
"""

from dataclasses import dataclass, field

# Type aliases to make the models easier to read
SquareName = str


@dataclass(frozen=True)
class PieceModel:
    """Everything needed to draw a piece on a square."""

    type: str
    color: str
    has_moved: bool
    symbol: str


@dataclass
class GameModel:
    """Transport-safe snapshot of a chess game used between the Service and the Game layer."""

    color_to_move: str
    status: str
    in_check: bool
    pieces: dict[SquareName, PieceModel] = field(default_factory=dict)
    moves_played: int = 0
