"""
The Board holds the placement of the pieces (in chess: the `position`) and knows how to apply and undo a Move.

It has no notion of legality. Game is responsible for only ever applying moves it generated itself.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional, Self

from src.chess.moves import (
    MOVEMENT_RULES,
    CandidateMovesFn,
    CastleMove,
    Move,
    NormalMove,
    PromoteMove,
    TakeMove,
    is_king_capture,
)
from src.chess.pieces import Color, Figure, PieceType
from src.chess.position import BOARD_DIMENSIONS, Position

# Pieces on the first (and eight) rank, from the a-file to the h-file
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass
class Board:
    # Empty squares are simply not in the mapping
    position: dict[Position, Figure] = field(default_factory=dict)

    @classmethod
    def starting_position(cls) -> Self:
        """
        The standard opening setup:
        * white pieces on the 1st rank, white pawns on the 2nd
        * black pawns on the 7th rank, black pieces on the 8th
        """
        board = cls()
        last_rank = BOARD_DIMENSIONS[1]
        for file, piece_type in enumerate(BACK_RANK, start=1):
            board.place(Position(file, 1), Figure(piece_type, Color.WHITE))
            board.place(Position(file, 2), Figure(PieceType.PAWN, Color.WHITE))
            board.place(Position(file, last_rank - 1), Figure(PieceType.PAWN, Color.BLACK))
            board.place(Position(file, last_rank), Figure(piece_type, Color.BLACK))
        return board

    # --- PLACEMENT ---
    def piece(self, square: Position) -> Optional[Figure]:
        return self.position.get(square)

    def place(self, square: Position, figure: Figure) -> None:
        self.position[square] = figure

    def remove(self, square: Position) -> Optional[Figure]:
        return self.position.pop(square, None)

    def locate_color(self, color: Color) -> list[Position]:
        return [
            square for square, piece in self.position.items() if piece.color == color
        ]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Position]:
        return [
            square
            for square, piece in self.position.items()
            if piece.type == piece_type and piece.color == color
        ]

    def piece_count(self) -> int:
        return len(self.position)

    # --- APPLY / REVERSE ---
    def apply(self, move: Move) -> None:
        """Update the position on the board. The moved piece(s) get marked as moved."""
        if isinstance(move, (NormalMove, TakeMove)):
            # NOTE: a take simply overwrites the captured piece. The Move remembers it.
            piece_that_moved = self.position.pop(move.from_square)
            self.place(move.to_square, piece_that_moved.moved())
        elif isinstance(move, CastleMove):
            king = self.position.pop(move.king_from)
            rook = self.position.pop(move.rook_from)
            self.place(move.king_to, king.moved())
            self.place(move.rook_to, rook.moved())
        elif isinstance(move, PromoteMove):
            self.remove(move.from_square)
            self.place(move.to_square, move.replacement)

    def reverse(self, move: Move) -> None:
        """Exact inverse of `apply()`: reverse(apply(board, move)) leaves the board as it was."""
        if isinstance(move, NormalMove):
            piece_that_moved = self.position.pop(move.to_square)
            self.place(move.from_square, piece_that_moved.moved(move.had_moved))
        elif isinstance(move, TakeMove):
            piece_that_moved = self.position.pop(move.to_square)
            self.place(move.from_square, piece_that_moved.moved(move.had_moved))
            self.place(move.to_square, move.captured)
        elif isinstance(move, CastleMove):
            king = self.position.pop(move.king_to)
            rook = self.position.pop(move.rook_to)
            self.place(move.king_from, king.moved(False))
            self.place(move.rook_from, rook.moved(False))
        elif isinstance(move, PromoteMove):
            self.remove(move.to_square)
            # A pawn that reached the last rank must have moved before
            pawn = Figure(PieceType.PAWN, move.replacement.color, has_moved=True)
            self.place(move.from_square, pawn)

    @contextmanager
    def speculative(self, move: Move) -> Iterator[Self]:
        """
        Try out a move:
        ---

        with board.speculative(move):
            ... inspect the board after the move ...

        The move is reversed when leaving the block, also when an exception is raised inside it.
        """
        self.apply(move)
        try:
            yield self
        finally:
            self.reverse(move)

    # --- RAW MOVE GENERATION / CHECK DETECTION ---
    def generate_candidate_moves(self, square: Position) -> list[Move]:
        """
        Candidate (pseudo-legal) moves of the piece on the given square. Empty square --> no moves.

        ---
        NOTE: These may still leave your own king in check. Game filters those out.
        """
        piece = self.piece(square)
        if piece is None:
            return []
        movement_rule: CandidateMovesFn = MOVEMENT_RULES[piece.type]
        return movement_rule(square, self)

    def is_check(self, color: Color) -> bool:
        """
        Is the king of `color` under attack?
        ---

        Go over every piece of the opponent and see if any of its candidate moves would take the king.
        """
        for square in self.locate_color(color.opponent):
            if any(is_king_capture(move) for move in self.generate_candidate_moves(square)):
                return True
        return False

    # --- MATERIAL ---
    def count_material(self) -> dict[Color, int]:
        """Tally the points of material each player has on the board"""
        return {color: self._count_material_player(color) for color in Color}

    def _count_material_player(self, color: Color) -> int:
        return sum(
            piece.points for piece in self.position.values() if piece.color == color
        )
