"""
Move representation + geometry/base movement and capturing rules

Key idea: Use strategy pattern to define the candidate (pseudo-legal) move sets for each piece type.


Legality (not leaving your own king in check) is checked later by Game
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.pieces import Figure, PieceType
from src.chess.position import DIAGONALS, ORTHOGONALS, Direction, Orthogonal, Position
from src.core.exceptions import OutOfBoundsError


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Position) -> Optional[Figure]: ...


# --- MOVE VARIANTS ---
# Every variant carries exactly what is needed to apply AND undo it, without looking at any history.
@dataclass(frozen=True)
class NormalMove:
    """Relocate a piece onto an empty square"""

    from_square: Position
    to_square: Position
    had_moved: bool


@dataclass(frozen=True)
class TakeMove:
    """Relocate a piece onto a square occupied by an opponent's piece, which is removed"""

    from_square: Position
    to_square: Position
    captured: Figure
    had_moved: bool


@dataclass(frozen=True)
class CastleMove:
    """
    King and rook move together.

    NOTE: Both pieces must not have moved before, so their prior has-moved flags are known (False) and not stored.
    """

    king_from: Position
    rook_from: Position
    king_to: Position
    rook_to: Position

    @property
    def from_square(self) -> Position:
        return self.king_from

    @property
    def to_square(self) -> Position:
        return self.king_to


@dataclass(frozen=True)
class PromoteMove:
    """The pawn is removed and the replacement piece appears on the target square"""

    from_square: Position
    to_square: Position
    replacement: Figure


Move = NormalMove | TakeMove | CastleMove | PromoteMove


# --- MOVEMENT RULES ---
def step_onto(square: Position, target: Position, board: Board) -> Optional[Move]:
    """
    The move for a piece on `square` landing on `target`:
    Normal if empty, Take if an opponent's piece stands there, nothing if it is your own piece.
    """
    moving = board.piece(square)
    # for the type checker: strategies are only called on occupied squares
    assert moving is not None

    occupant = board.piece(target)
    if occupant is None:
        return NormalMove(square, target, had_moved=moving.has_moved)
    if occupant.color != moving.color:
        return TakeMove(square, target, captured=occupant, had_moved=moving.has_moved)
    return None


def raycasting_move(
    square: Position,
    board: Board,
    directions: tuple[Direction, ...],
    max_steps: Optional[int] = None,
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We walk along each direction one square at a time until we hit another piece or
    the edge of the board. (Stepping off the board raises OutOfBoundsError, which ends the ray.)

    ---
    Every empty square is a normal move. The first occupied square ends the ray, and is only added
    (as a capture) if the opponent is standing there.

    `max_steps` limits the length of the ray (the king only looks a single square ahead).
    """
    moves: list[Move] = []
    for direction in directions:
        target = square
        steps = 0
        while max_steps is None or steps < max_steps:
            try:
                target = target.move_in(direction)
            except OutOfBoundsError:
                break
            steps += 1

            move = step_onto(square, target, board)
            if move is not None:
                moves.append(move)
            if board.piece(target) is not None:
                break
    return moves


def candidate_pawn_moves(square: Position, board: Board) -> list[Move]:
    """
    A pawn:
    - moves by a single square forward (onto an empty square only).
    - It can move by two in their first move, if both squares in front of it are empty
    - takes diagonally (and ONLY diagonally, and only if there is something to take)

    NOTE: No en passant, and no promotion moves get generated.
    """
    pawn = board.piece(square)
    assert pawn is not None

    moves: list[Move] = []
    try:
        one_step = square.advance(pawn.color)
    except OutOfBoundsError:
        # pawn standing on the last rank: nowhere to go
        return moves

    if board.piece(one_step) is None:
        moves.append(NormalMove(square, one_step, had_moved=pawn.has_moved))
        if not pawn.has_moved:
            try:
                two_steps = one_step.advance(pawn.color)
            except OutOfBoundsError:
                two_steps = None
            if two_steps is not None and board.piece(two_steps) is None:
                moves.append(NormalMove(square, two_steps, had_moved=pawn.has_moved))

    # pawns take diagonally: one step forward, then one to either side
    for side in (Direction.LEFT, Direction.RIGHT):
        try:
            target = one_step.move_in(side)
        except OutOfBoundsError:
            continue
        occupant = board.piece(target)
        if occupant is not None and occupant.color != pawn.color:
            moves.append(
                TakeMove(square, target, captured=occupant, had_moved=pawn.has_moved)
            )
    return moves


def candidate_knight_moves(square: Position, board: Board) -> list[Move]:
    """
    Knights jump in an L-shape.

    Same as: take a single straight step, followed by a single diagonal step that keeps going the same way.
    ex) UP then UP_LEFT or UP_RIGHT. The four straight directions give all eight jumps.
    """
    moves: list[Move] = []
    for orthogonal in Orthogonal:
        try:
            halfway = square.move_in(orthogonal.direction)
        except OutOfBoundsError:
            continue
        for diagonal in orthogonal.diagonals():
            try:
                target = halfway.move_in(diagonal)
            except OutOfBoundsError:
                continue
            move = step_onto(square, target, board)
            if move is not None:
                moves.append(move)
    return moves


def candidate_bishop_moves(square: Position, board: Board) -> list[Move]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Position, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, ORTHOGONALS)


def candidate_queen_moves(square: Position, board: Board) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    diagonal_moves = candidate_bishop_moves(square, board)
    horizontal_and_vertical_moves = candidate_rook_moves(square, board)
    return diagonal_moves + horizontal_and_vertical_moves


def candidate_king_moves(square: Position, board: Board) -> list[Move]:
    """
    The king moves like the queen, but only a single square at the time.

    NOTE: Castling is not generated.
    """
    return raycasting_move(square, board, ORTHOGONALS + DIAGONALS, max_steps=1)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Position, Board], list[Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def is_king_capture(move: Move) -> bool:
    """Used to detect check: can this move take the king?"""
    return isinstance(move, TakeMove) and move.captured.type == PieceType.KING
