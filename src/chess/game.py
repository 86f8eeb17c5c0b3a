"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the Board and knows whose turn it is: it generates the legal moves, accepts or rejects move attempts,
and can tell whether the side to move is in check / has any move left.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.pieces import Color, Figure
from src.chess.position import Position
from src.core.exceptions import (
    GameStateError,
    IllegalDestinationError,
    NoPieceError,
    WrongColorError,
)
from src.core.shared_types import Status

_LOGGER = logging.getLogger(__name__)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    color_to_move: Color = Color.WHITE
    moves: list[Move] = field(default_factory=list)

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, White to move."""
        return cls(board=Board.starting_position())

    @property
    def status(self) -> Status:
        """
        Derived from the position, never stored:
        no legal moves + in check --> checkmate, no legal moves + not in check --> stalemate.
        """
        in_check = self.in_check()
        if self.has_legal_moves():
            return Status.CHECK if in_check else Status.IN_PROGRESS
        return Status.CHECKMATE if in_check else Status.STALEMATE

    @property
    def winner(self) -> Optional[Color]:
        """Given it is checkmate, the player who is to move just got mated and the opponent must be the winner"""
        if self.status != Status.CHECKMATE:
            return None
        return self.color_to_move.opponent

    def piece(self, square: Position) -> Optional[Figure]:
        """Read-only access for rendering"""
        return self.board.piece(square)

    def legal_moves(self, square: Position, check_for_mate: bool = True) -> list[Move]:
        """
        Moves the piece on `square` can make
        ----

        ----
        1. generate candidate moves, using the basic movement rules of the piece (the board does this calculation)
        2. if `check_for_mate`: remove the moves that would put (or leave) your own king in check.

        Without `check_for_mate` these are the raw candidate moves (as used when looking for attacks on a king).
        """
        candidate_moves = self.board.generate_candidate_moves(square)
        if not check_for_mate:
            return candidate_moves

        piece = self.board.piece(square)
        if piece is None:
            return []
        return [
            move
            for move in candidate_moves
            if not self._is_putting_yourself_in_check(move, piece.color)
        ]

    def all_legal_moves(self) -> list[Move]:
        """Legal moves of every piece of the player to move"""
        return [
            move
            for square in self.board.locate_color(self.color_to_move)
            for move in self.legal_moves(square)
        ]

    def in_check(self, color: Optional[Color] = None) -> bool:
        """Is `color` (default: the player to move) in check?"""
        return self.board.is_check(color or self.color_to_move)

    def has_legal_moves(self) -> bool:
        """Can the player to move make any move at all?"""
        return any(
            self.legal_moves(square)
            for square in self.board.locate_color(self.color_to_move)
        )

    def attempt_move(self, from_square: Position, to_square: Position) -> Move:
        """
        Attempt to make a move
        -----

        1. there must be a piece on the starting square
        2. it must be yours (your turn)
        3. the destination must be one of its legal moves
        4. update the board
        5. update the (history of) moves
        6. pass the turn to the opponent

        A rejected move raises (a subclass of) MoveRejectedError and leaves the game untouched.
        """
        piece = self.board.piece(from_square)
        if piece is None:
            _LOGGER.debug("Rejected move from empty square %s", from_square.to_algebraic())
            raise NoPieceError(f"No piece on {from_square.to_algebraic()}.")

        if piece.color != self.color_to_move:
            _LOGGER.debug(
                "Rejected move of %s piece while %s is to move",
                piece.color.name.lower(),
                self.color_to_move.name.lower(),
            )
            raise WrongColorError(
                f"It is not your turn. Waiting for {self.color_to_move.name.lower()} to make a move first."
            )

        move = next(
            (
                move
                for move in self.legal_moves(from_square)
                if move.to_square == to_square
            ),
            None,
        )
        if move is None:
            _LOGGER.debug(
                "Rejected move %s -> %s",
                from_square.to_algebraic(),
                to_square.to_algebraic(),
            )
            raise IllegalDestinationError(
                f"Move not allowed: {piece.type.name.lower()} from {from_square.to_algebraic()} to {to_square.to_algebraic()}"
            )

        self.board.apply(move)
        self.moves.append(move)
        self.color_to_move = self.color_to_move.opponent
        _LOGGER.info(
            "%s moved %s -> %s",
            piece.color.name.lower(),
            from_square.to_algebraic(),
            to_square.to_algebraic(),
        )
        self._log_if_game_over()
        return move

    def undo_last_move(self) -> Move:
        """Take back the last move made, and give the turn back to the player who made it."""
        if not self.moves:
            raise GameStateError("No moves have been made yet. Nothing to take back.")

        move = self.moves.pop()
        self.board.reverse(move)
        self.color_to_move = self.color_to_move.opponent
        _LOGGER.info(
            "Took back %s -> %s",
            move.from_square.to_algebraic(),
            move.to_square.to_algebraic(),
        )
        return move

    # -- PRIVATE HELPERS ---
    def _is_putting_yourself_in_check(self, move: Move, color: Color) -> bool:
        """Return True if the move puts you in check

        plan:
        1. make the candidate move on the board
        2. determine if king is in check on the new board
        3. take the move back (guaranteed, also if 2. raises)
        """
        with self.board.speculative(move) as board:
            return board.is_check(color)

    def _log_if_game_over(self) -> None:
        if self.has_legal_moves():
            return
        if self.in_check():
            _LOGGER.info("Checkmate. %s wins", self.color_to_move.opponent.name.lower())
        else:
            _LOGGER.info("Stalemate. %s has no moves left", self.color_to_move.name.lower())


def new_game() -> Game:
    """Convenience: start a game in the standard starting position with White to move."""
    return Game.new_game()
