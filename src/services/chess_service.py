"""Orchestration of communication from the presentation layer to the business logic (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    GameResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    PieceView,
)
from src.chess.game import Game
from src.chess.position import Position
from src.core.models import GameModel, PieceModel

_LOGGER = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game.new_game()

    # -- Presentation layer requests ---
    def new_game(self) -> GameResponse:
        """Throw away the current game and start over."""
        self.game = Game.new_game()
        _LOGGER.info("Started a new game")
        return self.get_game_state()

    def get_game_state(self) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Called after every attempt to redraw the board, and to see if the game has ended.
        """
        return self._create_game_response(self._to_model())

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Where can the piece on the requested square go? (Empty square, or not your turn: nowhere)"""
        square = Position.from_algebraic(request.square)
        piece = self.game.piece(square)
        if piece is None or piece.color != self.game.color_to_move:
            destinations: list[str] = []
        else:
            destinations = [
                move.to_square.to_algebraic() for move in self.game.legal_moves(square)
            ]
        return LegalMovesResponse(square=request.square, destinations=destinations)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt. A rejected move raises, and the game is left as it was."""
        self.game.attempt_move(
            Position.from_algebraic(request.from_square),
            Position.from_algebraic(request.to_square),
        )
        return self.get_game_state()

    def undo_move(self) -> GameResponse:
        """Take back the last move."""
        self.game.undo_last_move()
        return self.get_game_state()

    # -- Internal helpers --
    def _to_model(self) -> GameModel:
        """Snapshot of the game. Nothing in it refers back to the live board."""
        return GameModel(
            color_to_move=self.game.color_to_move.name.lower(),
            status=self.game.status.value,
            in_check=self.game.in_check(),
            pieces={
                square.to_algebraic(): PieceModel(
                    type=piece.type.name.lower(),
                    color=piece.color.name.lower(),
                    has_moved=piece.has_moved,
                    symbol=piece.symbol,
                )
                for square, piece in self.game.board.position.items()
            },
            moves_played=len(self.game.moves),
        )

    def _create_game_response(self, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse"""
        return GameResponse(
            color_to_move=model.color_to_move,
            status=model.status,
            in_check=model.in_check,
            board={
                square: PieceView(
                    type=piece.type,
                    color=piece.color,
                    has_moved=piece.has_moved,
                    symbol=piece.symbol,
                )
                for square, piece in model.pieces.items()
            },
            moves_played=model.moves_played,
        )
