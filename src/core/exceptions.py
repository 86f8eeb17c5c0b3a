"""Exceptions shared by the domain, service, and API layers"""


class GameError(Exception):
    """Base class for every error the chess engine raises on purpose."""


class OutOfBoundsError(GameError, ValueError):
    """A position outside of the board was requested."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested action."""


class InvalidRequestError(GameError):
    """
    A request coming from the presentation layer could not be interpreted.

    NOTE: must not be a ValueError, pydantic would wrap it into a ValidationError.
    """


# --- MOVE REJECTIONS ---
class MoveRejectedError(GameError):
    """
    The requested move was not accepted. The game state is left unchanged.

    Subclasses tell the caller *why*, but anyone only interested in "did it work?" can catch this one.
    """


class NoPieceError(MoveRejectedError):
    """There is no piece standing on the starting square."""


class WrongColorError(MoveRejectedError):
    """The piece on the starting square belongs to the player who is not to move."""


class IllegalDestinationError(MoveRejectedError):
    """The piece cannot legally reach the requested square."""
