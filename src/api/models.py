"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status

SquareName = str


def _is_algebraic_notation(value: str) -> bool:
    """'a1' through 'h8'"""
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    return first_character in "abcdefgh" and second_character in "12345678"


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class LegalMovesRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_algebraic_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    type: PieceType
    color: Color
    has_moved: bool
    symbol: str


class GameResponse(BaseModel):
    color_to_move: Color
    status: Status
    in_check: bool
    board: dict[SquareName, PieceView]
    moves_played: int


class LegalMovesResponse(BaseModel):
    square: SquareName
    destinations: list[SquareName]
