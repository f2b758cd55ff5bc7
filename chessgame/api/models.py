"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator, model_validator

from chessgame.chess.square import Square
from chessgame.core.exceptions import InvalidRequestError
from chessgame.core.shared_types import Color, PieceType, Status

SquareName = str


def _validate_square_name(value: str) -> str:
    # raises InvalidNotationError for anything that is not <file letter><rank digit>
    Square.from_algebraic(value)
    return value


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)

    @model_validator(mode="after")
    def validate_different_squares(self) -> Self:
        if self.from_square == self.to_square:
            raise InvalidRequestError(
                f"A move must leave its square: from_square and to_square are both {self.from_square!r}."
            )
        return self

    def squares(self) -> tuple[Square, Square]:
        return Square.from_algebraic(self.from_square), Square.from_algebraic(
            self.to_square
        )


class LegalMovesRequest(BaseModel):
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


# --- RESPONSE MODELS ---
class PieceView(BaseModel):
    type: PieceType
    color: Color
    symbol: str


class GameStateResponse(BaseModel):
    position: str
    pieces: dict[SquareName, PieceView]
    color_to_move: Color
    in_check: bool
    status: Status
    is_over: bool
    winner: Optional[Color]
    result: str


class MoveResponse(BaseModel):
    accepted: bool
    state: GameStateResponse


class LegalMovesResponse(BaseModel):
    square: SquareName
    legal_moves: list[SquareName]
