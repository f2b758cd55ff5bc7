"""Unit tests for /chessgame/api/models.py"""

import pytest

from chessgame.api.models import LegalMovesRequest, MoveRequest
from chessgame.chess.square import Square
from chessgame.core.exceptions import InvalidNotationError, InvalidRequestError


# -- Validation - MoveRequest --
def test_valid_move_request() -> None:
    request = MoveRequest(from_square="e2", to_square="e4")
    assert request.squares() == (Square(6, 4), Square(4, 4))


def test_off_board_square_names_pass_validation() -> None:
    """Only the notation is validated. Whether the square exists is up to the game (which rejects the move)"""
    request = MoveRequest(from_square="e2", to_square="e9")
    _, to_square = request.squares()
    assert not to_square.is_valid()


@pytest.mark.parametrize(
    "from_square, to_square",
    [
        ("e22", "e4"),
        ("e2", "4e"),
        ("", "e4"),
        ("e2", "ee"),
    ],
)
def test_invalid_square_names(from_square: str, to_square: str) -> None:
    with pytest.raises(InvalidNotationError):
        _ = MoveRequest(from_square=from_square, to_square=to_square)


def test_move_must_leave_its_square() -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square="e2", to_square="e2")


# -- Validation - LegalMovesRequest --
def test_legal_moves_request() -> None:
    assert LegalMovesRequest(square="g1").square == "g1"


def test_legal_moves_request_invalid_square() -> None:
    with pytest.raises(InvalidNotationError):
        _ = LegalMovesRequest(square="g")
