"""Unit tests for /chessgame/chess/square.py"""

from string import ascii_lowercase

import pytest

from chessgame.chess.square import BOARD_SIZE, Square
from chessgame.core.exceptions import InvalidNotationError

ALL_SQUARES = [(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]


@pytest.mark.parametrize(
    "notation, row, col",
    [
        ("a8", 0, 0),
        ("h8", 0, 7),
        ("a1", 7, 0),
        ("h1", 7, 7),
        ("e2", 6, 4),
        ("e4", 4, 4),
        ("d5", 3, 3),
    ],
)
def test_creating_from_algebraic(notation: str, row: int, col: int) -> None:
    """Row 0 is the 8th rank, column 0 is the a-file"""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col


@pytest.mark.parametrize("row, col", ALL_SQUARES)
def test_to_algebraic_notation(row: int, col: int) -> None:
    square = Square(row, col)
    assert square.to_algebraic() == f"{ascii_lowercase[col]}{8 - row}"


@pytest.mark.parametrize("row, col", ALL_SQUARES)
def test_algebraic_round_trip(row: int, col: int) -> None:
    """Every square on the board survives encoding and decoding"""
    square = Square(row, col)
    assert Square.from_algebraic(square.to_algebraic()) == square


@pytest.mark.parametrize("notation", ["z9", "i1", "a9", "a0"])
def test_off_board_notation_gives_invalid_square(notation: str) -> None:
    """Well-formed but outside of the board: not an error, the square just is not valid"""
    square = Square.from_algebraic(notation)
    assert not square.is_valid()


@pytest.mark.parametrize("notation", ["", "e", "e44", "4e", "ee", "e-", " e4"])
def test_malformed_notation_raises(notation: str) -> None:
    with pytest.raises(InvalidNotationError):
        Square.from_algebraic(notation)


def test_invalid_square_has_no_notation() -> None:
    with pytest.raises(InvalidNotationError):
        Square(-1, 3).to_algebraic()


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for row, col in ALL_SQUARES:
        assert Square(row, col).is_valid()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)])
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_valid()


def test_squares_are_values() -> None:
    """Equality and hashing by coordinates, and no way to change them afterwards"""
    assert Square(4, 4) == Square.from_algebraic("e4")
    assert len({Square(4, 4), Square(4, 4), Square(3, 4)}) == 2
    with pytest.raises(AttributeError):
        Square(4, 4).row = 3  # type: ignore[misc]


def test_offset() -> None:
    assert Square.from_algebraic("e2").offset(-2, 0) == Square.from_algebraic("e4")
