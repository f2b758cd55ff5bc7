"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from chessgame.chess.board import Board
from chessgame.chess.pieces import PIECE_TO_FEN
from chessgame.core.shared_types import Color, PieceType

EMPTY_FEN = "/".join(["8"] * 8)


def fen_with_single_piece(piece_type: PieceType, color: Color, square_name: str) -> str:
    """FEN placement of an otherwise empty board"""
    fen_char = PIECE_TO_FEN[piece_type]
    fen_char = fen_char.upper() if color == Color.WHITE else fen_char.lower()

    file_idx = ord(square_name[0]) - ord("a")
    rank_idx = 8 - int(square_name[1])

    fen_rows = ["8"] * 8
    # FEN has no "0": leave out empty counts at the edges of the rank
    empty_before = str(file_idx) if file_idx else ""
    empty_after = str(7 - file_idx) if file_idx < 7 else ""
    fen_rows[rank_idx] = f"{empty_before}{fen_char}{empty_after}"
    return "/".join(fen_rows)


@pytest.fixture
def board_with_single_piece() -> Callable[[PieceType, Color, str], Board]:
    """Call the inner function that will be returned with the desired piece type, color, and square"""

    def _create_board(
        piece_type: PieceType,
        color: Color,
        square_name: str = "d4",
    ) -> Board:
        return Board.from_fen(fen_with_single_piece(piece_type, color, square_name))

    return _create_board
