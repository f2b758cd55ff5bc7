"""Defines the chess pieces"""

from dataclasses import dataclass
from typing import Self

from chessgame.chess.square import Square
from chessgame.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

UNICODE_SYMBOLS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: {
        PieceType.KING: "♔",
        PieceType.QUEEN: "♕",
        PieceType.ROOK: "♖",
        PieceType.BISHOP: "♗",
        PieceType.KNIGHT: "♘",
        PieceType.PAWN: "♙",
    },
    Color.BLACK: {
        PieceType.KING: "♚",
        PieceType.QUEEN: "♛",
        PieceType.ROOK: "♜",
        PieceType.BISHOP: "♝",
        PieceType.KNIGHT: "♞",
        PieceType.PAWN: "♟",
    },
}


@dataclass
class Piece:
    """
    A piece standing on the board.

    The square is kept in sync by the Board whenever the piece gets relocated.
    `has_moved` flips to True on the first relocation and never goes back.
    """

    type: PieceType
    color: Color
    square: Square
    has_moved: bool = False

    @classmethod
    def from_fen(cls, character: str, square: Square) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color, square)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def move_to(self, square: Square) -> None:
        self.square = square
        self.has_moved = True

    @property
    def symbol(self) -> str:
        return UNICODE_SYMBOLS[self.color][self.type]

    @property
    def fallback_symbol(self) -> str:
        """Text code for when unicode symbols cannot be displayed, ex. 'WK' for the white king, 'BN' for a black knight"""
        color_prefix = "W" if self.color == Color.WHITE else "B"
        return f"{color_prefix}{PIECE_TO_FEN[self.type].upper()}"

    def __str__(self) -> str:
        return f"{self.color.name} {self.type.name} at {self.square}"
