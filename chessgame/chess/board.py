"""The Game board implements all rules that affect the configuration of pieces on the board"""

import logging
from copy import copy
from string import digits
from dataclasses import dataclass, field
from typing import Optional, Self

from chessgame.chess.moves import pseudo_legal_moves
from chessgame.chess.pieces import Piece
from chessgame.chess.square import BOARD_SIZE, Square
from chessgame.core.exceptions import InvalidNotationError
from chessgame.core.shared_types import Color, PieceType

_LOGGER = logging.getLogger(__name__)

Grid = list[list[Optional[Piece]]]

STARTING_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)
# (back row, pawn row) per color
HOME_ROWS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (BOARD_SIZE - 1, BOARD_SIZE - 2),
    Color.BLACK: (0, 1),
}


def _empty_grid() -> Grid:
    return [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def _starting_grid() -> Grid:
    """White at the bottom (rows 7 and 6), Black at the top (rows 0 and 1)"""
    grid = _empty_grid()
    for color, (back_row, pawn_row) in HOME_ROWS.items():
        for col, piece_type in enumerate(BACK_RANK):
            grid[back_row][col] = Piece(piece_type, color, Square(back_row, col))
            grid[pawn_row][col] = Piece(PieceType.PAWN, color, Square(pawn_row, col))
    return grid


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Read-only copy of the board.
    ----

    Handed to the movement rules and check detection, so they never see (or cause) changes to the live board.
    The pieces are copies as well.
    """

    cells: tuple[tuple[Optional[Piece], ...], ...]

    def piece_at(self, square: Square) -> Optional[Piece]:
        if not square.is_valid():
            return None
        return self.cells[square.row][square.col]

    def pieces(self, color: Optional[Color] = None) -> list[Piece]:
        return [
            piece
            for row in self.cells
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]


@dataclass
class Board:
    grid: Grid = field(default_factory=_starting_grid)

    @classmethod
    def empty(cls) -> Self:
        return cls(_empty_grid())

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        * ranks are read from the 8th rank down to the 1st rank, which is exactly the row order of the grid
        * letters are pieces (capitals for White), a number denotes that many empty squares

        NOTE: a pawn placed anywhere but on its starting row is considered to have moved already.
        """
        fen_by_rows = fen_str.split("/")
        if len(fen_by_rows) != BOARD_SIZE:
            raise InvalidNotationError(
                f"FEN placement needs {BOARD_SIZE} ranks, got {len(fen_by_rows)}: {fen_str!r}"
            )

        board = cls.empty()
        for row, fen_one_row in enumerate(fen_by_rows):
            col = 0
            for character in fen_one_row:
                if character in digits:
                    if not 1 <= int(character) <= BOARD_SIZE:
                        raise InvalidNotationError(
                            f"Invalid count of empty squares {character!r} in FEN rank {fen_one_row!r}"
                        )
                    col += int(character)
                    continue
                square = Square(row, col)
                if not square.is_valid():
                    raise InvalidNotationError(
                        f"FEN rank {fen_one_row!r} does not fit on the board."
                    )
                try:
                    piece = Piece.from_fen(character, square)
                except KeyError as error:
                    raise InvalidNotationError(
                        f"Unknown piece letter {character!r} in FEN {fen_str!r}"
                    ) from error
                _, pawn_row = HOME_ROWS[piece.color]
                piece.has_moved = piece.type == PieceType.PAWN and row != pawn_row
                board.place_piece(piece, square)
                col += 1
            if col != BOARD_SIZE:
                raise InvalidNotationError(
                    f"FEN rank {fen_one_row!r} covers {col} squares, expected {BOARD_SIZE}."
                )
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_SIZE))

    def _row_to_fen(self, row: int) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for piece in self.grid[row]:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- PLACEMENT / LOOKUP ---
    def piece_at(self, square: Square) -> Optional[Piece]:
        if not square.is_valid():
            return None
        return self.grid[square.row][square.col]

    def place_piece(self, piece: Piece, square: Square) -> None:
        """Put a piece on the board (replacing whatever was standing there). Used to set up positions."""
        if not square.is_valid():
            raise ValueError(f"Cannot place a piece outside the board: {square!r}")
        piece.square = square
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        piece = self.piece_at(square)
        if piece is not None:
            self.grid[square.row][square.col] = None
        return piece

    def relocate(self, from_square: Square, to_square: Square) -> bool:
        """
        Move the piece on `from_square` to `to_square`.
        ---

        Whatever stood on the target square gets dropped (captured).
        Returns False, without touching the board, if either square is off the board or there is nothing to move.
        """
        if not from_square.is_valid() or not to_square.is_valid():
            return False

        piece = self.piece_at(from_square)
        if piece is None:
            return False

        piece.move_to(to_square)
        self.grid[to_square.row][to_square.col] = piece
        self.grid[from_square.row][from_square.col] = None
        return True

    def find_king(self, color: Color) -> Optional[Square]:
        for piece in self.pieces(color):
            if piece.type == PieceType.KING:
                return piece.square
        return None

    def pieces(self, color: Optional[Color] = None) -> list[Piece]:
        """All pieces on the board (of one color, if given), scanning row by row"""
        return [
            piece
            for row in self.grid
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            tuple(
                tuple(copy(piece) if piece is not None else None for piece in row)
                for row in self.grid
            )
        )

    # --- ATTACKS ---
    def is_attacked(self, square: Square, by_color: Color) -> bool:
        """Can any piece of `by_color` move to the square (pseudo-legally)?"""
        snapshot = self.snapshot()
        return any(
            square in pseudo_legal_moves(piece, snapshot)
            for piece in snapshot.pieces(by_color)
        )

    def is_check(self, color: Color) -> bool:
        """Is the king of the given color under attack?"""
        king_square = self.find_king(color)
        if king_square is None:
            # should not happen in a normal game, but then there is nothing to be checked either
            _LOGGER.debug("No %s king on the board, treating as not in check.", color)
            return False
        return self.is_attacked(king_square, color.opponent)

    # --- DISPLAY ---
    def render(self, unicode_symbols: bool = True) -> str:
        """Text diagram of the board as seen from White's side"""
        files = " ".join(chr(ord("a") + col) for col in range(BOARD_SIZE))
        lines = [f"  {files}"]
        for row in range(BOARD_SIZE):
            rank = BOARD_SIZE - row
            cells = [
                "." if piece is None else self._piece_text(piece, unicode_symbols)
                for piece in self.grid[row]
            ]
            lines.append(f"{rank} {' '.join(cells)} {rank}")
        lines.append(f"  {files}")
        return "\n".join(lines)

    @staticmethod
    def _piece_text(piece: Piece, unicode_symbols: bool) -> str:
        # fallback codes are two characters wide, FEN letters keep the diagram aligned
        return piece.symbol if unicode_symbols else piece.to_fen()

    def __str__(self) -> str:
        return self.render()
