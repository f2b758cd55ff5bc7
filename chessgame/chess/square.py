"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_letters, digits

from chessgame.core.exceptions import InvalidNotationError

# Chess board is always 8x8.
BOARD_SIZE = 8


@dataclass(frozen=True)
class Square:
    """
    Row 0 is the 8th rank (Black's back rank), column 0 is the a-file.
    So the board is stored top-down, as seen from White's side.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)

        NOTE: only the format is checked. 'z9' gives a Square, it just is not a valid one.
        """
        if len(sq) != 2 or sq[0] not in ascii_letters or sq[1] not in digits:
            raise InvalidNotationError(f"Invalid chess notation: {sq!r}")
        col = ord(sq[0]) - ord("a")
        row = BOARD_SIZE - int(sq[1])
        return cls(row, col)

    def to_algebraic(self) -> str:
        if not self.is_valid():
            raise InvalidNotationError(
                f"Square (row={self.row}, col={self.col}) lies outside the board."
            )
        return f"{chr(self.col + ord('a'))}{BOARD_SIZE - self.row}"

    def is_valid(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return self.to_algebraic() if self.is_valid() else "Invalid"
