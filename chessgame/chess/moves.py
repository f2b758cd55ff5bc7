"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the pseudo-legal move set for each piece type.
Every rule only reads the board it is given (a snapshot), it never changes it.

Legality (not leaving your own king in check) is checked later by Game
"""

from typing import Callable, Optional, Protocol

from chessgame.chess.pieces import Piece
from chessgame.chess.square import BOARD_SIZE, Square
from chessgame.core.shared_types import Color, PieceType


class BoardView(Protocol):
    """Just the parts the movement strategies need"""

    def piece_at(self, square: Square) -> Optional[Piece]: ...


# (delta row, delta col). Row 0 is the 8th rank, so "up the board" for White is a negative delta row.
Vector = tuple[int, int]

ORTHOGONALS: list[Vector] = [(-1, 0), (1, 0), (0, -1), (0, 1)]
DIAGONALS: list[Vector] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = ORTHOGONALS + DIAGONALS


def pawn_direction(color: Color) -> int:
    """White moves UP the board (towards row 0), Black moves DOWN"""
    return -1 if color == Color.WHITE else 1


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: BoardView, directions: list[Vector]
) -> list[Square]:
    """
    Raycasting algorithm
    -----

    We define move directions and move along them until we hit another piece or
    the edge of the board. A ray can never be longer than the board is wide.
    """
    player_color = board.piece_at(square).color

    moves: list[Square] = []
    for d_row, d_col in directions:
        for step in range(1, BOARD_SIZE):
            target_square = square.offset(step * d_row, step * d_col)
            if not target_square.is_valid():
                break

            target_piece = board.piece_at(target_square)
            if target_piece is not None:
                # only the first occupied square counts, and only if it is the opponent's: then it can be captured.
                if target_piece.color != player_color:
                    moves.append(target_square)
                break

            moves.append(target_square)
    return moves


def single_step_move(
    square: Square, board: BoardView, deltas: list[Vector]
) -> list[Square]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump a single step"""
    player_color = board.piece_at(square).color

    moves: list[Square] = []
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_valid():
            continue

        target_piece = board.piece_at(target_square)
        if target_piece is None or target_piece.color != player_color:
            moves.append(target_square)
    return moves


def candidate_pawn_moves(square: Square, board: BoardView) -> list[Square]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square only.
    - can move by two squares if it never moved before (both squares must be empty).
    - takes diagonally (and only diagonally)

    NOTE: No en passant, no promotion.
    """
    pawn = board.piece_at(square)
    direction = pawn_direction(pawn.color)

    moves: list[Square] = []
    one_step = square.offset(direction, 0)
    if one_step.is_valid() and board.piece_at(one_step) is None:
        moves.append(one_step)

        two_steps = square.offset(2 * direction, 0)
        if (
            not pawn.has_moved
            and two_steps.is_valid()
            and board.piece_at(two_steps) is None
        ):
            moves.append(two_steps)

    for d_col in (-1, 1):
        target_square = square.offset(direction, d_col)
        if not target_square.is_valid():
            continue
        target_piece = board.piece_at(target_square)
        if target_piece is not None and target_piece.color != pawn.color:
            moves.append(target_square)
    return moves


def candidate_knight_moves(square: Square, board: BoardView) -> list[Square]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(square: Square, board: BoardView) -> list[Square]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(square: Square, board: BoardView) -> list[Square]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, ORTHOGONALS)


def candidate_queen_moves(square: Square, board: BoardView) -> list[Square]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, board, ORTHOGONALS + DIAGONALS)


def candidate_king_moves(square: Square, board: BoardView) -> list[Square]:
    """
    The king can move by a single square at the time. No castling.
    """
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, BoardView], list[Square]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def pseudo_legal_moves(piece: Piece, board: BoardView) -> list[Square]:
    """Destination squares of the piece according to its movement rule (ignores whether your own king ends up in check)"""
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece.square, board)
