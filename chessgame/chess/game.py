"""
The Game class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn:
whose turn it is, which moves are legal, and whether the game has ended.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Self

from chessgame.chess.board import Board
from chessgame.chess.moves import pseudo_legal_moves
from chessgame.chess.square import Square
from chessgame.core.models import GameModel
from chessgame.core.shared_types import Color, Status

_LOGGER = logging.getLogger(__name__)

STALEMATE_RESULT = "Stalemate - Draw!"


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board)
    color_to_move: Color = Color.WHITE
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None

    @classmethod
    def new_game(cls) -> Self:
        """Standard starting position, White to move."""
        _LOGGER.info("Starting a new game.")
        return cls()

    def reset(self) -> None:
        """Throw away the current board and start over."""
        _LOGGER.info("Resetting the game.")
        self.board = Board()
        self.color_to_move = Color.WHITE
        self.status = Status.IN_PROGRESS
        self.winner = None

    @property
    def is_over(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def result(self) -> str:
        """Human readable description of how the game ended (empty while the game is still going)"""
        if self.status == Status.CHECKMATE:
            assert self.winner is not None
            return f"{self.winner.value.capitalize()} wins by checkmate!"
        if self.status == Status.STALEMATE:
            return STALEMATE_RESULT
        return ""

    def attempt_move(self, from_square: Square, to_square: Square) -> bool:
        """
        Attempt to make a move
        -----

        1. the game must still be in progress
        2. there must be a piece of the side to move on the starting square
        3. the target square must be among the legal moves of that piece
        4. update the board
        5. hand the turn to the opponent
        6. update game status (checkmate / stalemate)

        A rejected move returns False and leaves the game untouched.
        """
        if self.is_over:
            _LOGGER.debug(
                "Rejected %s-%s: game is over (%s).", from_square, to_square, self.status
            )
            return False

        piece = self.board.piece_at(from_square)
        if piece is None or piece.color != self.color_to_move:
            _LOGGER.debug(
                "Rejected %s-%s: no %s piece on the starting square.",
                from_square,
                to_square,
                self.color_to_move,
            )
            return False

        if not self.is_valid_move(from_square, to_square):
            _LOGGER.debug("Rejected %s-%s: not a legal move.", from_square, to_square)
            return False

        self.board.relocate(from_square, to_square)
        _LOGGER.debug("%s played %s-%s.", self.color_to_move, from_square, to_square)

        self.color_to_move = self.color_to_move.opponent
        self.check_game_end()
        return True

    def is_valid_move(self, from_square: Square, to_square: Square) -> bool:
        """Is the move in the piece's move set and does it keep your own king safe?"""
        piece = self.board.piece_at(from_square)
        if piece is None:
            return False

        candidate_moves = pseudo_legal_moves(piece, self.board.snapshot())
        if to_square not in candidate_moves:
            return False
        return not self.would_expose_king(from_square, to_square, piece.color)

    def legal_moves_from(self, square: Square) -> list[Square]:
        """
        Legal target squares for the piece standing on the square.
        ----

        Used by the presentation layer to highlight where a selected piece can go.
        """
        piece = self.board.piece_at(square)
        if piece is None:
            return []
        return [
            target
            for target in pseudo_legal_moves(piece, self.board.snapshot())
            if not self.would_expose_king(square, target, piece.color)
        ]

    def would_expose_king(
        self, from_square: Square, to_square: Square, color: Color
    ) -> bool:
        """Return True if the move leaves the king of `color` in check

        plan:
        1. Copy the board
        2. make the candidate move
        3. determine if king is in check on the new board

        NOTE: The live board is never touched, so a captured piece never has to be put back.
        """
        board = deepcopy(self.board)
        board.relocate(from_square, to_square)
        return board.is_check(color)

    # --- CHECKS FOR ENDING THE GAME ---
    def is_king_in_check(self, color: Color) -> bool:
        if self.board.find_king(color) is None:
            _LOGGER.warning(
                "Malformed board: no %s king, treating as not in check.", color
            )
        return self.board.is_check(color)

    def has_no_valid_moves(self, color: Color) -> bool:
        """Stops looking as soon as a single legal move is found."""
        snapshot = self.board.snapshot()
        for piece in snapshot.pieces(color):
            for target in pseudo_legal_moves(piece, snapshot):
                if not self.would_expose_king(piece.square, target, color):
                    return False
        return True

    def check_game_end(self) -> None:
        """Performs checks to see if game has ended and changes status accordingly.

        NOTE the turn has already been handed over. The side to move is the opponent of the player that just moved.
        """
        color = self.color_to_move
        if not self.has_no_valid_moves(color):
            return

        if self.is_king_in_check(color):
            self.status = Status.CHECKMATE
            self.winner = color.opponent
        else:
            self.status = Status.STALEMATE
        _LOGGER.info("Game over: %s", self.result)

    def to_model(self) -> GameModel:
        """Encode into the format the Service layer uses"""
        return GameModel(
            position=self.board.to_fen(),
            color_to_move=self.color_to_move,
            status=self.status,
            winner=self.winner,
            result=self.result,
            in_check=self.is_king_in_check(self.color_to_move),
        )
