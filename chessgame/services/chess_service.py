"""Orchestration of communication between the presentation layer and the game logic."""

import logging

from chessgame.api.models import (
    GameStateResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    PieceView,
)
from chessgame.chess.game import Game
from chessgame.chess.square import Square
from chessgame.core.config import SETTINGS, Settings
from chessgame.core.models import GameModel
from chessgame.core.shared_types import Status

_LOGGER = logging.getLogger(__name__)


class ChessService:
    """
    Holds the one game being played (in memory) and answers the presentation layer.
    ----

    The presentation layer (GUI) only ever talks to this class: it sends moves / a "new game" signal,
    and after every action asks for the state to render.
    """

    def __init__(self, settings: Settings = SETTINGS) -> None:
        self.settings = settings
        self.game = Game.new_game()

    # -- PRESENTATION LAYER LOGIC ---
    def new_game(self) -> GameStateResponse:
        """Discard the current game and start over from the starting position."""
        self.game.reset()
        return self.get_game_state()

    def get_game_state(self) -> GameStateResponse:
        """Retrieve current game state (to render the board, the player to move and check / game over messages)."""
        return self._create_game_state_response(self.game.to_model())

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. A rejected move is not an error: the GUI simply lets the player try again."""
        from_square, to_square = request.squares()
        accepted = self.game.attempt_move(from_square, to_square)
        if not accepted:
            _LOGGER.debug(
                "Move %s-%s rejected.", request.from_square, request.to_square
            )
        return MoveResponse(accepted=accepted, state=self.get_game_state())

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Squares the piece on the requested square can legally move to (for highlighting)."""
        square = Square.from_algebraic(request.square)
        targets = self.game.legal_moves_from(square) if square.is_valid() else []
        return LegalMovesResponse(
            square=request.square,
            legal_moves=[target.to_algebraic() for target in targets],
        )

    # -- Internal helpers --
    def _create_game_state_response(self, model: GameModel) -> GameStateResponse:
        """Convert info in GameModel (+ the pieces on the board) to a GameStateResponse."""
        pieces = {
            piece.square.to_algebraic(): PieceView(
                type=piece.type,
                color=piece.color,
                symbol=piece.symbol
                if self.settings.unicode_symbols
                else piece.fallback_symbol,
            )
            for piece in self.game.board.pieces()
        }
        return GameStateResponse(
            position=model.position,
            pieces=pieces,
            color_to_move=model.color_to_move,
            in_check=model.in_check,
            status=model.status,
            is_over=model.status != Status.IN_PROGRESS,
            winner=model.winner,
            result=model.result,
        )
