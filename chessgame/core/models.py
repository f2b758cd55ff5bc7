"""
Boundary layer data model(s).

The Game encodes its state into a GameModel, the Service turns that into response models for the presentation layer.
(Decouples the domain objects from what gets sent across the boundary)
"""

from dataclasses import dataclass
from typing import Optional

from chessgame.core.shared_types import Color, Status


@dataclass
class GameModel:
    """Transport-safe representation of a chess game used between the Game and the Service."""

    position: str  # FEN piece placement
    color_to_move: Color
    status: Status
    winner: Optional[Color]
    result: str
    in_check: bool
