"""The question giver and the two guessers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .abilities import AbilityStrategy
from .colors import Color
from .tiles import ColorTile

__all__ = ["PlayerType", "Player", "Guesser", "QGiver", "create_player"]


class PlayerType(Enum):
    """The kinds of player that :func:`create_player` can make."""

    GUESSER = "guesser"
    QGIVER = "qgiver"


@dataclass
class Player:
    """Anyone taking part, known by name."""

    name: str


@dataclass
class Guesser(Player):
    """A player who guesses tiles and moves a peg along the progress board."""

    color: Color | None = None
    peg: Any = None
    peg_x: int = 0
    peg_y: int = 0
    ability_1: bool = True
    ability_2: bool = True
    ability_3: bool = True
    active_ability: int = -1
    ability_strategy: AbilityStrategy | None = None
    chosen_tile: ColorTile | None = None
    pending_points: int = 0


@dataclass
class QGiver(Player):
    """The player who is shown the true colour and describes it."""

    true_color: Color | None = None
    true_row: int | None = None
    true_col: int | None = None

    def assign_true_color(self, color: Color, row: int, col: int) -> None:
        """Give the giver the colour to describe and where it lies on the board."""
        self.true_color = color
        self.true_row = row
        self.true_col = col


def create_player(
    player_type: PlayerType, name: str, color: Color | None = None
) -> Player:
    """Make a player of the given type; a giver has no peg colour."""
    if player_type is PlayerType.GUESSER:
        return Guesser(name, color)
    if player_type is PlayerType.QGIVER:
        return QGiver(name)
    raise ValueError(f"unknown player type: {player_type!r}")