"""Tiles of the colour board and of the progress board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .colors import LIGHT_GRAY, WHITE, Color

__all__ = ["TileType", "Tile", "ColorTile", "ProgressTile", "create_tile"]


class TileType(Enum):
    """The kinds of tile that :func:`create_tile` can make."""

    COLOR = "color"
    PROGRESS = "progress"


@dataclass
class Tile:
    """A square, selectable tile of a given size and colour."""

    size: int
    color: Color = LIGHT_GRAY
    selectable: bool = True


@dataclass
class ColorTile(Tile):
    """A tile of the colour board that can show a score and a player's X."""

    row: int = 0
    col: int = 0
    number: int = 0
    show_number: bool = False
    marked: bool = False
    mark_color: Color = WHITE

    def mark_x(self, color: Color) -> None:
        """Draw an X over the tile in the given colour."""
        self.marked = True
        self.mark_color = color

    def unmark_x(self) -> None:
        """Remove the X from the tile."""
        self.marked = False

    def clear(self) -> None:
        """Hide the score and remove the X, ready for a new round."""
        self.number = 0
        self.show_number = False
        self.unmark_x()


@dataclass
class ProgressTile(Tile):
    """A tile of the progress board that a peg may stand on."""

    has_peg: bool = False
    peg_color: Color | None = None


_TILE_CLASSES: dict[TileType, type[Tile]] = {
    TileType.COLOR: ColorTile,
    TileType.PROGRESS: ProgressTile,
}


def create_tile(tile_type: TileType, size: int) -> Tile:
    """Make a tile of the given type; an unknown type gives a plain tile."""
    return _TILE_CLASSES.get(tile_type, Tile)(size)