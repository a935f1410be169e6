"""Layout of the colour board and the progress board as drawable items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

from .colors import DARK_GRAY, WHITE, Color, row_letter
from .tiles import ColorTile

__all__ = [
    "TILE_SIZE",
    "SPACING",
    "LABEL_MARGIN",
    "BORDER_MARGIN",
    "BORDER_WIDTH",
    "MARK_WIDTH",
    "Font",
    "Rect",
    "Line",
    "Text",
    "Ellipse",
    "tile_origin",
    "progress_board_border",
    "board_labels",
    "BoardView",
]

TILE_SIZE = 43
SPACING = 4
LABEL_MARGIN = 20
BORDER_MARGIN = 15
BORDER_WIDTH = 4
MARK_WIDTH = 3

_PITCH = TILE_SIZE + SPACING


@dataclass(frozen=True)
class Font:
    """A font family, point size and weight."""

    family: str
    size: int
    bold: bool = False


LABEL_FONT = Font("Century Gothic", 10, bold=True)
NUMBER_FONT = Font("Palatino Linotype", 12, bold=True)


@dataclass(frozen=True)
class Rect:
    """A rectangle, optionally filled and outlined."""

    x: float
    y: float
    width: float
    height: float
    fill: Color | None = None
    outline: Color | None = None
    outline_width: int = 0


@dataclass(frozen=True)
class Line:
    """A straight line segment."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color
    width: int = 1


@dataclass(frozen=True)
class Text:
    """A piece of text placed at an anchor point (``n``, ``w`` or ``center``)."""

    text: str
    x: float
    y: float
    color: Color = WHITE
    anchor: str = "center"
    font: Font = field(default=LABEL_FONT)


@dataclass(frozen=True)
class Ellipse:
    """An ellipse inside the given bounding box."""

    x: float
    y: float
    width: float
    height: float
    fill: Color | None = None
    outline: Color | None = None


Item = Union[Rect, Line, Text, Ellipse]


def tile_origin(row: int, col: int) -> tuple[int, int]:
    """Return the top-left corner ``(x, y)`` of the tile at ``row``, ``col``."""
    if row < 0 or col < 0:
        raise ValueError(f"tile position must not be negative: {row}, {col}")
    return col * _PITCH, row * _PITCH


def progress_board_border(num_players: int, total_points: int) -> Rect:
    """Return the white frame drawn around the progress board."""
    if num_players < 1 or total_points < 1:
        raise ValueError("the progress board needs at least one lane and one tile")
    width = total_points * _PITCH - SPACING
    height = num_players * _PITCH - SPACING
    return Rect(
        -BORDER_MARGIN,
        -BORDER_MARGIN,
        width + 2 * BORDER_MARGIN,
        height + 2 * BORDER_MARGIN,
        fill=None,
        outline=WHITE,
        outline_width=BORDER_WIDTH,
    )


def board_labels(rows: int, cols: int) -> list[Text]:
    """Return the column numbers above and below and the row letters on each side."""
    if rows < 0 or cols < 0:
        raise ValueError("the board size must not be negative")
    half = _PITCH // 2
    top = [Text(str(c + 1), c * _PITCH + half, -LABEL_MARGIN, anchor="n") for c in range(cols)]
    left = [Text(row_letter(r), -LABEL_MARGIN, r * _PITCH + half, anchor="w") for r in range(rows)]
    bottom_y = rows * _PITCH + SPACING
    bottom = [Text(str(c + 1), c * _PITCH + half, bottom_y, anchor="n") for c in range(cols)]
    right_x = cols * _PITCH + SPACING
    right = [Text(row_letter(r), right_x, r * _PITCH + half, anchor="w") for r in range(rows)]
    return top + left + bottom + right


def _tile_items(tile: ColorTile) -> list[Item]:
    x, y = tile_origin(tile.row, tile.col)
    items: list[Item] = [Rect(x, y, tile.size, tile.size, fill=tile.color)]
    if tile.show_number and tile.number > 0:
        centre = tile.size / 2
        items.append(Text(str(tile.number), x + centre, y + centre, WHITE, "center", NUMBER_FONT))
    if tile.marked:
        right, bottom = x + tile.size, y + tile.size
        items.append(Line(x, y, right, bottom, tile.mark_color, MARK_WIDTH))
        items.append(Line(right, y, x, bottom, tile.mark_color, MARK_WIDTH))
    return items


class BoardView:
    """Keeps the drawable items of both boards."""

    def __init__(self) -> None:
        self.color_items: list[Item] = []
        self.progress_items: list[Item] = []

    def draw_color_board(self, tiles: Sequence[Sequence[ColorTile]]) -> list[Item]:
        """Lay out every colour tile with its score and mark, then the labels."""
        items: list[Item] = [item for row in tiles for tile in row for item in _tile_items(tile)]
        rows = len(tiles)
        cols = len(tiles[0]) if rows else 0
        items.extend(board_labels(rows, cols))
        self.color_items = items
        return items

    def draw_progress_board(self, num_players: int, total_points: int) -> list[Item]:
        """Lay out one lane of grey tiles per player inside a white frame."""
        border = progress_board_border(num_players, total_points)
        items: list[Item] = []
        for lane in range(num_players):
            for i in range(total_points):
                x, y = tile_origin(lane, i)
                items.append(Rect(x, y, TILE_SIZE, TILE_SIZE, fill=DARK_GRAY))
        items.append(border)
        self.progress_items = items
        return items