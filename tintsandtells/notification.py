"""What the question giver is shown before a round begins."""

from __future__ import annotations

from dataclasses import dataclass

from .colors import Color, row_letter
from .players import QGiver

__all__ = ["ColorScreen", "GiverNotification", "notice_text", "location_text"]

SCREEN_BACKGROUND = "background-color: black;"


def notice_text(giver_name: str) -> str:
    """Return the warning that only the giver may look at the screen."""
    return f"ONLY {giver_name.upper()} CAN SEE THE SCREEN"


def location_text(row: int, col: int) -> str:
    """Return the board position as shown to the giver, e.g. ``A , 1``."""
    if col < 0:
        raise ValueError(f"column index must not be negative: {col}")
    return f"Location : {row_letter(row)} , {col + 1}"


@dataclass(frozen=True)
class ColorScreen:
    """The second screen: the true colour and where it lies."""

    color: Color
    color_style: str
    location: str
    background: str = SCREEN_BACKGROUND


class GiverNotification:
    """The two-step notice for the giver: a warning, then the colour itself."""

    def __init__(self, giver: QGiver) -> None:
        if giver is None:
            raise ValueError("a notification needs a giver")
        self.giver = giver
        self.notice = notice_text(giver.name)
        self.accepted = False

    def show_color_screen(self) -> ColorScreen:
        """Close the warning and return the screen with the giver's colour."""
        giver = self.giver
        if giver.true_color is None or giver.true_row is None or giver.true_col is None:
            raise RuntimeError("the giver has not been given a colour yet")
        self.accepted = True
        return ColorScreen(
            color=giver.true_color,
            color_style=f"background-color: {giver.true_color.name()};",
            location=location_text(giver.true_row, giver.true_col),
        )