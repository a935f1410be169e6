"""RGB colours and the spectrum palette of the colour board."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Color",
    "create_palette",
    "row_letter",
    "WHITE",
    "BLACK",
    "LIGHT_GRAY",
    "DARK_GRAY",
    "RED",
    "BLUE",
]

_MAX16 = 65535


def _to_channel(fraction: float) -> int:
    wide = int(fraction * _MAX16 + 0.5)
    return int(wide / 257 + 0.5)


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_hsv(cls, hue: int, saturation: int, value: int) -> "Color":
        """Build a colour from hue (0-359, or -1 for grey), saturation and value (0-255)."""
        if not -1 <= hue <= 359:
            raise ValueError(f"hue out of range: {hue}")
        if not 0 <= saturation <= 255:
            raise ValueError(f"saturation out of range: {saturation}")
        if not 0 <= value <= 255:
            raise ValueError(f"value out of range: {value}")
        if saturation == 0 or hue == -1:
            return cls(value, value, value)

        h = hue / 60
        s = saturation / 255
        v = value / 255
        sector = int(h)
        f = h - sector
        p = v * (1 - s)
        if sector % 2:
            q = v * (1 - s * f)
            rgb = {1: (q, v, p), 3: (p, q, v), 5: (v, p, q)}[sector]
        else:
            t = v * (1 - s * (1 - f))
            rgb = {0: (v, t, p), 2: (p, v, t), 4: (t, p, v)}[sector]
        return cls(*(_to_channel(c) for c in rgb))

    def name(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
LIGHT_GRAY = Color(192, 192, 192)
DARK_GRAY = Color(128, 128, 128)
RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)


def create_palette(rows: int, cols: int) -> list[list[Color]]:
    """Return a rows x cols spectrum: hue varies by column, brightness falls by row."""
    if rows < 2:
        raise ValueError("a palette needs at least two rows")
    if cols < 1:
        raise ValueError("a palette needs at least one column")
    palette = []
    for r in range(rows):
        brightness = 255 - (r * 155 // (rows - 1))
        palette.append(
            [Color.from_hsv(c * 360 // (cols + 2), 255, brightness) for c in range(cols)]
        )
    return palette


def row_letter(row: int) -> str:
    """Return the board letter of a row: 0 is ``A``, 1 is ``B`` and so on."""
    if row < 0:
        raise ValueError(f"row index must not be negative: {row}")
    return chr(ord("A") + row)