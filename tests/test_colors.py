import re

import pytest

from tintsandtells.colors import Color, create_palette, row_letter


def test_pure_red():
    assert Color.from_hsv(0, 255, 255).name() == "#ff0000"


def test_pure_green():
    assert Color.from_hsv(120, 255, 255).name() == "#00ff00"


def test_pure_blue():
    assert Color.from_hsv(240, 255, 255).name() == "#0000ff"


@pytest.mark.parametrize("value", [0, 17, 200, 255])
def test_zero_saturation_is_grey(value):
    color = Color.from_hsv(77, 0, value)
    assert (color.red, color.green, color.blue) == (value, value, value)


def test_achromatic_hue_is_grey():
    color = Color.from_hsv(-1, 255, 42)
    assert color == Color(42, 42, 42)


@pytest.mark.parametrize("hue", [0, 59, 60, 179, 300, 359])
def test_full_value_has_full_channel(hue):
    color = Color.from_hsv(hue, 255, 255)
    assert max(color.red, color.green, color.blue) == 255


@pytest.mark.parametrize("hue", list(range(0, 360, 37)))
def test_name_format(hue):
    color = Color.from_hsv(hue, 200, 150)
    name = color.name()
    assert len(name) == 7
    assert name[0] == "#"
    assert name == name.lower()
    assert bool(re.fullmatch(r"#[0-9a-f]{6}", name)) is True
    channels = (int(name[1:3], 16), int(name[3:5], 16), int(name[5:7], 16))
    assert channels == (color.red, color.green, color.blue)


@pytest.mark.parametrize(
    "args", [(360, 255, 255), (-2, 255, 255), (0, 256, 0), (0, 0, -1)]
)
def test_from_hsv_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        Color.from_hsv(*args)


def test_color_rejects_bad_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_palette_shape():
    palette = create_palette(12, 20)
    assert len(palette) == 12
    assert all(len(row) == 20 for row in palette)


def test_palette_first_tile():
    assert create_palette(12, 20)[0][0] == Color.from_hsv(0, 255, 255)


def test_palette_darkens_down_columns():
    palette = create_palette(12, 20)
    for col in range(20):
        brightest = [max(c.red, c.green, c.blue) for c in (row[col] for row in palette)]
        assert brightest == sorted(brightest, reverse=True)
        assert brightest[0] > brightest[-1]


def test_palette_columns_differ_in_hue():
    first_row = create_palette(12, 20)[0]
    assert len(set(first_row)) == len(first_row)


@pytest.mark.parametrize("rows, cols", [(1, 5), (0, 5), (5, 0)])
def test_palette_rejects_bad_size(rows, cols):
    with pytest.raises(ValueError):
        create_palette(rows, cols)


def test_row_letter_start():
    assert row_letter(0) == "A"


def test_row_letters_are_consecutive():
    letters = [row_letter(r) for r in range(12)]
    assert letters == sorted(letters)
    assert len(set(letters)) == 12
    assert all(letter.isupper() for letter in letters)


def test_row_letter_rejects_negative():
    with pytest.raises(ValueError):
        row_letter(-1)