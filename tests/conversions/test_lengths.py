import pytest

from cssgradient.conversions import LengthContext, hex_to_rgba_int, is_hex_color, resolve_length
from cssgradient.errors import InvalidLength
from cssgradient.types.length_units import LengthUnit
from cssgradient.types.params import Length


@pytest.mark.parametrize("value, unit, expected", [
    (10, "px", 10.0),
    (1, "in", 96.0),
    (72, "pt", 96.0),
    (1, "pc", 16.0),
    (2.54, "cm", 96.0),
    (25.4, "mm", 96.0),
    (101.6, "q", 96.0),
    (2, "em", 32.0),
    (2, "rem", 32.0),
    (2, "ex", 16.0),
])
def test_default_context(value, unit, expected):
    assert resolve_length(value, unit, 500.0) == pytest.approx(expected)


def test_percentage():
    assert resolve_length(50, "%", 300.0) == 150.0
    assert resolve_length(100, LengthUnit.PERCENTAGE, 123.0) == 123.0


def test_context_font_sizes():
    ctx = LengthContext(font_size=10, root_font_size=20, x_height=4)
    assert resolve_length(3, "em", 0, ctx) == 30.0
    assert resolve_length(3, "rem", 0, ctx) == 60.0
    assert resolve_length(3, "ex", 0, ctx) == 12.0


def test_dpi_scales_absolute_units_only():
    ctx = LengthContext(dpi=192)
    assert resolve_length(1, "in", 0, ctx) == 192.0
    assert resolve_length(10, "px", 0, ctx) == 20.0
    assert resolve_length(1, "em", 0, ctx) == 16.0
    assert resolve_length(10, "%", 80, ctx) == 8.0


def test_unit_case_insensitive():
    assert resolve_length(1, "IN", 0) == 96.0
    assert Length(1, "PX").unit is LengthUnit.PX


def test_unknown_unit():
    with pytest.raises(InvalidLength):
        resolve_length(1, "furlong", 0)
    with pytest.raises(InvalidLength):
        Length(1, "vw")


def test_negative_percentage_basis():
    with pytest.raises(InvalidLength):
        resolve_length(10, "%", -1.0)


def test_hex_to_rgba_int():
    assert hex_to_rgba_int("#abc") == (0xaa, 0xbb, 0xcc, 255)
    assert hex_to_rgba_int("a1b2c3d4") == (0xa1, 0xb2, 0xc3, 0xd4)
    with pytest.raises(ValueError):
        hex_to_rgba_int("#abcde")
    with pytest.raises(ValueError):
        hex_to_rgba_int("#ggg")


def test_is_hex_color():
    assert is_hex_color("#fff")
    assert not is_hex_color("fff")
    assert not is_hex_color("#ffff0")
