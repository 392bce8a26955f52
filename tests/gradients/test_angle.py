import math
import warnings

import numpy as np
import pytest

from cssgradient.errors import GradientWarning, UnsupportedAngleSyntax
from cssgradient.gradients.angle import (
    CSS_DEFAULT_ANGLE,
    LEGACY_DEFAULT_ANGLE,
    DirectionKeywords,
    direction_to_angle,
    normalize_angle,
    np_normalize_angle,
    resolve_angle,
    stops_start_index,
)
from cssgradient.types.params import ColorValue, Degrees, Keyword, Length, Percentage, Radians


def _angle(params, **kwargs):
    return resolve_angle(params, stops_start_index(params), **kwargs)


def _to(*sides):
    return [Keyword("to"), *(Keyword(s) for s in sides), Keyword("red"), Keyword("blue")]


@pytest.mark.parametrize("sides, expected", [
    (("bottom", "right"), 135.0),
    (("right", "bottom"), 135.0),
    (("top", "left"), 315.0),
    (("left", "top"), 315.0),
    (("top", "right"), 45.0),
    (("bottom", "left"), 225.0),
    (("bottom",), 180.0),
    (("top",), 0.0),
    (("left",), 0.0),
    (("right",), 0.0),
    ((), 0.0),
])
def test_direction_keywords_legacy(sides, expected):
    assert _angle(_to(*sides)) == expected


@pytest.mark.parametrize("sides, expected", [
    (("right",), 90.0),
    (("left",), 270.0),
    (("top",), 0.0),
    (("bottom",), 180.0),
    (("top", "right"), 45.0),
])
def test_direction_keywords_css(sides, expected):
    assert _angle(_to(*sides), direction_keywords=DirectionKeywords.CSS) == expected


def test_direction_keywords_case_insensitive():
    params = [Keyword("TO"), Keyword("Bottom"), Keyword("RIGHT"), Keyword("red")]
    assert stops_start_index(params) == 3
    assert _angle(params) == 135.0


def test_direction_to_angle_first_row_wins():
    assert direction_to_angle(["top", "left", "bottom", "right"]) == 315.0


def test_degrees():
    assert _angle([Degrees(45), Keyword("red")]) == 45.0


def test_radians():
    assert _angle([Radians(2), Keyword("red")]) == pytest.approx(114.59, abs=0.01)
    assert _angle([Radians(math.pi), Keyword("red")]) == pytest.approx(180.0)


@pytest.mark.parametrize("raw, expected", [
    (0, 0.0),
    (360, 0.0),
    (720, 0.0),
    (-90, 270.0),
    (-450, 270.0),
    (405, 45.0),
    (359.5, 359.5),
    (-1e-20, 0.0),
])
def test_normalize_angle(raw, expected):
    result = normalize_angle(raw)
    assert result == pytest.approx(expected)
    assert 0.0 <= result < 360.0


def test_negative_degrees_are_normalized():
    assert _angle([Degrees(-45), Keyword("red")]) == 315.0
    assert _angle([Radians(-2 * math.pi - 0.5), Keyword("red")]) == pytest.approx(360 - math.degrees(0.5))


def test_np_normalize_angle():
    angles = np.array([-720.0, -1.0, 0.0, 90.0, 360.0, 1234.5, -1e-20])
    result = np_normalize_angle(angles)
    np.testing.assert_allclose(result, [0.0, 359.0, 0.0, 90.0, 0.0, 154.5, 0.0])
    assert np.all((result >= 0) & (result < 360))


def test_np_normalize_angle_non_finite():
    result = np_normalize_angle(np.array([np.inf, -np.inf, np.nan, 370.0]))
    np.testing.assert_allclose(result, [0.0, 0.0, 0.0, 10.0])


def test_stops_start_index():
    assert stops_start_index([Keyword("to"), Keyword("top"), Keyword("left"), Keyword("red")]) == 3
    assert stops_start_index([Keyword("to"), Keyword("red")]) == 1
    assert stops_start_index([Degrees(10), Keyword("red")]) == 1
    assert stops_start_index([Radians(1), Keyword("red")]) == 1
    assert stops_start_index([Keyword("red"), Keyword("blue")]) == 0
    assert stops_start_index([ColorValue((1, 2, 3)), Keyword("blue")]) == 0
    assert stops_start_index([]) == 0


def test_omitted_direction_uses_default():
    params = [Keyword("red"), Keyword("blue")]
    assert _angle(params) == LEGACY_DEFAULT_ANGLE == 0.0
    assert _angle(params, direction_keywords=DirectionKeywords.CSS) == CSS_DEFAULT_ANGLE == 180.0
    assert _angle([ColorValue((1, 2, 3)), Keyword("blue")], direction_keywords="css") == 180.0


@pytest.mark.parametrize("first", [
    Degrees(math.inf),
    Degrees(-math.inf),
    Degrees(math.nan),
    Radians(math.inf),
    Radians(math.nan),
])
def test_non_finite_angle_warns(first):
    with pytest.warns(GradientWarning, match="Non-finite"):
        assert _angle([first, Keyword("red")]) == 0.0


@pytest.mark.parametrize("first", [Degrees(math.inf), Degrees(math.nan), Radians(-math.inf)])
def test_non_finite_angle_strict(first):
    with pytest.raises(UnsupportedAngleSyntax, match="finite"):
        _angle([first, Keyword("red")], strict=True)


def test_unrecognized_leading_token_warns():
    with pytest.warns(GradientWarning):
        assert _angle([Length(10, "px"), Keyword("red")]) == 0.0
    with pytest.warns(GradientWarning):
        assert _angle([Percentage(50), Keyword("red")]) == 0.0


def test_unrecognized_leading_token_strict():
    with pytest.raises(UnsupportedAngleSyntax):
        _angle([Length(10, "px"), Keyword("red")], strict=True)


def test_known_tokens_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        _angle([Degrees(10), Keyword("red")], strict=False)
        _angle(_to("top"))
