import pytest

from cssgradient.colors import ColorRGBAINT, resolve_color
from cssgradient.conversions import LengthContext, resolve_length
from cssgradient.errors import InvalidStopSyntax, UnknownColor
from cssgradient.gradients.stops import Pending, Resolved, gather_stops
from cssgradient.types.params import ColorValue, Degrees, Keyword, Length, Percentage

RED = ColorRGBAINT((255, 0, 0))
BLUE = ColorRGBAINT((0, 0, 255))


def _gather(params, start=0, box_width=200.0, context=None, **kwargs):
    kwargs.setdefault("color_resolver", resolve_color)
    kwargs.setdefault("length_resolver", resolve_length)
    return gather_stops(params, start, box_width, context, **kwargs)


def test_bare_colors_are_pending():
    assert _gather([Keyword("red"), Keyword("blue")]) == (Pending(RED), Pending(BLUE))


def test_length_anchors_previous_color():
    stops = _gather([Keyword("red"), Length(10, "px"), Keyword("blue")])
    assert stops == (Resolved(RED, 10.0), Pending(BLUE))


def test_percentage_uses_box_width():
    stops = _gather([Keyword("red"), Percentage(25), Keyword("blue"), Percentage(100)], box_width=400)
    assert stops == (Resolved(RED, 100.0), Resolved(BLUE, 400.0))


def test_relative_length_uses_context():
    stops = _gather([Keyword("red"), Length(2, "em")], context=LengthContext(font_size=12))
    assert stops == (Resolved(RED, 24.0),)


def test_start_index_skips_direction():
    params = [Keyword("to"), Keyword("top"), Keyword("red"), Keyword("blue")]
    assert _gather(params, start=2) == (Pending(RED), Pending(BLUE))


def test_color_values_pass_through():
    opaque = object()
    stops = _gather([ColorValue(opaque), Percentage(50)])
    assert stops == (Resolved(opaque, 100.0),)


def test_empty_slice():
    assert _gather([Degrees(90)], start=1) == ()


def test_collaborators_receive_arguments():
    calls = []

    def length_resolver(value, unit, basis, context):
        calls.append((value, unit, basis, context))
        return 7.0

    ctx = LengthContext(dpi=192)
    stops = _gather(
        [Keyword("tomato"), Length(3, "mm")],
        box_width=321.0,
        context=ctx,
        color_resolver=lambda name: name.upper(),
        length_resolver=length_resolver,
    )
    assert stops == (Resolved("TOMATO", 7.0),)
    assert calls == [(3, "mm", 321.0, ctx)]


@pytest.mark.parametrize("params", [
    [Length(10, "px"), Keyword("red")],
    [Keyword("red"), Length(10, "px"), Length(20, "px")],
    [Keyword("red"), Degrees(45)],
])
def test_non_color_token_is_invalid(params):
    with pytest.raises(InvalidStopSyntax):
        _gather(params)


def test_unknown_color_keyword():
    with pytest.raises(UnknownColor):
        _gather([Keyword("notacolor")])
