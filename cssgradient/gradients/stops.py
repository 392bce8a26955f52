from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from ..conversions.lengths import LengthContext, LengthResolver
from ..errors import InvalidStopSyntax
from ..types.length_units import LengthUnit
from ..types.params import ColorValue, Keyword, Length, Percentage, RawParameter


@dataclass(frozen=True, slots=True)
class Pending:
    """A stop declared without a position."""
    color: Any


@dataclass(frozen=True, slots=True)
class Resolved:
    """A stop anchored at an absolute position along the gradient axis."""
    color: Any
    position: float


Stop = Union[Pending, Resolved]
ColorResolverFn = Callable[[str], Any]


def stop_color(param: RawParameter, color_resolver: ColorResolverFn) -> Any:
    """Color of a stop token: keywords go through the resolver, colors pass through."""
    match param:
        case Keyword(text=text):
            return color_resolver(text)
        case ColorValue(color=color):
            return color
        case _:
            raise InvalidStopSyntax(f"Expected a color, got {param!r}")


def stop_position(
    param: RawParameter,
    box_width: float,
    context: Optional[LengthContext],
    length_resolver: LengthResolver,
) -> Optional[float]:
    """Absolute position for a length/percentage token, None for anything else."""
    match param:
        case Length(value=value, unit=unit):
            return float(length_resolver(value, unit, box_width, context))
        case Percentage(value=value):
            return float(length_resolver(value, LengthUnit.PERCENTAGE, box_width, context))
        case _:
            return None


def gather_stops(
    params: Sequence[RawParameter],
    start_index: int,
    box_width: float,
    context: Optional[LengthContext],
    *,
    color_resolver: ColorResolverFn,
    length_resolver: LengthResolver,
) -> Tuple[Stop, ...]:
    """
    Collect one stop per declared color, starting at ``start_index``.

    A color followed by a length or percentage becomes ``Resolved``; a bare
    color becomes ``Pending``. Lengths never produce entries of their own.

    Args:
        params: Full parameter list of the gradient function
        start_index: Index of the first color
        box_width: Basis for percentage positions
        context: Passed through to ``length_resolver``
        color_resolver: Maps a color keyword to a color
        length_resolver: Maps (value, unit, basis, context) to absolute units

    Returns:
        Tuple of stops in declaration order; empty when there are no colors
    """
    stops: list[Stop] = []
    i = start_index
    while i < len(params):
        color = stop_color(params[i], color_resolver)
        position = None
        if i + 1 < len(params):
            position = stop_position(params[i + 1], box_width, context, length_resolver)
        if position is None:
            stops.append(Pending(color))
            i += 1
        else:
            stops.append(Resolved(color, position))
            i += 2
    return tuple(stops)
