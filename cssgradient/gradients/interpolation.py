from __future__ import annotations
from typing import Optional, Sequence, Tuple

from ..errors import DegenerateGradientRange
from .stops import Pending, Resolved, Stop


def _prev_anchor(stops: Sequence[Stop], start: int) -> Optional[int]:
    for i in range(start, -1, -1):
        if isinstance(stops[i], Resolved):
            return i
    return None


def _next_anchor(stops: Sequence[Stop], start: int) -> Optional[int]:
    for i in range(start, len(stops)):
        if isinstance(stops[i], Resolved):
            return i
    return None


def interior_position(stops: Sequence[Stop], index: int, full_length: float) -> float:
    """
    Position of a pending stop between the nearest anchored neighbours.

    The run between the previous anchor (or the start of the axis) and the
    next anchor (or ``full_length``) is split into equal intervals, one per
    step from the previous anchor, so for anchors at 10 and 100 three
    entries apart the two stops in between land on 40 and 70.
    """
    last = len(stops) - 1

    prev_index = _prev_anchor(stops, index - 1)
    if prev_index is None:
        prev_index, prev_length = 0, 0.0
    else:
        prev_length = stops[prev_index].position  # type: ignore[union-attr]

    next_index = _next_anchor(stops, index + 1)
    if next_index is None:
        next_index, next_length = last, full_length
    else:
        next_length = stops[next_index].position  # type: ignore[union-attr]

    steps = next_index - prev_index
    if steps <= 0:
        raise DegenerateGradientRange(
            f"No room to place stop {index} between anchors {prev_index} and {next_index}"
        )
    interval = (next_length - prev_length) / steps
    return prev_length + interval * (index - prev_index)


def interpolate_positions(stops: Sequence[Stop], full_length: float) -> Tuple[Resolved, ...]:
    """
    Give every pending stop an absolute position.

    Anchored stops are passed through unchanged. A pending first stop goes to
    0 and a pending last stop to ``full_length``; the first rule wins for a
    single stop.

    Args:
        stops: Gathered stops in declaration order
        full_length: Absolute length of the 100% position

    Returns:
        Tuple of resolved stops, same order and length as ``stops``
    """
    last = len(stops) - 1
    resolved: list[Resolved] = []
    for i, stop in enumerate(stops):
        match stop:
            case Resolved():
                resolved.append(stop)
            case Pending(color=color) if i == 0:
                resolved.append(Resolved(color, 0.0))
            case Pending(color=color) if i == last:
                resolved.append(Resolved(color, float(full_length)))
            case Pending(color=color):
                resolved.append(Resolved(color, interior_position(stops, i, full_length)))
            case _:
                raise TypeError(f"Not a gradient stop: {stop!r}")
    return tuple(resolved)
