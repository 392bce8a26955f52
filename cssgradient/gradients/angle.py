from __future__ import annotations
from enum import Enum
from typing import Sequence, Tuple
import math
import warnings

import numpy as np
from boundednumbers.functions import cyclic_wrap_float
from boundednumbers.np_functions import cyclic_wrap_float as np_cyclic_wrap_float

from ..errors import GradientWarning, UnsupportedAngleSyntax
from ..types.params import ColorValue, Degrees, Keyword, Radians, RawParameter, is_keyword

FULL_TURN = 360.0
# Angle used when the direction argument is omitted
LEGACY_DEFAULT_ANGLE = 0.0
CSS_DEFAULT_ANGLE = 180.0  # "to bottom"

POSITION_KEYWORDS = frozenset({"top", "bottom", "left", "right"})


class DirectionKeywords(str, Enum):
    LEGACY = "legacy"
    CSS = "css"


# First row whose keywords are all present wins, so order matters
_LEGACY_DIRECTIONS: Tuple[Tuple[frozenset, float], ...] = (
    (frozenset({"top", "left"}), 315.0),
    (frozenset({"top", "right"}), 45.0),
    (frozenset({"bottom", "left"}), 225.0),
    (frozenset({"bottom", "right"}), 135.0),
    (frozenset({"bottom"}), 180.0),
)

_CSS_DIRECTIONS: Tuple[Tuple[frozenset, float], ...] = _LEGACY_DIRECTIONS + (
    (frozenset({"right"}), 90.0),
    (frozenset({"left"}), 270.0),
    (frozenset({"top"}), 0.0),
)

DIRECTION_TABLES = {
    DirectionKeywords.LEGACY: _LEGACY_DIRECTIONS,
    DirectionKeywords.CSS: _CSS_DIRECTIONS,
}

DEFAULT_ANGLES = {
    DirectionKeywords.LEGACY: LEGACY_DEFAULT_ANGLE,
    DirectionKeywords.CSS: CSS_DEFAULT_ANGLE,
}


def normalize_angle(angle: float) -> float:
    """Normalize an angle in degrees to [0, 360)."""
    wrapped = float(cyclic_wrap_float(angle, 0.0, FULL_TURN))
    # -1e-20 % 360 rounds to 360.0
    if wrapped >= FULL_TURN:
        return 0.0
    return wrapped


def np_normalize_angle(angles: np.ndarray) -> np.ndarray:
    """Vectorized: normalize angles in degrees to [0, 360)."""
    angles = np.asarray(angles, dtype=float)
    with np.errstate(invalid="ignore"):
        wrapped = np_cyclic_wrap_float(angles, 0.0, FULL_TURN)
    return np.where(np.isfinite(angles) & (wrapped < FULL_TURN), wrapped, 0.0)


def is_color_candidate(param: RawParameter) -> bool:
    """A token that can only start the stop list, never a direction."""
    if isinstance(param, ColorValue):
        return True
    return isinstance(param, Keyword) and not is_keyword(param, "to")


def stops_start_index(params: Sequence[RawParameter]) -> int:
    """
    Index of the first color stop in a ``linear-gradient`` parameter list.

    ``to`` consumes the position keywords after it. An angle or any other
    leading token occupies one slot. A leading color means the direction was
    omitted and the stops start at 0.
    """
    if not params:
        return 0
    first = params[0]
    if is_keyword(first, "to"):
        i = 1
        while i < len(params) and _is_position_keyword(params[i]):
            i += 1
        return i
    if is_color_candidate(first):
        return 0
    return 1


def direction_to_angle(
    keywords: Sequence[str],
    mode: DirectionKeywords | str = DirectionKeywords.LEGACY,
) -> float:
    """Map the keywords following ``to`` to a compass angle; order is irrelevant."""
    present = frozenset(k.lower() for k in keywords)
    for required, angle in DIRECTION_TABLES[DirectionKeywords(mode)]:
        if required <= present:
            return angle
    return 0.0


def resolve_angle(
    params: Sequence[RawParameter],
    start_index: int,
    *,
    direction_keywords: DirectionKeywords | str = DirectionKeywords.LEGACY,
    strict: bool = False,
) -> float:
    """
    Resolve the gradient direction to a compass angle in [0, 360).

    Args:
        params: Full parameter list of the gradient function
        start_index: Result of ``stops_start_index(params)``
        direction_keywords: Keyword table used after ``to``
        strict: Raise ``UnsupportedAngleSyntax`` for an unrecognized leading
            token or a non-finite angle instead of warning and falling back
            to 0

    Returns:
        float: Angle in degrees
    """
    direction_keywords = DirectionKeywords(direction_keywords)
    if not params or start_index == 0:
        return DEFAULT_ANGLES[direction_keywords]

    first = params[0]
    if is_keyword(first, "to"):
        keywords = [p.text for p in params[1:start_index]]  # type: ignore[union-attr]
        angle = direction_to_angle(keywords, direction_keywords)
    elif isinstance(first, Degrees):
        angle = first.value
    elif isinstance(first, Radians):
        angle = math.degrees(first.value)
    elif strict:
        raise UnsupportedAngleSyntax(f"Expected an angle or 'to <side>', got {first!r}")
    else:
        warnings.warn(
            f"Unrecognized gradient direction {first!r}, using 0deg",
            GradientWarning,
            stacklevel=2,
        )
        angle = 0.0

    if not math.isfinite(angle):
        if strict:
            raise UnsupportedAngleSyntax(f"Gradient angle must be finite, got {first!r}")
        warnings.warn(
            f"Non-finite gradient angle {first!r}, using 0deg",
            GradientWarning,
            stacklevel=2,
        )
        angle = 0.0

    return normalize_angle(angle)


def _is_position_keyword(param: RawParameter) -> bool:
    return isinstance(param, Keyword) and param.text.lower() in POSITION_KEYWORDS
