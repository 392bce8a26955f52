"""
cssgradient - CSS linear-gradient resolution
============================================

Turns the parsed arguments of a CSS ``linear-gradient(...)`` call into a
compass angle and color stops anchored at absolute positions, ready for a
paint backend.

Quick Start
-----------
>>> from cssgradient import Keyword, Length, resolve_linear_gradient
>>> spec = resolve_linear_gradient(
...     [Keyword("to"), Keyword("right"),
...      Keyword("red"), Keyword("blue"), Length(10, "px"),
...      Keyword("orange"), Keyword("yellow"),
...      Keyword("black"), Length(100, "px"), Keyword("purple")],
...     box_width=200,
... )
>>> [stop.position for stop in spec.stops]
[0.0, 10.0, 40.0, 70.0, 100.0, 200.0]

Modules
-------
- types: parameter tokens, length units and channel formats
- gradients: angle resolution, stop gathering and position interpolation
- colors: immutable RGBA colors and the named/hex color resolver
- conversions: length-to-pixel conversion and hex parsing
- errors: exception hierarchy and ``GradientWarning``
"""

from .types import (
    Keyword,
    Degrees,
    Radians,
    Length,
    Percentage,
    ColorValue,
    RawParameter,
    GradientFunction,
    LengthUnit,
    FormatType,
)
from .gradients import (
    DirectionKeywords,
    GradientSpec,
    LinearGradient,
    Pending,
    Resolved,
    StopPoint,
    gather_stops,
    interpolate_positions,
    normalize_angle,
    np_normalize_angle,
    resolve_angle,
    resolve_linear_gradient,
    stops_start_index,
)
from .colors import ColorRGBAINT, ColorUnitRGBA, ColorResolver, UnknownColorPolicy, resolve_color
from .conversions import LengthContext, resolve_length
from .errors import (
    GradientError,
    GradientWarning,
    UnsupportedAngleSyntax,
    InsufficientStops,
    DegenerateGradientRange,
    InvalidStopSyntax,
    UnknownColor,
    UnsupportedGradientFunction,
    InvalidLength,
)

__version__ = "1.0.0"

__all__ = [
    # parameter tokens
    "Keyword",
    "Degrees",
    "Radians",
    "Length",
    "Percentage",
    "ColorValue",
    "RawParameter",
    "GradientFunction",
    "LengthUnit",
    "FormatType",
    # resolution
    "DirectionKeywords",
    "GradientSpec",
    "LinearGradient",
    "Pending",
    "Resolved",
    "StopPoint",
    "gather_stops",
    "interpolate_positions",
    "normalize_angle",
    "np_normalize_angle",
    "resolve_angle",
    "resolve_linear_gradient",
    "stops_start_index",
    # collaborators
    "ColorRGBAINT",
    "ColorUnitRGBA",
    "ColorResolver",
    "UnknownColorPolicy",
    "resolve_color",
    "LengthContext",
    "resolve_length",
    # errors
    "GradientError",
    "GradientWarning",
    "UnsupportedAngleSyntax",
    "InsufficientStops",
    "DegenerateGradientRange",
    "InvalidStopSyntax",
    "UnknownColor",
    "UnsupportedGradientFunction",
    "InvalidLength",
    "__version__",
]
