from .angle import (
    CSS_DEFAULT_ANGLE,
    DEFAULT_ANGLES,
    LEGACY_DEFAULT_ANGLE,
    DirectionKeywords,
    direction_to_angle,
    normalize_angle,
    np_normalize_angle,
    resolve_angle,
    stops_start_index,
)
from .stops import Pending, Resolved, Stop, gather_stops
from .interpolation import interpolate_positions
from .linear import GradientSpec, LinearGradient, StopPoint, resolve_linear_gradient

__all__ = [
    "CSS_DEFAULT_ANGLE",
    "DEFAULT_ANGLES",
    "LEGACY_DEFAULT_ANGLE",
    "DirectionKeywords",
    "direction_to_angle",
    "normalize_angle",
    "np_normalize_angle",
    "resolve_angle",
    "stops_start_index",
    "Pending",
    "Resolved",
    "Stop",
    "gather_stops",
    "interpolate_positions",
    "GradientSpec",
    "LinearGradient",
    "StopPoint",
    "resolve_linear_gradient",
]
