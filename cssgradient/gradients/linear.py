from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import math

import numpy as np

from ..colors.color_base import ColorBase
from ..colors.resolver import ColorResolver, UnknownColorPolicy
from ..conversions.lengths import LengthContext, LengthResolver, resolve_length
from ..errors import InsufficientStops, UnsupportedGradientFunction
from ..types.format_type import FormatType
from ..types.length_units import LengthUnit
from ..types.params import GradientFunction, RawParameter
from .angle import DirectionKeywords, resolve_angle, stops_start_index
from .interpolation import interpolate_positions
from .stops import ColorResolverFn, Resolved, gather_stops

LINEAR_GRADIENT = "linear-gradient"

StopPoint = Resolved


@dataclass(frozen=True, slots=True)
class GradientSpec:
    """
    Renderer-ready linear gradient.

    Attributes:
        angle: Compass angle in degrees, 0 <= angle < 360 (0 points up,
            90 points right)
        stops: Stops in declaration order; positions are absolute and not
            necessarily increasing
    """
    angle: float
    stops: Tuple[StopPoint, ...]

    @property
    def positions(self) -> np.ndarray:
        return np.array([stop.position for stop in self.stops], dtype=np.float64)

    @property
    def colors(self) -> np.ndarray:
        """Stop colors as an (n, 4) float RGBA array."""
        rows = []
        for stop in self.stops:
            if not isinstance(stop.color, ColorBase):
                raise TypeError(f"Stop color {stop.color!r} is not a ColorBase instance")
            rows.append(stop.color.convert(FormatType.FLOAT).to_array())
        return np.stack(rows) if rows else np.empty((0, 4), dtype=np.float64)

    def gradient_line_length(self, width: float, height: float) -> float:
        """Length of the gradient line through a ``width`` x ``height`` box."""
        theta = math.radians(self.angle)
        return abs(width * math.sin(theta)) + abs(height * math.cos(theta))

    def gradient_line(self, width: float, height: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Start and end points of the gradient line in box coordinates (y down).

        The line passes through the box center and is long enough for the
        0% and 100% positions to touch opposite corners.
        """
        theta = math.radians(self.angle)
        direction = np.array([math.sin(theta), -math.cos(theta)])
        center = np.array([width / 2.0, height / 2.0])
        half = direction * self.gradient_line_length(width, height) / 2.0
        return center - half, center + half


class LinearGradient:
    """
    Resolves ``linear-gradient(...)`` parameter lists into ``GradientSpec``.

    Holds the collaborators and options; resolving is stateless, so one
    instance can be shared between threads when the collaborators allow it.

    Args:
        color_resolver: Maps a color keyword to a color. Defaults to the
            named/hex resolver with ``unknown_colors`` policy.
        length_resolver: Maps (value, unit, basis, context) to absolute units
        direction_keywords: ``LEGACY`` maps lone ``to left``/``to right`` to 0;
            ``CSS`` maps them to 270/90
        strict: Raise on an unrecognized leading token or a non-finite angle
            instead of warning
        unknown_colors: Policy of the default color resolver
    """

    __slots__ = ('color_resolver', 'length_resolver', 'direction_keywords', 'strict')

    def __init__(
        self,
        color_resolver: Optional[ColorResolverFn] = None,
        length_resolver: LengthResolver = resolve_length,
        *,
        direction_keywords: DirectionKeywords | str = DirectionKeywords.LEGACY,
        strict: bool = False,
        unknown_colors: UnknownColorPolicy | str = UnknownColorPolicy.RAISE,
    ):
        self.color_resolver = color_resolver if color_resolver is not None else ColorResolver(unknown_colors)
        self.length_resolver = length_resolver
        self.direction_keywords = DirectionKeywords(direction_keywords)
        self.strict = strict

    def resolve(
        self,
        params: Sequence[RawParameter],
        box_width: float,
        context: Optional[LengthContext] = None,
    ) -> GradientSpec:
        params = tuple(params)
        if not params:
            raise InsufficientStops("linear-gradient() needs at least one color stop")

        start = stops_start_index(params)
        angle = resolve_angle(
            params,
            start,
            direction_keywords=self.direction_keywords,
            strict=self.strict,
        )

        gathered = gather_stops(
            params,
            start,
            box_width,
            context,
            color_resolver=self.color_resolver,
            length_resolver=self.length_resolver,
        )
        if not gathered:
            raise InsufficientStops(f"No color stops after the direction in {params!r}")

        full_length = float(self.length_resolver(100.0, LengthUnit.PERCENTAGE, box_width, context))
        return GradientSpec(angle, interpolate_positions(gathered, full_length))

    def from_function(
        self,
        function: GradientFunction,
        box_width: float,
        context: Optional[LengthContext] = None,
    ) -> GradientSpec:
        if function.name.strip().lower() != LINEAR_GRADIENT:
            raise UnsupportedGradientFunction(
                f"Only {LINEAR_GRADIENT}() is supported, got {function.name}()"
            )
        return self.resolve(function.params, box_width, context)

    def __repr__(self) -> str:
        return (
            f"LinearGradient(direction_keywords={self.direction_keywords.value!r}, "
            f"strict={self.strict})"
        )


def resolve_linear_gradient(
    params: Sequence[RawParameter],
    box_width: float,
    context: Optional[LengthContext] = None,
    **options,
) -> GradientSpec:
    """
    Resolve a ``linear-gradient`` parameter list in one call.

    ``options`` are the keyword arguments of ``LinearGradient``.
    """
    return LinearGradient(**options).resolve(params, box_width, context)
