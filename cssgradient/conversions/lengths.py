from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol

from ..errors import InvalidLength
from ..types.length_units import (
    LengthUnit,
    REFERENCE_DPI,
    font_relative_units,
    px_per_unit,
)


@dataclass(frozen=True, slots=True)
class LengthContext:
    """
    Style values needed to turn relative lengths into device pixels.

    Attributes:
        font_size: Computed font size of the element, in px (``em``)
        root_font_size: Font size of the root element, in px (``rem``)
        x_height: x-height in px (``ex``); half of ``font_size`` when None
        dpi: Output resolution; absolute units scale by ``dpi / 96``
    """
    font_size: float = 16.0
    root_font_size: float = 16.0
    x_height: Optional[float] = None
    dpi: float = REFERENCE_DPI

    @property
    def scale(self) -> float:
        return self.dpi / REFERENCE_DPI

    def font_unit(self, unit: LengthUnit) -> float:
        if unit == LengthUnit.EM:
            return self.font_size
        if unit == LengthUnit.REM:
            return self.root_font_size
        return self.x_height if self.x_height is not None else self.font_size / 2.0


DEFAULT_CONTEXT = LengthContext()


class LengthResolver(Protocol):
    def __call__(
        self,
        value: float,
        unit: LengthUnit | str,
        percentage_basis: float,
        context: Optional[LengthContext],
    ) -> float: ...


def resolve_length(
    value: float,
    unit: LengthUnit | str,
    percentage_basis: float,
    context: Optional[LengthContext] = None,
) -> float:
    """
    Convert a CSS length or percentage to absolute units along the gradient axis.

    Args:
        value: Numeric part of the length
        unit: Unit of the length, ``%`` for percentages
        percentage_basis: Length that 100% refers to (the box width)
        context: Font sizes and resolution; ``DEFAULT_CONTEXT`` when None

    Returns:
        float: Length in device pixels
    """
    unit = LengthUnit.parse(unit)
    context = context if context is not None else DEFAULT_CONTEXT

    if unit == LengthUnit.PERCENTAGE:
        if percentage_basis < 0:
            raise InvalidLength(f"Percentage basis must be non-negative, got {percentage_basis}")
        return value / 100.0 * percentage_basis

    if unit in font_relative_units:
        # Font sizes are already device pixels
        return value * context.font_unit(unit)

    return value * px_per_unit[unit] * context.scale
