from .length_units import LengthUnit
from .format_type import FormatType
from .params import (
    Keyword,
    Degrees,
    Radians,
    Length,
    Percentage,
    ColorValue,
    RawParameter,
    GradientFunction,
)

__all__ = [
    "LengthUnit",
    "FormatType",
    "Keyword",
    "Degrees",
    "Radians",
    "Length",
    "Percentage",
    "ColorValue",
    "RawParameter",
    "GradientFunction",
]
