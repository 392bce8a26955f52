"""
Colors
======

Immutable RGBA color values and the default color-keyword resolver used
for gradient stops.

>>> from cssgradient.colors import resolve_color
>>> resolve_color("rebeccapurple").value
(102, 51, 153, 255)
>>> resolve_color("#f008").convert("float").value
(1.0, 0.0, 0.0, 0.5333333333333333)
"""

from .color_base import ColorBase, ColorRGBAINT, ColorUnitRGBA, format_to_class
from .named import NAMED_COLORS
from .resolver import ColorResolver, UnknownColorPolicy, resolve_color

__all__ = [
    "ColorBase",
    "ColorRGBAINT",
    "ColorUnitRGBA",
    "format_to_class",
    "NAMED_COLORS",
    "ColorResolver",
    "UnknownColorPolicy",
    "resolve_color",
]
