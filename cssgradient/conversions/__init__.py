"""
Unit conversions feeding gradient resolution.

resolve_length(value, unit, percentage_basis, context=None)
    CSS length or percentage to device pixels
hex_to_rgba_int(text)
    CSS hex color notation to 8-bit RGBA channels
"""

from .hex import hex_to_rgba_int, is_hex_color
from .lengths import DEFAULT_CONTEXT, LengthContext, LengthResolver, resolve_length

__all__ = [
    "hex_to_rgba_int",
    "is_hex_color",
    "DEFAULT_CONTEXT",
    "LengthContext",
    "LengthResolver",
    "resolve_length",
]
