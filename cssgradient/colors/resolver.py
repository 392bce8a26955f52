from __future__ import annotations
from enum import Enum
import warnings

from ..conversions.hex import hex_to_rgba_int, is_hex_color
from ..errors import GradientWarning, UnknownColor
from .color_base import ColorRGBAINT
from .named import NAMED_COLORS


class UnknownColorPolicy(str, Enum):
    RAISE = "raise"
    WARN = "warn"


FALLBACK_COLOR = ColorRGBAINT((0, 0, 0, 255))


def resolve_color(name: str, policy: UnknownColorPolicy | str = UnknownColorPolicy.RAISE) -> ColorRGBAINT:
    """
    Resolve a CSS color keyword or hex literal to an 8-bit RGBA color.

    Args:
        name: Named color (any case) or ``#rgb``/``#rgba``/``#rrggbb``/``#rrggbbaa``
        policy: What to do with an unrecognized name. ``RAISE`` raises
            ``UnknownColor``; ``WARN`` emits a ``GradientWarning`` and returns
            opaque black.

    Returns:
        ColorRGBAINT instance
    """
    policy = UnknownColorPolicy(policy)
    key = name.strip().lower()

    if is_hex_color(key):
        return ColorRGBAINT(hex_to_rgba_int(key))

    hex_value = NAMED_COLORS.get(key)
    if hex_value is not None:
        return ColorRGBAINT(hex_to_rgba_int(hex_value))

    if policy == UnknownColorPolicy.WARN:
        warnings.warn(
            f"Unknown color {name!r}, using black",
            GradientWarning,
            stacklevel=2,
        )
        return FALLBACK_COLOR
    raise UnknownColor(f"Unknown color keyword: {name!r}")


class ColorResolver:
    """``resolve_color`` bound to a fixed unknown-color policy."""

    __slots__ = ('policy',)

    def __init__(self, policy: UnknownColorPolicy | str = UnknownColorPolicy.RAISE):
        self.policy = UnknownColorPolicy(policy)

    def __call__(self, name: str) -> ColorRGBAINT:
        return resolve_color(name, self.policy)

    def __repr__(self) -> str:
        return f"ColorResolver(policy={self.policy.value!r})"
