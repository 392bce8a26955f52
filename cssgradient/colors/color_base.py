from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast
from boundednumbers import clamp
import numpy as np

from ..types.format_type import FormatType, format_classes, max_channel, default_format_dtypes

Scalar = int | float
RGBATuple = Tuple[Scalar, Scalar, Scalar, Scalar]


class ColorBase:
    """
    Immutable RGBA color.

    Channels are clamped to ``[0, maxima]`` on construction and the instance
    is frozen once ``__init__`` returns, so colors can be shared freely
    between resolved gradients.
    """
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 4
    maxima: ClassVar[RGBATuple]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorBase | Tuple[Scalar, ...]) -> None:
        if isinstance(value, ColorBase):
            value = value.convert(self.format_type).value

        value = tuple(value)
        if len(value) == self.num_channels - 1:
            # Opaque by default
            value = value + (self.maxima[-1],)
        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.num_channels - 1} or "
                f"{self.num_channels} channels, got {len(value)}"
            )

        cast_type = format_classes[self.format_type]
        value = tuple(
            cast_type(clamp(v, 0, m)) for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
        )

        self._value = value
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> RGBATuple:
        return self._value

    @property
    def alpha(self) -> Scalar:
        return self._value[-1]

    @property
    def is_opaque(self) -> bool:
        return self.alpha == self.maxima[-1]

    def convert(self, to_format: FormatType | str) -> ColorBase:
        """Return the same color expressed in another channel format."""
        to_format = FormatType(to_format)
        if to_format == self.format_type:
            return self
        src_max = max_channel[self.format_type]
        dst_max = max_channel[to_format]
        scaled = tuple(v / src_max * dst_max for v in self._value)
        if to_format == FormatType.INT:
            scaled = tuple(round(v) for v in scaled)
        return format_to_class[to_format](scaled)

    def to_array(self) -> np.ndarray:
        return np.array(self._value, dtype=default_format_dtypes[self.format_type])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.format_type == other.format_type and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.format_type, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class ColorRGBAINT(ColorBase):
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGBA(ColorBase):
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


format_to_class: dict[FormatType, type[ColorBase]] = {
    cls.format_type: cls for cls in (ColorRGBAINT, ColorUnitRGBA)
}
