from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Union

from .length_units import LengthUnit


@dataclass(frozen=True, slots=True)
class Keyword:
    """An identifier token such as ``to``, ``top`` or ``red``."""
    text: str


@dataclass(frozen=True, slots=True)
class Degrees:
    value: float


@dataclass(frozen=True, slots=True)
class Radians:
    value: float


@dataclass(frozen=True, slots=True)
class Length:
    value: float
    unit: LengthUnit

    def __post_init__(self):
        # Accept plain strings ("px") and store the enum member
        object.__setattr__(self, "unit", LengthUnit.parse(self.unit))


@dataclass(frozen=True, slots=True)
class Percentage:
    value: float


@dataclass(frozen=True, slots=True)
class ColorValue:
    """A color the parser already resolved; carried through untouched."""
    color: Any


RawParameter = Union[Keyword, Degrees, Radians, Length, Percentage, ColorValue]


@dataclass(frozen=True, slots=True)
class GradientFunction:
    """A parsed CSS function call: its name and ordered parameters."""
    name: str
    params: tuple[RawParameter, ...]

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))


def is_keyword(param: RawParameter, text: str | None = None) -> bool:
    """Check whether ``param`` is a keyword, optionally with the given text."""
    if not isinstance(param, Keyword):
        return False
    return text is None or param.text.lower() == text
