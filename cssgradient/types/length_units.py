from enum import Enum

from ..errors import InvalidLength


class LengthUnit(str, Enum):
    PX = "px"
    EM = "em"
    REM = "rem"
    EX = "ex"
    PT = "pt"
    PC = "pc"
    IN = "in"
    CM = "cm"
    MM = "mm"
    Q = "q"
    PERCENTAGE = "%"

    @classmethod
    def parse(cls, unit: "LengthUnit | str") -> "LengthUnit":
        """Return the member for ``unit``, accepting any letter case."""
        if isinstance(unit, cls):
            return unit
        try:
            return cls(str(unit).lower())
        except ValueError:
            raise InvalidLength(f"Unknown length unit: {unit!r}") from None


# CSS reference pixels per unit at 96 dpi
px_per_unit = {
    LengthUnit.PX: 1.0,
    LengthUnit.IN: 96.0,
    LengthUnit.PT: 96.0 / 72.0,
    LengthUnit.PC: 96.0 / 6.0,
    LengthUnit.CM: 96.0 / 2.54,
    LengthUnit.MM: 96.0 / 25.4,
    LengthUnit.Q: 96.0 / 101.6,
}

font_relative_units = {LengthUnit.EM, LengthUnit.REM, LengthUnit.EX}

REFERENCE_DPI = 96.0
