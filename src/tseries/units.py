"""Quantities tagged with a measurement unit.

Values carry their unit along but are never converted: combining two
quantities in different units is an error, not a conversion.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import UnitMismatchError


class Unit(str, Enum):
    """Measurement units used by simulation components."""

    UNITLESS = "(unitless)"
    PGC = "Pg C"
    PGC_YR = "Pg C/yr"
    PPMV_CO2 = "ppmv CO2"
    PPBV_CH4 = "ppbv CH4"
    PPBV_N2O = "ppbv N2O"
    PPTV = "pptv"
    W_M2 = "W/m2"
    W_M2_K = "W/m2/K"
    DEGC = "degC"
    K = "K"
    GG = "Gg"
    TG = "Tg"
    TG_CH4 = "Tg CH4"
    TG_N = "Tg N"
    GG_S = "Gg S"
    YEARS = "yr"
    DOBSON = "DU O3"
    PH = "pH"
    MOL_KG = "mol/kg"
    UNDEFINED = "(undefined)"

    def __str__(self) -> str:
        return self.value


_UNITS_BY_NAME = {u.value: u for u in Unit}


def parse_unit_name(name: str) -> Unit:
    """Return the :class:`Unit` whose display name is ``name``."""
    key = str(name).strip()
    try:
        return _UNITS_BY_NAME[key]
    except KeyError:
        raise ValueError(f"Unknown units name: {name!r}") from None


@dataclass(frozen=True)
class UnitValue:
    """A plain magnitude together with the unit it is expressed in."""

    value: float
    units: Unit = Unit.UNITLESS

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        if not isinstance(self.units, Unit):
            object.__setattr__(self, "units", parse_unit_name(self.units))

    def value_in(self, units: Unit) -> float:
        if units != self.units:
            raise UnitMismatchError(f"Unit mismatch: stored {self.units}, requested {units}")
        return self.value

    def _check_units(self, other: "UnitValue") -> None:
        if other.units != self.units:
            raise UnitMismatchError(f"Unit mismatch: {self.units} vs {other.units}")

    def __add__(self, other: "UnitValue") -> "UnitValue":
        if not isinstance(other, UnitValue):
            return NotImplemented
        self._check_units(other)
        return UnitValue(self.value + other.value, self.units)

    def __sub__(self, other: "UnitValue") -> "UnitValue":
        if not isinstance(other, UnitValue):
            return NotImplemented
        self._check_units(other)
        return UnitValue(self.value - other.value, self.units)

    def __mul__(self, factor: float) -> "UnitValue":
        if isinstance(factor, UnitValue):
            return NotImplemented
        return UnitValue(self.value * float(factor), self.units)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "UnitValue":
        if isinstance(divisor, UnitValue):
            return NotImplemented
        return UnitValue(self.value / float(divisor), self.units)

    def __neg__(self) -> "UnitValue":
        return UnitValue(-self.value, self.units)

    def __str__(self) -> str:
        return f"{self.value:g} {self.units}"
