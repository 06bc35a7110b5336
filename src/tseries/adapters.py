"""Conversions between stored series values and plain fitting magnitudes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from .units import UnitValue


class ValueAdapter(Protocol):
    def to_magnitude(self, value: Any) -> float:
        ...

    def from_magnitude(self, magnitude: float, exemplar: Any) -> Any:
        ...


@dataclass(frozen=True)
class NumericAdapter:
    """Identity adapter for plain numbers."""

    def to_magnitude(self, value: Any) -> float:
        return value

    def from_magnitude(self, magnitude: float, exemplar: Any) -> Any:
        return magnitude


@dataclass(frozen=True)
class UnitValueAdapter:
    """Adapter for :class:`UnitValue` samples.

    The unit of a reconstructed value is copied from ``exemplar``. All
    samples in one series are assumed to share that unit; later samples in
    a different unit are not detected here.
    """

    def to_magnitude(self, value: UnitValue) -> float:
        return value.value_in(value.units)

    def from_magnitude(self, magnitude: float, exemplar: UnitValue) -> UnitValue:
        return UnitValue(float(magnitude), exemplar.units)


NUMERIC_ADAPTER = NumericAdapter()

_REGISTRY: dict[type, ValueAdapter] = {
    UnitValue: UnitValueAdapter(),
}


def register_adapter(kind: type, adapter: ValueAdapter) -> None:
    _REGISTRY[kind] = adapter


def adapter_for(kind: type) -> ValueAdapter:
    """Return the adapter registered for ``kind`` or one of its bases."""
    for base in getattr(kind, "__mro__", (kind,)):
        adapter = _REGISTRY.get(base)
        if adapter is not None:
            return adapter
    return NUMERIC_ADAPTER
