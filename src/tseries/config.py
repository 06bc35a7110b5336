"""Configuration for time series policies."""

from __future__ import annotations

from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, Mapping

INTERPOLATION_MODES = ("none", "partial", "full")
METHODS = ("linear", "spline")


@dataclass(frozen=True)
class SeriesConfig:
    """Name and interpolation policy applied to a newly loaded series.

    ``interpolation`` selects no interpolation (``none``), interpolation
    before the last loaded sample (``partial``) or everywhere (``full``).
    """

    name: str = "?"
    interpolation: str = "none"
    extrapolation: bool = False
    method: str = "spline"

    def __post_init__(self) -> None:
        if str(self.name).strip() == "":
            raise ValueError("name cannot be empty")
        if self.interpolation not in INTERPOLATION_MODES:
            raise ValueError("interpolation must be one of: none, partial, full")
        if self.method not in METHODS:
            raise ValueError("method must be one of: linear, spline")
        if not isinstance(self.extrapolation, bool):
            raise ValueError("extrapolation must be a bool")
        if self.extrapolation and self.interpolation == "none":
            raise ValueError("extrapolation requires interpolation to be partial or full")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SeriesConfig":
        known = {f.name for f in dataclass_fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown series config keys: {', '.join(unknown)}")
        return cls(**dict(mapping))
