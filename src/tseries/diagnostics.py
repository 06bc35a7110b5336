"""Diagnostic summaries of time series state."""

from __future__ import annotations

import math

from .series import TimeSeries
from .units import UnitValue


def _json_float(x: float) -> float | str:
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return float(x)


def value_to_json(value) -> dict | float:
    if isinstance(value, UnitValue):
        return {"value": value.value, "units": str(value.units)}
    return float(value)


def describe_series(series: TimeSeries) -> dict:
    n = series.size()
    return {
        "name": series.name,
        "size": n,
        "first": series.first() if n else None,
        "last": series.last() if n else None,
        "cutoff": _json_float(series.cutoff),
        "extrapolation_allowed": series.extrapolation_allowed,
        "method": series.method.value,
        "dirty": series.dirty,
        "rebuilds": series.interpolator.rebuilds,
    }
