"""Time-indexed value containers with policy-gated interpolation."""

from .adapters import NumericAdapter, UnitValueAdapter, ValueAdapter, adapter_for, register_adapter
from .config import SeriesConfig
from .diagnostics import describe_series
from .errors import (
    EmptySeriesError,
    ExtrapolationNotPermittedError,
    InsufficientSamplesError,
    InterpolationNotPermittedError,
    TimeSeriesError,
    UnitMismatchError,
)
from .interpolation import InterpolationMethod, Interpolator
from .series import TimeSeries
from .series_io import load_series_table, read_series
from .units import Unit, UnitValue, parse_unit_name

__all__ = [
    "EmptySeriesError",
    "ExtrapolationNotPermittedError",
    "InsufficientSamplesError",
    "InterpolationMethod",
    "InterpolationNotPermittedError",
    "Interpolator",
    "NumericAdapter",
    "SeriesConfig",
    "TimeSeries",
    "TimeSeriesError",
    "Unit",
    "UnitMismatchError",
    "UnitValue",
    "UnitValueAdapter",
    "ValueAdapter",
    "adapter_for",
    "describe_series",
    "load_series_table",
    "parse_unit_name",
    "read_series",
    "register_adapter",
]
