"""Exception types raised by time series containers."""

from __future__ import annotations


class TimeSeriesError(Exception):
    """Base class for all time series failures."""


class EmptySeriesError(TimeSeriesError, LookupError):
    """Raised when the bounds of a series without samples are requested."""


class InsufficientSamplesError(TimeSeriesError, ValueError):
    """Raised when a fit is attempted with fewer than two samples."""


class InterpolationNotPermittedError(TimeSeriesError):
    """Raised when a missing time is queried outside the permitted region."""

    def __init__(self, message: str, *, name: str = "?", time: float | None = None) -> None:
        super().__init__(message)
        self.name = name
        self.time = time


class ExtrapolationNotPermittedError(InterpolationNotPermittedError):
    """Raised when a query falls outside the sample range and end interpolation is off."""


class UnitMismatchError(TimeSeriesError, ValueError):
    """Raised when quantities in different units are combined."""
