"""Readers for two-column ``time value`` tables."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .config import SeriesConfig
from .series import TimeSeries
from .units import UnitValue, parse_unit_name


def load_series_table(path: str | Path, *, delimiter: str | None = None, skiprows: int = 0):
    arr = np.loadtxt(Path(path), delimiter=delimiter, skiprows=skiprows, ndmin=2)
    if arr.size == 0:
        raise ValueError(f"{path}: table has no rows")
    if arr.shape[1] < 2:
        raise ValueError(f"{path}: expected at least 2 columns (time, value), got {arr.shape[1]}")
    return arr[:, 0].copy(), arr[:, 1].copy()


def read_series(
    path: str | Path,
    cfg: SeriesConfig,
    *,
    units: str | None = None,
    delimiter: str | None = None,
    skiprows: int = 0,
    logger: logging.Logger | None = None,
) -> TimeSeries:
    """Load ``path`` into a series named and configured by ``cfg``.

    With ``units`` every value is wrapped in :class:`UnitValue`.
    """
    times, values = load_series_table(path, delimiter=delimiter, skiprows=skiprows)
    if units is not None:
        unit = parse_unit_name(units)
        samples = [(float(t), UnitValue(float(v), unit)) for t, v in zip(times, values)]
    else:
        samples = [(float(t), float(v)) for t, v in zip(times, values)]
    return TimeSeries.from_config(cfg, samples, logger=logger)
