"""Interpolation engine owned by a single time series."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

import numpy as np

from .backends.base import CurveBackend, CurveModel
from .backends.factory import build_backend
from .errors import InsufficientSamplesError


class InterpolationMethod(str, Enum):
    LINEAR = "linear"
    SPLINE = "spline"
    DEFAULT = "spline"


class Interpolator:
    """Stateful curve fit over ``(x, y)`` samples.

    ``rebuild`` copies the samples it is given, so callers may hand over
    transient buffers. ``evaluate`` performs no range checks; evaluating
    outside the fitted range extrapolates.
    """

    def __init__(self, method: InterpolationMethod | str = InterpolationMethod.DEFAULT) -> None:
        self._method = InterpolationMethod(method)
        self._backend: CurveBackend = build_backend(self._method.value)
        self._x = np.empty(0)
        self._y = np.empty(0)
        self._model: CurveModel | None = None
        self._rebuilds = 0

    @property
    def method(self) -> InterpolationMethod:
        return self._method

    @property
    def is_fitted(self) -> bool:
        return self._model is not None

    @property
    def rebuilds(self) -> int:
        """Number of fits performed since construction."""
        return self._rebuilds

    def set_method(self, method: InterpolationMethod | str) -> None:
        self._method = InterpolationMethod(method)
        self._backend = build_backend(self._method.value)
        self._model = None

    def rebuild(self, samples: Iterable[Tuple[float, float]]) -> None:
        pairs = np.array([(float(x), float(y)) for x, y in samples], dtype=float).reshape(-1, 2)
        if pairs.shape[0] < 2:
            raise InsufficientSamplesError(
                f"interpolation needs at least 2 samples, got {pairs.shape[0]}"
            )
        self._model = None
        self._x = pairs[:, 0].copy()
        self._y = pairs[:, 1].copy()
        self._model = self._backend.fit(self._x, self._y)
        self._rebuilds += 1

    def evaluate(self, x: float) -> float:
        if self._model is None:
            raise RuntimeError("Interpolator has no fitted data; call rebuild() first")
        return float(self._model(float(x)))
