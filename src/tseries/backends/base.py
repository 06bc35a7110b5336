"""Backend protocol for fitted one-dimensional curves."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class CurveModel(Protocol):
    def __call__(self, x: float) -> float:
        ...


class CurveBackend(Protocol):
    def fit(self, x: np.ndarray, y: np.ndarray) -> CurveModel:
        ...
