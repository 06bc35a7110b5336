"""Curve fitting backends used by :class:`tseries.interpolation.Interpolator`."""

from .base import CurveBackend, CurveModel
from .factory import build_backend
from .linear_backend import LinearBackend
from .spline_backend import SplineBackend

__all__ = [
    "CurveBackend",
    "CurveModel",
    "LinearBackend",
    "SplineBackend",
    "build_backend",
]
