"""Backend factory for curve fitting strategies."""

from __future__ import annotations

from .base import CurveBackend
from .linear_backend import build_linear_backend
from .spline_backend import build_spline_backend


def build_backend(name: str) -> CurveBackend:
    if name == "spline":
        return build_spline_backend()
    if name == "linear":
        return build_linear_backend()
    raise ValueError(f"Unknown backend: {name}")
