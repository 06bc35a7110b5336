"""Time-indexed value container with policy-gated interpolation."""

from __future__ import annotations

from bisect import insort
import logging
import math
import threading
from typing import Generic, Iterable, Iterator, Tuple, TypeVar

from .adapters import ValueAdapter, adapter_for
from .config import SeriesConfig
from .errors import (
    EmptySeriesError,
    ExtrapolationNotPermittedError,
    InsufficientSamplesError,
    InterpolationNotPermittedError,
)
from .interpolation import InterpolationMethod, Interpolator

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimeSeries(Generic[T]):
    """Ordered mapping from time to value.

    ``get`` returns stored samples directly. A query at a time with no
    sample is answered from a fitted curve only when the time lies before
    the interpolation cutoff (and, outside ``[first(), last()]``, only when
    extrapolation is allowed). By default the cutoff is ``-inf`` so the
    series behaves as a plain lookup table.

    ``get`` is logically pure but internally memoized: the curve is refit
    from the full sample set on the first interpolated query after a change
    and reused until the next change. A change is a ``set`` before the
    cutoff or any policy change; samples set at or after the cutoff leave
    the current fit untouched.

    Instances are owned by one simulation component. The refit step is
    guarded by a per-instance lock so concurrent reads do not fit twice.
    """

    def __init__(
        self,
        name: str = "?",
        *,
        adapter: ValueAdapter | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.name = name
        self._data: dict[float, T] = {}
        self._times: list[float] = []
        self._adapter = adapter
        self._log = logger if logger is not None else _logger
        self._lock = threading.RLock()
        self._interpolator = Interpolator()
        self._cutoff = -math.inf
        self._extrapolation_allowed = False
        self._dirty = False

    @classmethod
    def from_config(
        cls,
        cfg: SeriesConfig,
        samples: Iterable[Tuple[float, T]] = (),
        *,
        adapter: ValueAdapter | None = None,
        logger: logging.Logger | None = None,
    ) -> "TimeSeries[T]":
        series: TimeSeries[T] = cls(cfg.name, adapter=adapter, logger=logger)
        for t, value in samples:
            series.set(t, value)
        if cfg.interpolation == "full":
            series.allow_interp(cfg.extrapolation, method=cfg.method)
        elif cfg.interpolation == "partial":
            series.allow_partial_interp(cfg.extrapolation, method=cfg.method)
        return series

    # -- policy -----------------------------------------------------------

    @property
    def cutoff(self) -> float:
        return self._cutoff

    @property
    def extrapolation_allowed(self) -> bool:
        return self._extrapolation_allowed

    @property
    def method(self) -> InterpolationMethod:
        return self._interpolator.method

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def interpolator(self) -> Interpolator:
        return self._interpolator

    def _set_interp(self, cutoff: float, extrapolation_allowed: bool, method: InterpolationMethod | str) -> None:
        with self._lock:
            self._cutoff = cutoff
            self._extrapolation_allowed = bool(extrapolation_allowed)
            self._interpolator.set_method(method)
            self._dirty = True

    def allow_interp(
        self,
        extrapolation_allowed: bool,
        *,
        method: InterpolationMethod | str = InterpolationMethod.DEFAULT,
    ) -> None:
        """Permit interpolation at any time."""
        self._set_interp(math.inf, extrapolation_allowed, method)

    def allow_partial_interp(
        self,
        extrapolation_allowed: bool,
        *,
        method: InterpolationMethod | str = InterpolationMethod.DEFAULT,
    ) -> None:
        """Permit interpolation strictly before the current last sample.

        The cutoff is fixed when this is called; later samples do not move it.
        With extrapolation allowed this only matters below ``first()``.
        """
        self._set_interp(self.last(), extrapolation_allowed, method)

    # -- samples ----------------------------------------------------------

    def set(self, time: float, value: T) -> None:
        t = float(time)
        if not math.isfinite(t):
            raise ValueError("time must be finite")
        with self._lock:
            if t not in self._data:
                insort(self._times, t)
            self._data[t] = value
            if t < self._cutoff:
                self._dirty = True

    def exists(self, time: float) -> bool:
        return float(time) in self._data

    def first(self) -> float:
        if not self._times:
            raise EmptySeriesError(f"time series '{self.name}' has no data")
        return self._times[0]

    def last(self) -> float:
        if not self._times:
            raise EmptySeriesError(f"time series '{self.name}' has no data")
        return self._times[-1]

    def size(self) -> int:
        return len(self._data)

    def times(self) -> list[float]:
        return list(self._times)

    def get(self, time: float) -> T:
        t = float(time)
        try:
            return self._data[t]
        except KeyError:
            pass
        if not t < self._cutoff:
            interp_enabled = self._cutoff > -math.inf
            if interp_enabled and self._times and not self._extrapolation_allowed and self._outside(t):
                self._refuse(t, ExtrapolationNotPermittedError)
            self._refuse(t, InterpolationNotPermittedError)
        return self._interpolate(t)

    # -- internals --------------------------------------------------------

    def _outside(self, t: float) -> bool:
        return t < self._times[0] or t > self._times[-1]

    def _refuse(self, t: float, error: type[InterpolationNotPermittedError]) -> None:
        extrapolation = error is ExtrapolationNotPermittedError
        self._log.warning(
            "Interpolation requested but not allowed (%s) date: %s",
            self.name,
            t,
            extra={
                "event": "tseries.extrapolation_refused" if extrapolation else "tseries.interpolation_refused",
                "series": self.name,
                "time": t,
            },
        )
        message = "end interpolation not allowed" if extrapolation else "Interpolation requested but not allowed"
        raise error(f"{message} ({self.name}) date: {t}", name=self.name, time=t)

    def _resolve_adapter(self) -> ValueAdapter:
        if self._adapter is None:
            self._adapter = adapter_for(type(self._data[self._times[0]]))
        return self._adapter

    def _interpolate(self, t: float) -> T:
        with self._lock:
            if len(self._times) < 2:
                raise InsufficientSamplesError(
                    f"time series '{self.name}' must have more than one sample to interpolate"
                )
            if not self._extrapolation_allowed and self._outside(t):
                self._refuse(t, ExtrapolationNotPermittedError)

            adapter = self._resolve_adapter()
            if self._dirty or not self._interpolator.is_fitted:
                self._log.debug(
                    "Informing interpolator of new data (%s)",
                    self.name,
                    extra={"event": "tseries.rebuild", "series": self.name, "samples": len(self._times)},
                )
                self._interpolator.rebuild((x, adapter.to_magnitude(self._data[x])) for x in self._times)
                self._dirty = False
            exemplar = self._data[self._times[0]]
            return adapter.from_magnitude(self._interpolator.evaluate(t), exemplar)

    # -- python protocol --------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, time: object) -> bool:
        try:
            return float(time) in self._data  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Tuple[float, T]]:
        for t in list(self._times):
            yield t, self._data[t]

    def __repr__(self) -> str:
        return (
            f"TimeSeries(name={self.name!r}, size={len(self._data)}, "
            f"cutoff={self._cutoff}, extrapolation_allowed={self._extrapolation_allowed})"
        )
