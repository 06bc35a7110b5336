"""Query a time series table from the command line with ``python -m tseries``."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import SeriesConfig
from .diagnostics import describe_series, value_to_json
from .errors import TimeSeriesError
from .series_io import read_series


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tseries", description="Look up or interpolate values in a time series table.")
    ap.add_argument("table", help="Two-column text table: time value")
    ap.add_argument("--at", dest="times", type=float, action="append", default=[], help="Time to query (repeatable)")
    ap.add_argument("--interp", choices=["none", "partial", "full"], default="none")
    ap.add_argument("--extrapolate", action="store_true", help="Allow queries outside the sample range")
    ap.add_argument("--method", choices=["spline", "linear"], default="spline")
    ap.add_argument("--units", default=None, help="Units name attached to every value, e.g. 'Pg C'")
    ap.add_argument("--name", default=None, help="Series name used in messages (default: table path)")
    ap.add_argument("--delimiter", default=None)
    ap.add_argument("--skiprows", type=int, default=0)
    ap.add_argument("--log-level", default="WARNING")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    try:
        cfg = SeriesConfig(
            name=args.name or args.table,
            interpolation=args.interp,
            extrapolation=args.extrapolate,
            method=args.method,
        )
    except ValueError as exc:
        ap.error(str(exc))
    try:
        series = read_series(
            args.table,
            cfg,
            units=args.units,
            delimiter=args.delimiter,
            skiprows=args.skiprows,
        )
    except (OSError, ValueError) as exc:
        ap.error(str(exc))

    results = []
    failed = False
    for t in args.times:
        entry: dict = {"time": t, "exact": series.exists(t)}
        try:
            entry["value"] = value_to_json(series.get(t))
        except TimeSeriesError as exc:
            entry["error"] = {"kind": type(exc).__name__, "message": str(exc)}
            failed = True
        results.append(entry)

    print(json.dumps({"series": describe_series(series), "queries": results}, indent=2, sort_keys=True))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
