from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

import numpy as np

from tseries import SeriesConfig, Unit, UnitValue, describe_series, load_series_table, read_series
from tseries.__main__ import main


TABLE = "# year value\n1990 10.0\n2000 20.0\n2010 15.0\n"


class _TableCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "forcing.txt"
        self.path.write_text(TABLE)


class TestSeriesIO(_TableCase):
    def test_load_series_table(self) -> None:
        times, values = load_series_table(self.path)
        np.testing.assert_allclose(times, [1990.0, 2000.0, 2010.0])
        np.testing.assert_allclose(values, [10.0, 20.0, 15.0])

    def test_load_csv_with_header(self) -> None:
        csv = Path(self._tmp.name) / "f.csv"
        csv.write_text("year,value\n1,2\n3,4\n")
        times, values = load_series_table(csv, delimiter=",", skiprows=1)
        np.testing.assert_allclose(times, [1.0, 3.0])
        np.testing.assert_allclose(values, [2.0, 4.0])

    def test_single_column_rejected(self) -> None:
        bad = Path(self._tmp.name) / "bad.txt"
        bad.write_text("1\n2\n")
        with self.assertRaises(ValueError):
            load_series_table(bad)

    def test_read_series_with_units(self) -> None:
        s = read_series(self.path, SeriesConfig(name="Ca", interpolation="partial"), units="Pg C")
        self.assertEqual(s.get(2000), UnitValue(20.0, Unit.PGC))
        self.assertIs(s.get(1995).units, Unit.PGC)

    def test_describe_series(self) -> None:
        s = read_series(self.path, SeriesConfig(name="forcing", interpolation="full"))
        s.get(1995)
        info = describe_series(s)
        self.assertEqual(info["name"], "forcing")
        self.assertEqual(info["size"], 3)
        self.assertEqual(info["first"], 1990.0)
        self.assertEqual(info["last"], 2010.0)
        self.assertEqual(info["cutoff"], "inf")
        self.assertEqual(info["method"], "spline")
        self.assertEqual(info["rebuilds"], 1)
        self.assertFalse(info["dirty"])


class TestCli(_TableCase):
    def _run(self, *args: str) -> tuple[int, dict]:
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            rc = main([str(self.path), *args])
        return rc, json.loads(buf.getvalue())

    def test_exact_and_interpolated_queries(self) -> None:
        rc, out = self._run("--at", "2000", "--at", "1995", "--interp", "partial", "--name", "forcing")
        self.assertEqual(rc, 0)
        self.assertEqual(out["series"]["name"], "forcing")
        q_exact, q_interp = out["queries"]
        self.assertTrue(q_exact["exact"])
        self.assertEqual(q_exact["value"], 20.0)
        self.assertFalse(q_interp["exact"])
        self.assertAlmostEqual(q_interp["value"], 16.40625, places=10)

    def test_refused_query_reported(self) -> None:
        with self.assertLogs("tseries.series", level="WARNING"):
            rc, out = self._run("--at", "1995")
        self.assertEqual(rc, 1)
        self.assertEqual(out["queries"][0]["error"]["kind"], "InterpolationNotPermittedError")

    def test_units_in_output(self) -> None:
        rc, out = self._run("--at", "2010", "--units", "W/m2")
        self.assertEqual(rc, 0)
        self.assertEqual(out["queries"][0]["value"], {"value": 15.0, "units": "W/m2"})

    def test_missing_table_exits_with_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([str(Path(self._tmp.name) / "missing.txt"), "--at", "2000"])
        self.assertEqual(ctx.exception.code, 2)

    def test_extrapolate_requires_interpolation(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main([str(self.path), "--extrapolate"])


if __name__ == "__main__":
    unittest.main()
