from __future__ import annotations

import unittest

import numpy as np

from tseries import InsufficientSamplesError, InterpolationMethod, Interpolator
from tseries.backends import LinearBackend, SplineBackend, build_backend


class TestInterpolator(unittest.TestCase):
    def setUp(self) -> None:
        self.samples = [(1990.0, 10.0), (2000.0, 20.0), (2010.0, 15.0)]

    def test_default_method_is_spline(self) -> None:
        interp = Interpolator()
        self.assertIs(interp.method, InterpolationMethod.SPLINE)
        self.assertIs(InterpolationMethod.DEFAULT, InterpolationMethod.SPLINE)
        self.assertFalse(interp.is_fitted)

    def test_spline_passes_through_samples(self) -> None:
        interp = Interpolator()
        interp.rebuild(self.samples)
        for x, y in self.samples:
            self.assertAlmostEqual(interp.evaluate(x), y, places=12)
        self.assertAlmostEqual(interp.evaluate(2005.0), 18.90625, places=10)

    def test_linear_strategy(self) -> None:
        interp = Interpolator("linear")
        interp.rebuild(self.samples)
        self.assertAlmostEqual(interp.evaluate(1995.0), 15.0)
        self.assertAlmostEqual(interp.evaluate(2020.0), 10.0)
        self.assertAlmostEqual(interp.evaluate(1980.0), 0.0)

    def test_rebuild_copies_samples(self) -> None:
        buf = np.array(self.samples)
        interp = Interpolator()
        interp.rebuild(buf)
        expected = interp.evaluate(1995.0)
        buf[:, 1] = 0.0
        self.assertEqual(interp.evaluate(1995.0), expected)

    def test_rebuild_requires_two_samples(self) -> None:
        interp = Interpolator()
        with self.assertRaises(InsufficientSamplesError):
            interp.rebuild([(1.0, 2.0)])
        with self.assertRaises(InsufficientSamplesError):
            interp.rebuild([])
        self.assertEqual(interp.rebuilds, 0)

    def test_evaluate_before_rebuild_raises(self) -> None:
        with self.assertRaises(RuntimeError):
            Interpolator().evaluate(1.0)

    def test_set_method_discards_fit(self) -> None:
        interp = Interpolator()
        interp.rebuild(self.samples)
        interp.set_method(InterpolationMethod.LINEAR)
        self.assertFalse(interp.is_fitted)
        interp.rebuild(self.samples)
        self.assertAlmostEqual(interp.evaluate(1995.0), 15.0)
        self.assertEqual(interp.rebuilds, 2)

    def test_unknown_method_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Interpolator("akima")


class TestBackendFactory(unittest.TestCase):
    def test_build_known_backends(self) -> None:
        self.assertIsInstance(build_backend("spline"), SplineBackend)
        self.assertIsInstance(build_backend("linear"), LinearBackend)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            build_backend("cubic-hermite")

    def test_spline_is_natural(self) -> None:
        x = np.array([0.0, 1.0, 3.0, 4.0])
        y = np.array([1.0, 3.0, 2.0, 5.0])
        model = SplineBackend().fit(x, y)
        np.testing.assert_allclose(model(np.array([0.0, 4.0]), 2), [0.0, 0.0], atol=1.0e-12)


if __name__ == "__main__":
    unittest.main()
