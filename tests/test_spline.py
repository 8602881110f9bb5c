from __future__ import annotations

from pathlib import Path
import unittest
import sys

import numpy as np


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from curve_resampling.config import CurveConfig
from curve_resampling.errors import InsufficientPointsError, InvalidParameterError
from curve_resampling.spline import CatmullRomSpline, catmull_rom_point


ZIGZAG = np.array(
    [
        [0.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [2.0, 0.0, 0.0],
        [3.0, 1.0, 0.0],
    ]
)

UNEVEN = np.array(
    [
        [0.0, 0.0, 0.0],
        [0.1, 0.0, 0.0],
        [4.0, 0.5, 0.0],
        [4.2, 3.0, 1.0],
        [4.3, 3.1, 1.0],
    ]
)

CURVE_TYPES = ("uniform", "centripetal", "chordal")


class CatmullRomSplineTest(unittest.TestCase):
    def test_open_curve_starts_and_ends_at_control_points(self) -> None:
        for curve_type in CURVE_TYPES:
            with self.subTest(curve_type=curve_type):
                spline = CatmullRomSpline(UNEVEN, CurveConfig(curve_type=curve_type))
                self.assertTrue(np.allclose(spline.get_point(0.0), UNEVEN[0], atol=1e-9))
                self.assertTrue(np.allclose(spline.get_point(1.0), UNEVEN[-1], atol=1e-9))

    def test_open_curve_passes_through_inner_control_points(self) -> None:
        for curve_type in CURVE_TYPES:
            with self.subTest(curve_type=curve_type):
                spline = CatmullRomSpline(ZIGZAG, CurveConfig(curve_type=curve_type))
                self.assertTrue(np.allclose(spline.get_point(1.0 / 3.0), ZIGZAG[1], atol=1e-9))
                self.assertTrue(np.allclose(spline.get_point(2.0 / 3.0), ZIGZAG[2], atol=1e-9))

    def test_zigzag_scenario(self) -> None:
        spline = CatmullRomSpline(ZIGZAG)
        self.assertTrue(np.allclose(spline.get_point(0.0), [0.0, 0.0, 0.0]))
        self.assertTrue(np.allclose(spline.get_point(1.0), [3.0, 1.0, 0.0]))
        sampled = spline.get_points(5)
        self.assertEqual(sampled.shape, (5, 3))
        self.assertTrue(np.all(np.diff(sampled[:, 0]) > 0))

    def test_closed_zigzag_seam_is_continuous(self) -> None:
        spline = CatmullRomSpline(ZIGZAG, CurveConfig(closed=True))
        self.assertTrue(np.allclose(spline.get_point(0.0), spline.get_point(1.0)))
        sampled = spline.get_points(4)
        self.assertEqual(sampled.shape, (4, 3))
        self.assertTrue(np.allclose(sampled, ZIGZAG))
        for i in range(4):
            for j in range(i + 1, 4):
                self.assertFalse(np.array_equal(sampled[i], sampled[j]))

    def test_closed_seam_is_continuous_for_nonuniform_types(self) -> None:
        for curve_type in ("centripetal", "chordal"):
            with self.subTest(curve_type=curve_type):
                spline = CatmullRomSpline(UNEVEN, CurveConfig(closed=True, curve_type=curve_type))
                self.assertTrue(np.allclose(spline.get_point(0.0), spline.get_point(1.0)))
                self.assertTrue(np.allclose(spline.get_point(1e-9), spline.get_point(1.0 - 1e-9), atol=1e-6))

    def test_closed_curve_is_periodic(self) -> None:
        spline = CatmullRomSpline(ZIGZAG, CurveConfig(closed=True))
        self.assertTrue(np.allclose(spline.get_point(-0.25), spline.get_point(0.75)))
        self.assertTrue(np.allclose(spline.get_point(1.3), spline.get_point(0.3)))

    def test_open_first_span_reflects_start_point(self) -> None:
        points = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
        spline = CatmullRomSpline(points)
        self.assertTrue(np.allclose(spline.get_point(0.5), [0.5, 0.0, 0.0]))

    def test_tension_only_affects_uniform_curves(self) -> None:
        loose = CatmullRomSpline(UNEVEN, CurveConfig(tension=0.5))
        tight = CatmullRomSpline(UNEVEN, CurveConfig(tension=0.1))
        self.assertFalse(np.allclose(loose.get_point(0.4), tight.get_point(0.4)))
        for curve_type in ("centripetal", "chordal"):
            a = CatmullRomSpline(UNEVEN, CurveConfig(curve_type=curve_type, tension=0.5))
            b = CatmullRomSpline(UNEVEN, CurveConfig(curve_type=curve_type, tension=0.1))
            self.assertTrue(np.allclose(a.get_point(0.4), b.get_point(0.4)))

    def test_coincident_control_points_stay_finite(self) -> None:
        points = np.array(
            [
                [0.0, 0.0, 0.0],
                [1.0, 1.0, 1.0],
                [1.0, 1.0, 1.0],
                [1.0, 1.0, 1.0],
                [2.0, 0.0, 0.0],
            ]
        )
        for curve_type in CURVE_TYPES:
            for closed in (False, True):
                with self.subTest(curve_type=curve_type, closed=closed):
                    spline = CatmullRomSpline(points, CurveConfig(closed=closed, curve_type=curve_type))
                    self.assertTrue(np.all(np.isfinite(spline.get_points(64))))
                    self.assertTrue(np.all(np.isfinite(spline.get_points(64, spaced=True))))

    def test_returned_points_do_not_alias_control_points(self) -> None:
        spline = CatmullRomSpline(ZIGZAG)
        first = spline.get_point(0.0)
        first[0] = -100.0
        self.assertEqual(float(spline.points[0, 0]), 0.0)
        again = spline.get_point(0.0)
        self.assertEqual(float(again[0]), 0.0)

    def test_points_can_be_replaced_between_calls(self) -> None:
        spline = CatmullRomSpline(ZIGZAG)
        spline.points = [[0.0, 0.0], [2.0, 0.0]]
        self.assertEqual(spline.points.shape, (2, 3))
        self.assertTrue(np.allclose(spline.get_point(1.0), [2.0, 0.0, 0.0]))

    def test_insufficient_points(self) -> None:
        with self.assertRaises(InsufficientPointsError):
            CatmullRomSpline([[0.0, 0.0, 0.0]]).get_point(0.5)
        with self.assertRaises(InsufficientPointsError):
            CatmullRomSpline([[0.0, 0.0, 0.0]]).get_points(4)
        closed_pair = CatmullRomSpline([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]], CurveConfig(closed=True))
        with self.assertRaises(InsufficientPointsError):
            closed_pair.get_point(0.5)

    def test_open_curve_rejects_parameter_outside_unit_interval(self) -> None:
        spline = CatmullRomSpline(ZIGZAG)
        for t in (-0.01, 1.01, float("nan"), float("inf")):
            with self.subTest(t=t):
                with self.assertRaises(InvalidParameterError):
                    spline.get_point(t)

    def test_closed_curve_rejects_non_finite_parameter(self) -> None:
        spline = CatmullRomSpline(ZIGZAG, CurveConfig(closed=True))
        with self.assertRaises(InvalidParameterError):
            spline.get_point(float("nan"))

    def test_get_points_sample_count_edge_cases(self) -> None:
        spline = CatmullRomSpline(ZIGZAG)
        self.assertEqual(spline.get_points(0).shape, (0, 3))
        single = spline.get_points(1)
        self.assertEqual(single.shape, (1, 3))
        self.assertTrue(np.allclose(single[0], ZIGZAG[0]))

    def test_open_get_points_includes_both_end_points(self) -> None:
        spline = CatmullRomSpline(UNEVEN, CurveConfig(curve_type="centripetal"))
        for spaced in (False, True):
            with self.subTest(spaced=spaced):
                sampled = spline.get_points(17, spaced=spaced)
                self.assertTrue(np.allclose(sampled[0], UNEVEN[0], atol=1e-9))
                self.assertTrue(np.allclose(sampled[-1], UNEVEN[-1], atol=1e-9))

    def test_spaced_points_are_evenly_spaced(self) -> None:
        spline = CatmullRomSpline(UNEVEN, CurveConfig(curve_type="centripetal", arc_length_divisions=2000))
        spaced = spline.get_points(40, spaced=True)
        raw = spline.get_points(40, spaced=False)
        spaced_steps = np.linalg.norm(np.diff(spaced, axis=0), axis=1)
        raw_steps = np.linalg.norm(np.diff(raw, axis=0), axis=1)
        spaced_cv = np.std(spaced_steps) / np.mean(spaced_steps)
        raw_cv = np.std(raw_steps) / np.mean(raw_steps)
        self.assertLess(spaced_cv, 0.05)
        self.assertLess(spaced_cv, raw_cv)

    def test_spaced_point_at_half_length(self) -> None:
        points = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [4.0, 0.0, 0.0]])
        spline = CatmullRomSpline(points, CurveConfig(arc_length_divisions=1000))
        length = spline.get_length()
        midpoint = spline.get_spaced_point(0.5)
        self.assertAlmostEqual(float(midpoint[0]), length / 2.0, delta=1e-2)

    def test_planar_points_are_lifted_to_z_zero(self) -> None:
        spline = CatmullRomSpline([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
        self.assertTrue(np.allclose(spline.get_points(9)[:, 2], 0.0))

    def test_catmull_rom_point_matches_spline(self) -> None:
        cfg = CurveConfig(closed=True, curve_type="chordal")
        spline = CatmullRomSpline(UNEVEN, cfg)
        for t in (0.0, 0.13, 0.5, 0.99):
            self.assertTrue(np.allclose(catmull_rom_point(UNEVEN.tolist(), t, cfg), spline.get_point(t)))
        self.assertTrue(np.allclose(catmull_rom_point(ZIGZAG, 1.0), ZIGZAG[-1]))


if __name__ == "__main__":
    unittest.main()
