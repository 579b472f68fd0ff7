# surveyplanner/flight_path/tests/test_footprint.py
import sys
import math
import unittest
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from surveyplanner.flight_path.data_models import DroneProfile
from surveyplanner.flight_path.exceptions import InputError
from surveyplanner.flight_path.utils.coverage import build_coverage_rect, slope_factor
from surveyplanner.flight_path.utils.footprint import ground_footprint, swath_spacing
from surveyplanner.flight_path.utils.projection import get_projection


def drone(**overrides):
    params = dict(model="test", fov_deg=60.0, altitude_m=100.0, overlap_pct=70.0, speed_ms=10.0)
    params.update(overrides)
    return DroneProfile(**params)


class TestFootprint(unittest.TestCase):
    def test_footprint_and_spacing(self):
        """60 degree FOV at 100 m with 70% overlap gives ~34.64 m between lines"""
        footprint = ground_footprint(drone())
        self.assertAlmostEqual(footprint, 115.470, places=3)
        self.assertAlmostEqual(swath_spacing(footprint, 70.0), 34.641, places=3)

    def test_zero_overlap_spacing_equals_footprint(self):
        self.assertEqual(swath_spacing(50.0, 0.0), 50.0)

    def test_full_overlap_is_rejected(self):
        with self.assertRaises(InputError) as ctx:
            swath_spacing(115.47, 100.0)
        self.assertEqual(ctx.exception.parameter, "overlap_pct")
        with self.assertRaises(InputError):
            swath_spacing(115.47, 120.0)
        with self.assertRaises(InputError):
            swath_spacing(115.47, -5.0)

    def test_invalid_camera(self):
        with self.assertRaises(InputError):
            ground_footprint(drone(fov_deg=0.0))
        with self.assertRaises(InputError):
            ground_footprint(drone(fov_deg=180.0))
        with self.assertRaises(InputError):
            ground_footprint(drone(altitude_m=0.0))


class TestCoverageRect(unittest.TestCase):
    def setUp(self):
        self.projection = get_projection()
        self.center = (1749000.0, 5427000.0)

    def test_slope_factor_floor(self):
        self.assertEqual(slope_factor(0.0), 1.0)
        self.assertEqual(slope_factor(math.radians(89.9)), 0.1)
        self.assertEqual(slope_factor(math.pi / 2), 0.1)

    def test_flat_rect_is_footprint_square(self):
        rect = build_coverage_rect(self.center, 0.0, math.pi / 2, 100.0, self.projection)
        self.assertEqual(len(rect.coords), 5)
        self.assertEqual(rect.coords[0], rect.coords[-1])
        corners = self.projection.project_ring(rect.coords[:-1])
        for x, y in corners:
            self.assertAlmostEqual(math.hypot(x - self.center[0], y - self.center[1]),
                                   50.0 * math.sqrt(2.0), places=4)
        cx, cy = self.projection.to_projected(*rect.center)
        self.assertAlmostEqual(cx, self.center[0], places=4)
        self.assertAlmostEqual(cy, self.center[1], places=4)

    def test_slope_widens_rect(self):
        rect = build_coverage_rect(self.center, math.radians(60.0), 0.0, 100.0, self.projection)
        x, y = self.projection.to_projected(*rect.coords[2])
        # cos(60) = 0.5 doubles the half-width; corner (hw, -hw) unrotated.
        self.assertAlmostEqual(x - self.center[0], 100.0, places=4)
        self.assertAlmostEqual(y - self.center[1], -100.0, places=4)


if __name__ == '__main__':
    unittest.main()
