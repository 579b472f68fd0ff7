# surveyplanner/flight_path/tests/test_metrics.py
import sys
import unittest
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from surveyplanner.flight_path.exceptions import InputError
from surveyplanner.flight_path.utils.metrics import flight_time_min, path_length_m, search_area_km2
from surveyplanner.flight_path.utils.projection import get_projection

X0, Y0 = 1749000.0, 5427000.0


class TestMetrics(unittest.TestCase):
    def setUp(self):
        self.projection = get_projection()

    def test_two_points_500m_apart(self):
        """500 m at 5 m/s is 100 s, about 1.667 minutes"""
        positions = self.projection.unproject_ring([(X0, Y0), (X0 + 300.0, Y0 + 400.0)])
        self.assertAlmostEqual(path_length_m(positions, self.projection), 500.0, places=4)
        self.assertAlmostEqual(flight_time_min(positions, 5.0, self.projection), 100.0 / 60.0, places=4)

    def test_fewer_than_two_points(self):
        self.assertEqual(flight_time_min([], 5.0, self.projection), 0.0)
        single = [self.projection.to_geographic(X0, Y0)]
        self.assertEqual(flight_time_min(single, 5.0, self.projection), 0.0)

    def test_non_positive_speed(self):
        positions = self.projection.unproject_ring([(X0, Y0), (X0 + 100.0, Y0)])
        with self.assertRaises(InputError):
            flight_time_min(positions, 0.0, self.projection)

    def test_square_kilometre(self):
        ring = self.projection.unproject_ring(
            [(X0, Y0), (X0 + 1000.0, Y0), (X0 + 1000.0, Y0 + 1000.0), (X0, Y0 + 1000.0)])
        self.assertAlmostEqual(search_area_km2(ring, self.projection), 1.0, places=6)
        # Winding order does not matter.
        self.assertAlmostEqual(search_area_km2(list(reversed(ring)), self.projection), 1.0, places=6)


if __name__ == '__main__':
    unittest.main()
