# surveyplanner/flight_path/tests/test_planner_core.py
import os
import sys
import shutil
import tempfile
import threading
import unittest
import warnings
from pathlib import Path

import numpy as np
import rasterio
from rasterio.transform import from_origin
from shapely.geometry import Point, Polygon

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from surveyplanner.flight_path.core import FlightPathPlanner, generate_flightpath
from surveyplanner.flight_path.data_models import DroneProfile, PlannerConfig
from surveyplanner.flight_path.exceptions import InputError, ProjectionError
from surveyplanner.flight_path.utils.projection import get_projection

X0, Y0 = 1749000.0, 5427000.0
SIDE = 1000.0
MARGIN = 300.0
PIXEL = 10.0


def write_dem(path, grid):
    """North-up NZTM GeoTIFF whose top-left corner sits MARGIN outside the square."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        with rasterio.open(path, 'w', driver='GTiff', height=grid.shape[0], width=grid.shape[1],
                           count=1, dtype='float32', crs="EPSG:2193",
                           transform=from_origin(X0 - MARGIN, Y0 + SIDE + MARGIN, PIXEL, PIXEL)) as dst:
            dst.write(grid.astype('float32'), 1)


class TestFlightPathPlanner(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.projection = get_projection()
        cls.square_m = [(X0, Y0), (X0 + SIDE, Y0), (X0 + SIDE, Y0 + SIDE), (X0, Y0 + SIDE)]
        cls.square = cls.projection.unproject_ring(cls.square_m)
        cls.drone = DroneProfile(model="test", fov_deg=60.0, altitude_m=100.0, overlap_pct=70.0, speed_ms=10.0)
        cls.baseline = FlightPathPlanner().plan(cls.square, cls.drone)

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.pixels = int((SIDE + 2 * MARGIN) / PIXEL)

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_flat_square_without_elevation(self):
        """1 km square, no raster: fixed-resolution sweep over the whole area"""
        result = self.baseline
        self.assertGreater(len(result.waypoints), 0)
        self.assertFalse(result.slope_adjusted)
        self.assertEqual(result.truncated_lines, 0)
        self.assertAlmostEqual(result.search_area_km2, 1.0, places=3)
        self.assertGreater(result.est_flight_time_min, 0.0)

        polygon_m = Polygon(self.square_m).buffer(1e-6)
        for wp in result.waypoints:
            self.assertTrue(polygon_m.covers(Point(self.projection.to_projected(*wp.position))))
            self.assertEqual(wp.altitude_m, 100.0)
            self.assertEqual(wp.bearing_deg, result.heading_deg)

    def test_result_dict_shape(self):
        data = self.baseline.to_dict()
        self.assertEqual(set(data), {'waypoints', 'search_area', 'est_flight_time'})
        self.assertEqual(set(data['waypoints'][0]), {'position', 'bearing', 'altitude', 'coverage_rect'})

    def test_full_overlap_is_rejected(self):
        drone = DroneProfile(model="test", fov_deg=60.0, altitude_m=100.0, overlap_pct=100.0, speed_ms=10.0)
        with self.assertRaises(InputError):
            FlightPathPlanner().plan(self.square, drone)

    def test_zero_speed_is_rejected(self):
        drone = DroneProfile(model="test", fov_deg=60.0, altitude_m=100.0, overlap_pct=70.0, speed_ms=0.0)
        with self.assertRaises(InputError):
            FlightPathPlanner().plan(self.square, drone)

    def test_polygon_outside_projection(self):
        london = [(-0.13, 51.50), (-0.12, 51.50), (-0.12, 51.51), (-0.13, 51.51)]
        with self.assertRaises(ProjectionError):
            FlightPathPlanner().plan(london, self.drone)

    def test_missing_raster_falls_back(self):
        config = PlannerConfig(elevation_path=os.path.join(self.tmpdir, "missing.tif"))
        result = FlightPathPlanner(config).plan(self.square, self.drone)
        self.assertFalse(result.slope_adjusted)
        self.assertEqual(result.to_dict(), self.baseline.to_dict())

    def test_all_nodata_raster_matches_no_raster(self):
        """A raster with only no-data pixels plans exactly like no raster at all"""
        path = os.path.join(self.tmpdir, "nodata.tif")
        write_dem(path, np.full((self.pixels, self.pixels), -32767.0))
        with self.assertLogs(level='WARNING'):
            result = FlightPathPlanner(PlannerConfig(elevation_path=path)).plan(self.square, self.drone)
        self.assertFalse(result.slope_adjusted)
        self.assertEqual(result.to_dict(), self.baseline.to_dict())

    def test_interior_only_data_keeps_slope_adjustment(self):
        """Terrain known only well inside the area still drives the slope-aware walk"""
        path = os.path.join(self.tmpdir, "patch.tif")
        grid = np.full((self.pixels, self.pixels), -32767.0)
        # Eastward 0.1 m/m ramp over x in [X0+50, X0+350], y in [Y0+50, Y0+950]
        grid[35:126, 35:66] = np.arange(35, 66, dtype=float)
        write_dem(path, grid)
        result = FlightPathPlanner(PlannerConfig(elevation_path=path)).plan(self.square, self.drone)
        self.assertTrue(result.slope_adjusted)

        displaced = 0
        for wp in result.waypoints:
            _, y = self.projection.to_projected(*wp.position)
            _, gy = self.projection.to_projected(*wp.coverage_rect.center)
            if abs(y - gy - 100.0) < 1e-3:
                displaced += 1
        self.assertGreater(displaced, 0)
        self.assertLess(displaced, len(result.waypoints))

    def test_all_nodata_without_probe_stays_flat(self):
        """Slope-aware walk on missing data: no displacement, footprint-sized coverage"""
        path = os.path.join(self.tmpdir, "nodata.tif")
        write_dem(path, np.full((self.pixels, self.pixels), -32767.0))
        config = PlannerConfig(elevation_path=path, probe_elevation_coverage=False)
        result = FlightPathPlanner(config).plan(self.square, self.drone)
        self.assertTrue(result.slope_adjusted)
        self.assertGreater(len(result.waypoints), 0)
        for wp in result.waypoints:
            self.assertEqual(wp.position, wp.coverage_rect.center)

    def test_sloped_raster_displaces_positions(self):
        """An eastward 0.1 m/m ramp shifts every photo position 100 m north of its ground point"""
        path = os.path.join(self.tmpdir, "ramp.tif")
        ramp = np.tile(np.arange(self.pixels, dtype=float), (self.pixels, 1))
        write_dem(path, ramp)
        result = FlightPathPlanner(PlannerConfig(elevation_path=path)).plan(self.square, self.drone)
        self.assertTrue(result.slope_adjusted)
        self.assertGreater(len(result.waypoints), 0)
        for wp in result.waypoints[:20]:
            x, y = self.projection.to_projected(*wp.position)
            gx, gy = self.projection.to_projected(*wp.coverage_rect.center)
            self.assertAlmostEqual(x - gx, 0.0, places=3)
            self.assertAlmostEqual(y - gy, 100.0, places=3)

    def test_mission_writer_receives_plan(self):
        received = []
        done = threading.Event()

        def writer(handoff):
            received.append(handoff)
            done.set()

        result = FlightPathPlanner(mission_writer=writer).plan(self.square, self.drone)
        self.assertTrue(done.wait(timeout=10))
        self.assertEqual(received[0].waypoints, result.waypoints)
        self.assertEqual(received[0].heading_deg, result.heading_deg)
        self.assertIs(received[0].drone, self.drone)

    def test_mission_writer_failure_does_not_affect_result(self):
        done = threading.Event()

        def writer(handoff):
            done.set()
            raise IOError("disk full")

        result = FlightPathPlanner(mission_writer=writer).plan(self.square, self.drone)
        self.assertTrue(done.wait(timeout=10))
        self.assertEqual(result.to_dict(), self.baseline.to_dict())

    def test_generate_flightpath_leaves_config_untouched(self):
        config = PlannerConfig()
        missing = os.path.join(self.tmpdir, "missing.tif")
        result = generate_flightpath(self.square, self.drone, elevation_path=missing, config=config)
        self.assertIsNone(config.elevation_path)
        self.assertEqual(len(result.waypoints), len(self.baseline.waypoints))


if __name__ == '__main__':
    unittest.main()
