# surveyplanner/terrain/elevation.py
"""
Samples elevation and terrain slope from a single raster band.

The sampler works purely in the raster's projected coordinates: a point is
mapped to a pixel through the affine geotransform, and anything that falls
off the grid, fails to read, or matches the no-data sentinel comes back as
ElevationSample.unavailable().
"""
import math
from typing import Optional, Tuple

import numpy as np
import shapely
from rasterio.errors import RasterioError

from .constants import TerrainConstants
from .data_models import ElevationSample, GeoTransform, RasterSize, SlopeEstimate


class ElevationSampler:
    """
    Maps projected coordinates onto a raster band and reads pixels from it.
    The band needs read_pixel(col, row) and read_window(col, row, width,
    height) methods; it is never written to.
    """
    def __init__(
        self,
        band,
        geotransform: GeoTransform,
        raster_size: RasterSize,
        nodata_value: float = TerrainConstants.NODATA_SENTINEL,
        nodata_tolerance: float = TerrainConstants.NODATA_TOLERANCE,
        slope_sample_pixels: float = TerrainConstants.SLOPE_SAMPLE_PIXELS,
    ):
        if len(geotransform) != 6:
            raise ValueError(f"Geotransform must have 6 coefficients, got {len(geotransform)}")
        self.band = band
        self.geotransform = tuple(float(v) for v in geotransform)
        self.raster_size = (int(raster_size[0]), int(raster_size[1]))
        self.nodata_value = nodata_value
        self.nodata_tolerance = nodata_tolerance
        # Square pixels are assumed; the offset follows the pixel width.
        self.sample_distance = abs(self.geotransform[1]) * slope_sample_pixels

    def pixel_for(self, x: float, y: float) -> Tuple[int, int]:
        """Returns the (column, row) of the pixel containing a projected point."""
        origin_x, pixel_width, _, origin_y, _, pixel_height = self.geotransform
        pixel_x = math.floor((x - origin_x) / pixel_width)
        pixel_y = math.floor((y - origin_y) / pixel_height)
        return pixel_x, pixel_y

    def in_bounds(self, pixel_x: int, pixel_y: int) -> bool:
        width, height = self.raster_size
        return 0 <= pixel_x < width and 0 <= pixel_y < height

    def sample(self, x: float, y: float) -> ElevationSample:
        """Elevation at a projected point, or unavailable."""
        pixel_x, pixel_y = self.pixel_for(x, y)
        if not self.in_bounds(pixel_x, pixel_y):
            return ElevationSample.unavailable()

        try:
            raw = float(self.band.read_pixel(pixel_x, pixel_y))
        except (RasterioError, OSError, ValueError):
            return ElevationSample.unavailable()

        if not np.isfinite(raw) or abs(raw - self.nodata_value) < self.nodata_tolerance:
            return ElevationSample.unavailable()
        return ElevationSample.measured(raw)

    def slope_at(self, x: float, y: float) -> SlopeEstimate:
        """
        Central finite differences over +/- sample_distance along each
        projected axis. Any missing neighbour makes the point flat.
        """
        d = self.sample_distance
        east = self.sample(x + d, y)
        west = self.sample(x - d, y)
        north = self.sample(x, y + d)
        south = self.sample(x, y - d)

        if not (east.available and west.available and north.available and south.available):
            return SlopeEstimate.flat()

        dx = (east.value - west.value) / (2.0 * d)
        dy = (north.value - south.value) / (2.0 * d)
        return SlopeEstimate(magnitude_rad=math.atan(math.hypot(dx, dy)), gradient=(dx, dy))

    def window_for(self, bounds: Tuple[float, float, float, float]) -> Optional[Tuple[int, int, int, int]]:
        """(col, row, width, height) of the pixels under projected bounds, clipped to the raster."""
        min_x, min_y, max_x, max_y = bounds
        cols, rows = zip(self.pixel_for(min_x, min_y), self.pixel_for(max_x, max_y))
        width, height = self.raster_size
        col0, col1 = max(min(cols), 0), min(max(cols), width - 1)
        row0, row1 = max(min(rows), 0), min(max(rows), height - 1)
        if col0 > col1 or row0 > row1:
            return None
        return col0, row0, col1 - col0 + 1, row1 - row0 + 1

    def has_coverage(self, area) -> bool:
        """
        True if the raster holds a real elevation anywhere over a projected
        shapely geometry: at one of its vertices, or at any pixel whose center
        lies inside it. The pixels are read as one window.
        """
        if any(self.sample(x, y).available for x, y in shapely.get_coordinates(area)):
            return True

        window = self.window_for(area.bounds)
        if window is None:
            return False
        col, row, width, height = window
        try:
            values = np.asarray(self.band.read_window(col, row, width, height), dtype=float)
        except (RasterioError, OSError, ValueError):
            return False

        with np.errstate(invalid='ignore'):
            valid = np.isfinite(values) & (np.abs(values - self.nodata_value) >= self.nodata_tolerance)
        if not valid.any():
            return False

        rows, cols = np.nonzero(valid)
        origin_x, pixel_width, _, origin_y, _, pixel_height = self.geotransform
        xs = origin_x + (col + cols + 0.5) * pixel_width
        ys = origin_y + (row + rows + 0.5) * pixel_height
        return bool(shapely.intersects_xy(area, xs, ys).any())
