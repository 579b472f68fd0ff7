# surveyplanner/terrain/raster.py
"""
Opens elevation rasters (GeoTIFF, VRT, anything GDAL reads) through rasterio
and exposes the three things the planner needs: a readable band, the affine
geotransform and the pixel dimensions. Every failure at open time becomes
ElevationUnavailable so callers can fall back cleanly.
"""
import logging
from typing import Optional

import rasterio
from rasterio.errors import RasterioError
from rasterio.windows import Window

from .constants import TerrainConstants
from .data_models import GeoTransform, RasterSize
from .elevation import ElevationSampler
from .exceptions import ElevationUnavailable


class RasterBand:
    """Single-band read access (one pixel or one window) to an open rasterio dataset."""
    def __init__(self, dataset, index: int = TerrainConstants.BAND_INDEX):
        self._dataset = dataset
        self.index = index

    def read_pixel(self, col: int, row: int) -> float:
        block = self._dataset.read(self.index, window=Window(col, row, 1, 1))
        return float(block[0, 0])

    def read_window(self, col: int, row: int, width: int, height: int):
        """Block of pixels as a (height, width) array."""
        return self._dataset.read(self.index, window=Window(col, row, width, height))


class ElevationDataset:
    """
    Read-only handle on an elevation raster. Each planning request opens its
    own handle; use it as a context manager so the file is always closed.
    """
    def __init__(self, path: str, band_index: int = TerrainConstants.BAND_INDEX):
        self.path = path
        self._dataset = None
        if not path:
            raise ElevationUnavailable(path, "Elevation raster path is empty")

        try:
            self._dataset = rasterio.open(path)
        except (RasterioError, OSError) as e:
            raise ElevationUnavailable(path, f"Cannot open elevation raster ({e})") from e

        try:
            if band_index < 1 or band_index > self._dataset.count:
                raise ElevationUnavailable(path, f"Raster has no band {band_index}")
            self.band = RasterBand(self._dataset, band_index)
            self.geotransform = self._read_geotransform()
            self.raster_size: RasterSize = (self._dataset.width, self._dataset.height)
        except ElevationUnavailable:
            self.close()
            raise

        logging.info(f"Elevation raster opened: {path} ({self.raster_size[0]}x{self.raster_size[1]} px, "
                     f"pixel {self.geotransform[1]:.2f} m)")

    def _read_geotransform(self) -> GeoTransform:
        transform = self._dataset.transform
        # rasterio reports an identity transform for rasters without georeferencing.
        if transform is None or transform.is_identity:
            raise ElevationUnavailable(self.path, "Raster has no geotransform")
        geotransform = tuple(float(v) for v in transform.to_gdal())
        if geotransform[1] == 0 or geotransform[5] == 0:
            raise ElevationUnavailable(self.path, "Raster geotransform has zero pixel size")
        return geotransform

    def sampler(self, **kwargs) -> ElevationSampler:
        return ElevationSampler(self.band, self.geotransform, self.raster_size, **kwargs)

    def close(self):
        if self._dataset is not None:
            self._dataset.close()
            self._dataset = None

    def __enter__(self) -> "ElevationDataset":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def open_elevation_dataset(path: Optional[str]) -> ElevationDataset:
    """Opens a raster by path; raises ElevationUnavailable on any failure."""
    if path is None:
        raise ElevationUnavailable(path, "No elevation raster configured")
    return ElevationDataset(path)
