"""
terrain - Elevation raster access and slope estimation for survey planning
"""

from .constants import TerrainConstants
from .data_models import ElevationSample, SlopeEstimate, GeoTransform, RasterSize
from .elevation import ElevationSampler
from .exceptions import TerrainError, ElevationUnavailable
from .raster import ElevationDataset, RasterBand, open_elevation_dataset

__all__ = [
    'TerrainConstants',
    'ElevationSample',
    'SlopeEstimate',
    'GeoTransform',
    'RasterSize',
    'ElevationSampler',
    'TerrainError',
    'ElevationUnavailable',
    'ElevationDataset',
    'RasterBand',
    'open_elevation_dataset'
]
