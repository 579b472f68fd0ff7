# surveyplanner/terrain/data_models.py
"""
Data structures returned by the elevation sampler. Missing elevation is an
explicit variant, never a sentinel float, so that "no data" cannot be mistaken
for sea level.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

# GDAL ordering: (origin_x, pixel_width, row_rotation, origin_y, column_rotation, pixel_height)
GeoTransform = Tuple[float, float, float, float, float, float]
RasterSize = Tuple[int, int]


@dataclass(frozen=True)
class ElevationSample:
    """Either a measured elevation in meters or an 'unavailable' marker."""
    available: bool
    value: float = 0.0

    @classmethod
    def measured(cls, value: float) -> "ElevationSample":
        return cls(available=True, value=float(value))

    @classmethod
    def unavailable(cls) -> "ElevationSample":
        return cls(available=False)


@dataclass(frozen=True)
class SlopeEstimate:
    """Local terrain slope from central finite differences."""
    magnitude_rad: float
    gradient: Optional[Tuple[float, float]] = None  # (dz/dx, dz/dy); None when any sample was missing

    @classmethod
    def flat(cls) -> "SlopeEstimate":
        return cls(magnitude_rad=0.0, gradient=None)

    @property
    def has_gradient(self) -> bool:
        return self.gradient is not None

    @property
    def direction_rad(self) -> Optional[float]:
        if self.gradient is None:
            return None
        return math.atan2(self.gradient[1], self.gradient[0])
