# surveyplanner/flight_path/utils/projection.py
"""
Converts between geographic (lon, lat degrees) and projected (x, y meters)
coordinates with pyproj. Every planar distance in the planner is measured in
the projected system, so a failed transform is fatal for the request.
"""
import math
from functools import lru_cache
from typing import Iterable, List, Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from ..constants import PlannerConstants
from ..exceptions import ProjectionError

LonLat = Tuple[float, float]
XY = Tuple[float, float]


class ProjectionAdapter:
    """
    Holds the forward and inverse transformers for one fixed pair of reference
    systems. Instances are immutable after construction and shared through
    get_projection(); a bad coordinate raises for that call only.
    """
    def __init__(self, geographic_crs: str = PlannerConstants.GEOGRAPHIC_CRS,
                 projected_crs: str = PlannerConstants.PROJECTED_CRS):
        self.geographic_crs = geographic_crs
        self.projected_crs = projected_crs
        try:
            projected = CRS.from_user_input(projected_crs)
            self._forward = Transformer.from_crs(geographic_crs, projected, always_xy=True)
            self._inverse = Transformer.from_crs(projected, geographic_crs, always_xy=True)
        except CRSError as e:
            raise ProjectionError(geographic_crs, projected_crs, message=f"Cannot build transform ({e})") from e

        # (west, south, east, north) in degrees; None when the CRS does not declare one.
        area = projected.area_of_use
        self.domain = (area.west, area.south, area.east, area.north) if area else None

    def in_domain(self, lon: float, lat: float) -> bool:
        if self.domain is None:
            return True
        west, south, east, north = self.domain
        return west <= lon <= east and south <= lat <= north

    def to_projected(self, lon: float, lat: float) -> XY:
        if not (math.isfinite(lon) and math.isfinite(lat)) or not self.in_domain(lon, lat):
            raise ProjectionError(self.geographic_crs, self.projected_crs, (lon, lat),
                                  message="Coordinate outside projection domain")
        try:
            x, y = self._forward.transform(lon, lat, errcheck=True)
        except ProjError as e:
            raise ProjectionError(self.geographic_crs, self.projected_crs, (lon, lat), message=str(e)) from e
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionError(self.geographic_crs, self.projected_crs, (lon, lat),
                                  message="Transform produced a non-finite result")
        return x, y

    def to_geographic(self, x: float, y: float) -> LonLat:
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionError(self.projected_crs, self.geographic_crs, (x, y),
                                  message="Non-finite projected coordinate")
        try:
            lon, lat = self._inverse.transform(x, y, errcheck=True)
        except ProjError as e:
            raise ProjectionError(self.projected_crs, self.geographic_crs, (x, y), message=str(e)) from e
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise ProjectionError(self.projected_crs, self.geographic_crs, (x, y),
                                  message="Transform produced a non-finite result")
        return lon, lat

    def project_ring(self, coords: Iterable[LonLat]) -> List[XY]:
        return [self.to_projected(lon, lat) for lon, lat in coords]

    def unproject_ring(self, coords: Iterable[XY]) -> List[LonLat]:
        return [self.to_geographic(x, y) for x, y in coords]


@lru_cache(maxsize=8)
def get_projection(geographic_crs: str = PlannerConstants.GEOGRAPHIC_CRS,
                   projected_crs: str = PlannerConstants.PROJECTED_CRS) -> ProjectionAdapter:
    """Process-wide adapter per CRS pair, created on first use."""
    return ProjectionAdapter(geographic_crs, projected_crs)
