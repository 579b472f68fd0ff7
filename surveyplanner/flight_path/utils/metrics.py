# surveyplanner/flight_path/utils/metrics.py
"""
Search area and flight time, both measured in the projected plane.
"""
import math
from typing import Sequence, Tuple

from shapely.geometry import Polygon

from ..constants import PlannerConstants
from ..exceptions import InputError
from .projection import ProjectionAdapter


def search_area_km2(coords: Sequence[Tuple[float, float]], projection: ProjectionAdapter) -> float:
    """Unsigned planar area of the search ring in square kilometers."""
    polygon_m = Polygon(projection.project_ring(coords))
    return polygon_m.area / PlannerConstants.SQ_METERS_PER_SQ_KM


def path_length_m(positions: Sequence[Tuple[float, float]], projection: ProjectionAdapter) -> float:
    """Sum of straight segments between consecutive (lon, lat) positions."""
    if len(positions) < 2:
        return 0.0
    projected = projection.project_ring(positions)
    return sum(math.hypot(x2 - x1, y2 - y1)
               for (x1, y1), (x2, y2) in zip(projected[:-1], projected[1:]))


def flight_time_min(positions: Sequence[Tuple[float, float]], speed_ms: float,
                    projection: ProjectionAdapter) -> float:
    """Estimated flight time in minutes at a constant cruise speed."""
    if len(positions) < 2:
        return 0.0
    if speed_ms <= 0.0:
        raise InputError("speed_ms", speed_ms, "Cruise speed must be positive")
    return (path_length_m(positions, projection) / speed_ms) / PlannerConstants.SECONDS_PER_MINUTE
