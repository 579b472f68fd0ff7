# surveyplanner/flight_path/utils/coverage.py
"""
Builds the photo coverage rectangle drawn for each waypoint.
"""
import math
from typing import Tuple

from ..constants import PlannerConstants
from ..data_models import CoverageRect
from .projection import ProjectionAdapter


def slope_factor(slope_rad: float, floor: float = PlannerConstants.MIN_SLOPE_FACTOR) -> float:
    """cos(slope) clamped from below so near-vertical ground stays finite."""
    return max(math.cos(slope_rad), floor)


def build_coverage_rect(
    point: Tuple[float, float],
    slope_rad: float,
    rotation_rad: float,
    footprint_m: float,
    projection: ProjectionAdapter,
    min_slope_factor: float = PlannerConstants.MIN_SLOPE_FACTOR,
) -> CoverageRect:
    """
    Square of half-width footprint / (2 * cos(slope)) around a projected point,
    rotated by rotation_rad, returned as a closed geographic ring plus center.
    """
    hw = footprint_m / (2.0 * slope_factor(slope_rad, min_slope_factor))
    local_corners = [(-hw, hw), (-hw, -hw), (hw, -hw), (hw, hw)]

    cos_r, sin_r = math.cos(rotation_rad), math.sin(rotation_rad)
    px, py = point
    corners = []
    for x, y in local_corners:
        xr = x * cos_r - y * sin_r
        yr = x * sin_r + y * cos_r
        corners.append(projection.to_geographic(px + xr, py + yr))

    return CoverageRect(
        coords=tuple(corners + [corners[0]]),
        center=projection.to_geographic(px, py),
    )
