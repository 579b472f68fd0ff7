# Geometry, projection and metric helpers used by the sweep generator.

from .coverage import build_coverage_rect, slope_factor
from .footprint import ground_footprint, swath_spacing
from .metrics import flight_time_min, path_length_m, search_area_km2
from .orientation import build_search_polygon, lawnmower_bearing, minimum_rotated_rect
from .projection import ProjectionAdapter, get_projection

__all__ = [
    "build_coverage_rect",
    "slope_factor",
    "ground_footprint",
    "swath_spacing",
    "flight_time_min",
    "path_length_m",
    "search_area_km2",
    "build_search_polygon",
    "lawnmower_bearing",
    "minimum_rotated_rect",
    "ProjectionAdapter",
    "get_projection"
]
