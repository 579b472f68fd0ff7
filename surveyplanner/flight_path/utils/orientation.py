# surveyplanner/flight_path/utils/orientation.py
"""
Search polygon validation and sweep orientation.

The sweep runs parallel to the longest edge of the polygon's minimum rotated
rectangle. The rectangle is found in geographic space (only the direction of
its edges matters), and edge lengths are compared in projected meters.
"""
import logging
import math
from typing import List, Sequence, Tuple

from shapely.geometry import Polygon
from shapely.geometry.polygon import orient
from shapely.validation import explain_validity

from ..constants import PlannerConstants
from ..exceptions import InputError
from .projection import ProjectionAdapter

LonLat = Tuple[float, float]


def build_search_polygon(coords: Sequence[Sequence[float]]) -> Polygon:
    """
    Builds the search polygon from an open or closed ring of (lon, lat) pairs.
    Raises InputError for fewer than 3 distinct vertices or zero area.
    """
    if coords is None or len(coords) < PlannerConstants.MIN_POLYGON_VERTICES:
        raise InputError("coords", None if coords is None else len(coords),
                         "Search area needs at least 3 coordinates")

    ring: List[LonLat] = []
    for i, c in enumerate(coords):
        if len(c) < 2:
            raise InputError(f"coords[{i}]", c, "Coordinate must be a (lon, lat) pair")
        lon, lat = float(c[0]), float(c[1])
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise InputError(f"coords[{i}]", c, "Coordinate is not finite")
        ring.append((lon, lat))

    if ring[0] == ring[-1]:
        ring = ring[:-1]
    distinct = set(ring)
    if len(distinct) < PlannerConstants.MIN_POLYGON_VERTICES:
        raise InputError("coords", len(distinct), "Search area needs at least 3 distinct vertices")

    polygon = Polygon(ring)
    if polygon.area <= 0.0:
        raise InputError("coords", ring, "Search area has zero area")
    if not polygon.is_valid:
        logging.warning(f"Search polygon is not simple: {explain_validity(polygon)}")
    return polygon


def _canonical_ring(rect: Polygon) -> List[LonLat]:
    """Counter-clockwise ring starting at its lowest-left corner, closed."""
    ring = list(orient(rect, sign=1.0).exterior.coords)[:-1]
    start = min(range(len(ring)), key=lambda i: (round(ring[i][0], 9), round(ring[i][1], 9)))
    ring = ring[start:] + ring[:start]
    return ring + [ring[0]]


def minimum_rotated_rect(polygon: Polygon) -> List[LonLat]:
    """The closed 5-coordinate ring of the polygon's minimum rotated rectangle."""
    rect = polygon.minimum_rotated_rectangle
    if not isinstance(rect, Polygon) or rect.is_empty or rect.area <= 0.0:
        raise InputError("coords", polygon.wkt, "Cannot compute a bounding rectangle for the search area")
    return _canonical_ring(rect)


def lawnmower_bearing(mbr_coords: Sequence[LonLat], projection: ProjectionAdapter) -> float:
    """
    Bearing (radians, atan2(dy, dx) in projected space) of the longest
    rectangle edge. The first edge wins an exact tie.
    """
    max_dist = 0.0
    longest_dx, longest_dy = 0.0, 0.0
    for (lon1, lat1), (lon2, lat2) in zip(mbr_coords[:-1], mbr_coords[1:]):
        x1, y1 = projection.to_projected(lon1, lat1)
        x2, y2 = projection.to_projected(lon2, lat2)
        dx, dy = x2 - x1, y2 - y1
        dist = math.hypot(dx, dy)
        if dist > max_dist:
            max_dist = dist
            longest_dx, longest_dy = dx, dy

    if max_dist == 0.0:
        raise InputError("coords", list(mbr_coords), "Bounding rectangle has no extent")
    return math.atan2(longest_dy, longest_dx)
