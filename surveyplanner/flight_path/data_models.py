# surveyplanner/flight_path/data_models.py
"""
Defines the core data structures used throughout the flight path planner.
Inputs (DroneProfile, PlannerConfig) are plain dataclasses; everything the
planner hands back to callers is frozen so it cannot be mutated after the
result has been assembled.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import PlannerConstants
from ..terrain.constants import TerrainConstants

LonLat = Tuple[float, float]
XY = Tuple[float, float]


# --- Request Inputs ---

@dataclass(frozen=True)
class DroneProfile:
    """Camera and flight parameters of the surveying drone."""
    model: str
    fov_deg: float
    altitude_m: float
    overlap_pct: float
    speed_ms: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DroneProfile":
        """Builds a profile from the catalog/front-end shape (model, fov, altitude, overlap, speed)."""
        return cls(
            model=str(data['model']),
            fov_deg=float(data['fov']),
            altitude_m=float(data['altitude']),
            overlap_pct=float(data['overlap']),
            speed_ms=float(data['speed']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'model': self.model,
            'fov': self.fov_deg,
            'altitude': self.altitude_m,
            'overlap': self.overlap_pct,
            'speed': self.speed_ms,
        }


@dataclass
class PlannerConfig:
    """Configuration parameters for a planning request."""
    elevation_path: Optional[str] = None
    geographic_crs: str = PlannerConstants.GEOGRAPHIC_CRS
    projected_crs: str = PlannerConstants.PROJECTED_CRS
    max_steps_per_line: int = PlannerConstants.MAX_STEPS_PER_LINE
    min_slope_factor: float = PlannerConstants.MIN_SLOPE_FACTOR
    fine_resolution_divisor: float = PlannerConstants.FINE_RESOLUTION_DIVISOR
    nodata_value: float = TerrainConstants.NODATA_SENTINEL
    nodata_tolerance: float = TerrainConstants.NODATA_TOLERANCE
    slope_sample_pixels: float = TerrainConstants.SLOPE_SAMPLE_PIXELS
    probe_elevation_coverage: bool = True


# --- Derived, per-request geometry ---

@dataclass(frozen=True)
class SweepGeometry:
    """Orientation, spacing and projected extent shared by every swath line of a request."""
    sweep_bearing: float          # radians, math convention (atan2(dy, dx))
    footprint_m: float
    spacing_m: float
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def perpendicular_bearing(self) -> float:
        return self.sweep_bearing + PlannerConstants.PERPENDICULAR_OFFSET_RAD

    @property
    def center(self) -> XY:
        return (self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0

    @property
    def diagonal_width(self) -> float:
        return math.hypot(self.max_x - self.min_x, self.max_y - self.min_y)

    @property
    def line_length(self) -> float:
        return self.diagonal_width * PlannerConstants.LINE_LENGTH_FACTOR

    @property
    def num_lines(self) -> int:
        return int(math.ceil(self.diagonal_width / self.spacing_m))

    @property
    def heading_deg(self) -> float:
        """Compass heading (clockwise from north) of the sweep direction."""
        return (90.0 - math.degrees(self.sweep_bearing)) % 360.0


# --- Planner Outputs ---

@dataclass(frozen=True)
class CoverageRect:
    """Ground area captured by one photo: a closed 4-corner ring plus its center."""
    coords: Tuple[LonLat, ...]
    center: LonLat

    def to_dict(self) -> Dict[str, Any]:
        return {'coords': [list(c) for c in self.coords], 'center': list(self.center)}


@dataclass(frozen=True)
class Waypoint:
    """A single photo position in final traversal order."""
    position: LonLat
    bearing_deg: float
    altitude_m: float
    coverage_rect: CoverageRect

    @property
    def lon(self) -> float:
        return self.position[0]

    @property
    def lat(self) -> float:
        return self.position[1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'position': list(self.position),
            'bearing': self.bearing_deg,
            'altitude': self.altitude_m,
            'coverage_rect': self.coverage_rect.to_dict(),
        }


@dataclass(frozen=True)
class SweepOutcome:
    """What the sweep generator produced before metrics are attached."""
    waypoints: Tuple[Waypoint, ...]
    slope_adjusted: bool
    truncated_lines: int = 0
    line_lengths: Tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FlightPlanResult:
    """The final output object returned to the caller."""
    waypoints: Tuple[Waypoint, ...]
    search_area_km2: float
    est_flight_time_min: float
    heading_deg: float = 0.0
    slope_adjusted: bool = False
    truncated_lines: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'waypoints': [wp.to_dict() for wp in self.waypoints],
            'search_area': self.search_area_km2,
            'est_flight_time': self.est_flight_time_min,
        }

    def positions(self) -> List[LonLat]:
        return [wp.position for wp in self.waypoints]
