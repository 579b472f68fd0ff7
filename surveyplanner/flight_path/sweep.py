# surveyplanner/flight_path/sweep.py
"""
Boustrophedon sweep generation.

Parallel swath lines are laid across the projected bounding rectangle of the
search area, one every `spacing` meters along the perpendicular bearing and
centered on the rectangle's midpoint. Each line is walked by a strategy that
is chosen once per request:

  * SlopeAwareSweep - adaptive stride shortened by cos(slope), positions
    displaced according to the local gradient. Needs an ElevationSampler.
  * FixedResolutionSweep - samples every spacing / 4 and emits every point
    inside the polygon. Used whenever elevation data is not usable.

Lines that produce waypoints alternate direction; empty lines do not count.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import List, Tuple

from shapely.geometry import Point, Polygon
from shapely.prepared import prep

from .data_models import DroneProfile, PlannerConfig, SweepGeometry, SweepOutcome, Waypoint
from .utils.coverage import build_coverage_rect, slope_factor
from .utils.projection import ProjectionAdapter
from ..terrain.data_models import SlopeEstimate
from ..terrain.elevation import ElevationSampler

XY = Tuple[float, float]


@dataclass
class LineWalk:
    """Waypoints collected on one swath line, in walking order."""
    waypoints: List[Waypoint] = field(default_factory=list)
    truncated: bool = False


class SweepStrategy:
    """Walks a single swath line. Subclasses decide stride and per-point adjustment."""
    slope_adjusted = False

    def __init__(self, geometry: SweepGeometry, drone: DroneProfile, projection: ProjectionAdapter,
                 config: PlannerConfig):
        self.geometry = geometry
        self.drone = drone
        self.projection = projection
        self.config = config
        self.flight_dir = (math.cos(geometry.sweep_bearing), math.sin(geometry.sweep_bearing))
        self.fine_step = geometry.spacing_m / config.fine_resolution_divisor

    def walk_line(self, line_center: XY, contains) -> LineWalk:
        raise NotImplementedError

    def _point_at(self, origin: XY, distance: float) -> XY:
        return origin[0] + distance * self.flight_dir[0], origin[1] + distance * self.flight_dir[1]

    def _make_waypoint(self, ground: XY, position: XY, slope_rad: float) -> Waypoint:
        """The coverage rectangle sits on the sampled ground point; the position may be displaced."""
        coverage = build_coverage_rect(ground, slope_rad, self.geometry.perpendicular_bearing,
                                       self.geometry.footprint_m, self.projection,
                                       self.config.min_slope_factor)
        return Waypoint(
            position=self.projection.to_geographic(*position),
            bearing_deg=self.geometry.heading_deg,
            altitude_m=self.drone.altitude_m,
            coverage_rect=coverage,
        )


class FixedResolutionSweep(SweepStrategy):
    """Flat-terrain walk at a fixed fine resolution. Always terminates."""

    def walk_line(self, line_center: XY, contains) -> LineWalk:
        walk = LineWalk()
        num_points = int(self.geometry.line_length / self.fine_step)
        half = num_points // 2
        for j in range(-half, half + 1):
            point = self._point_at(line_center, j * self.fine_step)
            if contains(point):
                walk.waypoints.append(self._make_waypoint(point, point, 0.0))
        return walk


class SlopeAwareSweep(SweepStrategy):
    """Adaptive walk: stride and footprint follow the local terrain slope."""
    slope_adjusted = True

    def __init__(self, geometry: SweepGeometry, drone: DroneProfile, projection: ProjectionAdapter,
                 config: PlannerConfig, sampler: ElevationSampler):
        super().__init__(geometry, drone, projection, config)
        self.sampler = sampler

    def displaced_position(self, point: XY, slope: SlopeEstimate) -> XY:
        """
        Shifts the point by the drone altitude at 90 degrees to the gradient
        direction. Points without a gradient stay where they are.
        """
        if not slope.has_gradient:
            return point
        displace_bearing = slope.direction_rad + math.pi / 2.0
        return (point[0] + self.drone.altitude_m * math.cos(displace_bearing),
                point[1] + self.drone.altitude_m * math.sin(displace_bearing))

    def walk_line(self, line_center: XY, contains) -> LineWalk:
        walk = LineWalk()
        line_length = self.geometry.line_length
        start = self._point_at(line_center, -line_length / 2.0)
        distance = 0.0

        for _ in range(self.config.max_steps_per_line):
            if distance >= line_length:
                break
            point = self._point_at(start, distance)
            if contains(point):
                slope = self.sampler.slope_at(*point)
                position = self.displaced_position(point, slope)
                walk.waypoints.append(self._make_waypoint(point, position, slope.magnitude_rad))
                distance += self.geometry.spacing_m * slope_factor(slope.magnitude_rad,
                                                                   self.config.min_slope_factor)
            else:
                distance += self.fine_step
        else:
            walk.truncated = distance < line_length
        return walk


class SweepGenerator:
    """Lays out swath lines and stitches their waypoints into one boustrophedon path."""

    def __init__(self, search_polygon_m: Polygon, geometry: SweepGeometry, strategy: SweepStrategy):
        self._prepared = prep(search_polygon_m)
        self.geometry = geometry
        self.strategy = strategy

    def contains(self, point: XY) -> bool:
        """Inside or exactly on the boundary."""
        return self._prepared.covers(Point(point))

    def line_centers(self) -> List[XY]:
        """Midpoints of every swath line, in index order from -n/2 to +n/2."""
        center_x, center_y = self.geometry.center
        perp = self.geometry.perpendicular_bearing
        line_dx, line_dy = math.cos(perp), math.sin(perp)
        half = self.geometry.num_lines // 2
        centers = []
        for i in range(-half, half + 1):
            offset = i * self.geometry.spacing_m
            centers.append((center_x + offset * line_dx, center_y + offset * line_dy))
        return centers

    def generate(self) -> SweepOutcome:
        waypoints: List[Waypoint] = []
        line_lengths: List[int] = []
        truncated_lines = 0
        sequence = 0

        for index, center in enumerate(self.line_centers()):
            walk = self.strategy.walk_line(center, self.contains)
            if walk.truncated:
                truncated_lines += 1
                logging.warning(f"Swath line {index} hit the {self.strategy.config.max_steps_per_line}-step cap "
                                f"and was truncated after {len(walk.waypoints)} waypoints")
            if not walk.waypoints:
                continue
            line = walk.waypoints if sequence % 2 == 0 else list(reversed(walk.waypoints))
            waypoints.extend(line)
            line_lengths.append(len(line))
            sequence += 1

        return SweepOutcome(
            waypoints=tuple(waypoints),
            slope_adjusted=self.strategy.slope_adjusted,
            truncated_lines=truncated_lines,
            line_lengths=tuple(line_lengths),
        )
