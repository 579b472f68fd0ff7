# surveyplanner/flight_path/core.py
"""
The core orchestrator for survey flight planning. It validates the request,
solves the sweep orientation and spacing, picks the sweep strategy once for
the whole request, and assembles the caller-visible FlightPlanResult.
"""
import logging
from dataclasses import replace
from typing import Any, Callable, Optional, Sequence

from shapely.geometry import Polygon

from .data_models import DroneProfile, FlightPlanResult, PlannerConfig, SweepGeometry, SweepOutcome
from .exceptions import ElevationUnavailable, InputError
from .sweep import FixedResolutionSweep, SlopeAwareSweep, SweepGenerator
from .utils.footprint import ground_footprint, swath_spacing
from .utils.metrics import flight_time_min, search_area_km2
from .utils.orientation import build_search_polygon, lawnmower_bearing, minimum_rotated_rect
from .utils.projection import ProjectionAdapter, get_projection
from ..mission.handoff import MissionHandoff, dispatch_mission_writer
from ..terrain.raster import open_elevation_dataset


class FlightPathPlanner:
    """Plans boustrophedon survey paths over a search polygon."""
    def __init__(self, config: Optional[PlannerConfig] = None,
                 mission_writer: Optional[Callable[[MissionHandoff], Any]] = None):
        self.config = config or PlannerConfig()
        self.mission_writer = mission_writer
        logging.info(f"FlightPathPlanner initialized. CRS: {self.config.geographic_crs} -> "
                     f"{self.config.projected_crs}, elevation: {self.config.elevation_path or 'none'}")

    def plan(self, coords: Sequence[Sequence[float]], drone: DroneProfile) -> FlightPlanResult:
        """
        Runs a complete planning request.

        Args:
            coords: Ring of (lon, lat) pairs; closing the ring is optional.
            drone: Camera and flight parameters.

        Returns:
            FlightPlanResult with waypoints in traversal order.

        Raises:
            InputError: degenerate polygon or invalid drone parameters.
            ProjectionError: a coordinate cannot be reprojected.
        """
        polygon = build_search_polygon(coords)
        if drone.speed_ms <= 0.0:
            raise InputError("speed_ms", drone.speed_ms, "Cruise speed must be positive")
        footprint = ground_footprint(drone)
        spacing = swath_spacing(footprint, drone.overlap_pct)

        projection = get_projection(self.config.geographic_crs, self.config.projected_crs)
        mbr_coords = minimum_rotated_rect(polygon)
        bearing = lawnmower_bearing(mbr_coords, projection)

        ring = list(polygon.exterior.coords)
        polygon_m = Polygon(projection.project_ring(ring))
        mbr_m = projection.project_ring(mbr_coords)
        xs = [x for x, _ in mbr_m]
        ys = [y for _, y in mbr_m]
        geometry = SweepGeometry(
            sweep_bearing=bearing,
            footprint_m=footprint,
            spacing_m=spacing,
            min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys),
        )
        logging.info(f"Sweep heading {geometry.heading_deg:.1f}°, footprint {footprint:.1f} m, "
                     f"spacing {spacing:.1f} m, {geometry.num_lines} candidate lines")

        outcome = self._run_sweep(polygon_m, geometry, drone, projection)

        result = FlightPlanResult(
            waypoints=outcome.waypoints,
            search_area_km2=search_area_km2(ring, projection),
            est_flight_time_min=flight_time_min([wp.position for wp in outcome.waypoints],
                                                drone.speed_ms, projection),
            heading_deg=geometry.heading_deg,
            slope_adjusted=outcome.slope_adjusted,
            truncated_lines=outcome.truncated_lines,
        )
        logging.info(f"Plan complete: {len(result.waypoints)} waypoints on {len(outcome.line_lengths)} lines, "
                     f"area {result.search_area_km2:.3f} km², est. {result.est_flight_time_min:.1f} min")

        if self.mission_writer is not None:
            dispatch_mission_writer(self.mission_writer,
                                    MissionHandoff(result.waypoints, drone, result.heading_deg))
        return result

    def _run_sweep(self, polygon_m: Polygon, geometry: SweepGeometry, drone: DroneProfile,
                   projection: ProjectionAdapter) -> SweepOutcome:
        """Selects the strategy once: slope-aware if the raster is usable, else fixed-resolution."""
        try:
            dataset = open_elevation_dataset(self.config.elevation_path)
        except ElevationUnavailable as e:
            logging.info(f"Planning without slope adjustment: {e}")
            strategy = FixedResolutionSweep(geometry, drone, projection, self.config)
            return SweepGenerator(polygon_m, geometry, strategy).generate()

        with dataset:
            sampler = dataset.sampler(
                nodata_value=self.config.nodata_value,
                nodata_tolerance=self.config.nodata_tolerance,
                slope_sample_pixels=self.config.slope_sample_pixels,
            )
            if self.config.probe_elevation_coverage and not sampler.has_coverage(polygon_m):
                logging.warning(f"Elevation raster {dataset.path} has no data over the search area; "
                                f"planning without slope adjustment.")
                strategy = FixedResolutionSweep(geometry, drone, projection, self.config)
            else:
                strategy = SlopeAwareSweep(geometry, drone, projection, self.config, sampler)
            return SweepGenerator(polygon_m, geometry, strategy).generate()


def generate_flightpath(coords: Sequence[Sequence[float]], drone: DroneProfile,
                        elevation_path: Optional[str] = None,
                        config: Optional[PlannerConfig] = None) -> FlightPlanResult:
    """Convenience entry point for a single request."""
    config = config or PlannerConfig()
    if elevation_path is not None:
        config = replace(config, elevation_path=elevation_path)
    return FlightPathPlanner(config).plan(coords, drone)
