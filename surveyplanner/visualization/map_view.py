# surveyplanner/visualization/map_view.py
"""
Interactive Folium map of a survey plan: the search area, the flight line,
each photo position and its coverage rectangle on toggleable layers.
"""
import logging
from typing import List, Sequence, Tuple

import folium

from ..flight_path.data_models import FlightPlanResult, Waypoint


def _latlon(coords: Sequence[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """Folium wants (lat, lon); the planner speaks (lon, lat)."""
    return [(lat, lon) for lon, lat in coords]


class PlanMapVisualizer:
    """Creates Folium maps for flight plans."""

    def create_plan_map(self, search_coords: Sequence[Tuple[float, float]], result: FlightPlanResult,
                        show_coverage: bool = False) -> folium.Map:
        area = _latlon(search_coords)
        center = [sum(p[0] for p in area) / len(area), sum(p[1] for p in area) / len(area)]
        plan_map = folium.Map(location=center, zoom_start=15, tiles="CartoDB positron")

        area_group = folium.FeatureGroup(name="Search Area", show=True).add_to(plan_map)
        folium.Polygon(
            locations=area, color='#377EB8', weight=2, fill=True, fill_opacity=0.1,
            tooltip=f"Search area: {result.search_area_km2:.3f} km²",
        ).add_to(area_group)

        if result.waypoints:
            path_group = folium.FeatureGroup(name="Flight Path", show=True).add_to(plan_map)
            folium.PolyLine(
                locations=_latlon(result.positions()), color='#E41A1C', weight=2, opacity=0.9,
                tooltip=f"{len(result.waypoints)} waypoints, est. {result.est_flight_time_min:.1f} min",
            ).add_to(path_group)
            self._add_endpoints(result.waypoints, path_group)

            coverage_group = folium.FeatureGroup(name="Photo Coverage", show=show_coverage).add_to(plan_map)
            for i, wp in enumerate(result.waypoints):
                self._create_coverage_visual(wp, i + 1).add_to(coverage_group)

        folium.LayerControl(collapsed=False).add_to(plan_map)
        logging.info(f"Plan map created with {len(result.waypoints)} waypoints.")
        return plan_map

    def _add_endpoints(self, waypoints: Sequence[Waypoint], group: folium.FeatureGroup):
        start, end = waypoints[0], waypoints[-1]
        folium.Marker(location=[start.lat, start.lon], tooltip="Start",
                      icon=folium.Icon(color='green', icon='play', prefix='fa')).add_to(group)
        folium.Marker(location=[end.lat, end.lon], tooltip="End",
                      icon=folium.Icon(color='red', icon='stop', prefix='fa')).add_to(group)

    def _create_coverage_visual(self, waypoint: Waypoint, index: int) -> folium.Polygon:
        return folium.Polygon(
            locations=_latlon(waypoint.coverage_rect.coords), color='#4DAF4A', weight=1,
            fill=True, fill_opacity=0.15,
            tooltip=f"Photo #{index} @ {waypoint.altitude_m:.0f} m",
        )
