# run_planner.py
import os
import sys
import json
import logging

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from surveyplanner.drones.catalog import DroneCatalog
from surveyplanner.flight_path.core import FlightPathPlanner
from surveyplanner.flight_path.data_models import DroneProfile, PlannerConfig
from surveyplanner.flight_path.exceptions import FlightPlanError
from surveyplanner.visualization.map_view import PlanMapVisualizer

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def main():
    """
    Plans a survey over a sample search area near Wellington and writes the
    result as JSON plus an interactive map.
    """
    # --- Configuration ---
    SEARCH_AREA = [
        (174.7600, -41.2800),
        (174.7720, -41.2790),
        (174.7745, -41.2870),
        (174.7610, -41.2885),
    ]
    DRONE_MODEL = "DJI Mavic 3 Enterprise"
    elevation_path = os.path.join(project_root, "data", "elevation.vrt")
    output_dir = os.path.join(project_root, "output")
    os.makedirs(output_dir, exist_ok=True)

    drone = DroneCatalog().get(DRONE_MODEL)
    if drone is None:
        logging.warning(f"'{DRONE_MODEL}' not in the drone catalog, using a generic profile.")
        drone = DroneProfile(model="generic", fov_deg=60.0, altitude_m=100.0, overlap_pct=70.0, speed_ms=10.0)

    print("--- Starting Survey Planning ---")
    print(f"Drone: {drone.model} (FOV {drone.fov_deg}°, {drone.altitude_m} m, {drone.overlap_pct}% overlap)")
    print("-" * 40)

    planner = FlightPathPlanner(PlannerConfig(elevation_path=elevation_path))
    try:
        result = planner.plan(SEARCH_AREA, drone)
    except FlightPlanError as e:
        print(f"\n[!] Planning failed: {e}")
        return

    print(f"Waypoints:        {len(result.waypoints)}")
    print(f"Search area:      {result.search_area_km2:.3f} km²")
    print(f"Est. flight time: {result.est_flight_time_min:.1f} min")
    print(f"Slope adjusted:   {result.slope_adjusted} (truncated lines: {result.truncated_lines})")

    json_path = os.path.join(output_dir, f"flightpath_{drone.model.replace(' ', '_')}.json")
    with open(json_path, 'w') as f:
        json.dump(result.to_dict(), f, indent=2)

    map_path = os.path.join(output_dir, "flightpath_map.html")
    PlanMapVisualizer().create_plan_map(SEARCH_AREA, result).save(map_path)
    print(f"\nSaved plan to {json_path} and map to {map_path}")
    print("\n--- Planning Complete ---")


if __name__ == "__main__":
    main()
