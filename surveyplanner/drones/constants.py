# surveyplanner/drones/constants.py
from pathlib import Path


class DroneCatalogConstants:
    """Catalog location and the built-in drone list."""

    FILE_NAME = "drone_list.json"
    SUBDIR = "surveyplanner"
    DATA_DIR_ENV = "SURVEYPLANNER_DATA_DIR"

    DEFAULT_DRONES = [
        {"model": "DJI Mavic 3 Enterprise", "fov": 84.0, "altitude": 100.0, "overlap": 70.0, "speed": 10.0},
        {"model": "DJI Matrice 30T", "fov": 84.0, "altitude": 120.0, "overlap": 70.0, "speed": 12.0},
        {"model": "DJI Mini 4 Pro", "fov": 82.1, "altitude": 80.0, "overlap": 65.0, "speed": 8.0},
    ]

    @staticmethod
    def default_data_dir() -> Path:
        return Path.home() / ".local" / "share" / DroneCatalogConstants.SUBDIR
