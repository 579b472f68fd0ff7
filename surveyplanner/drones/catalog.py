# surveyplanner/drones/catalog.py
"""
Persists the list of drone profiles a user can plan with.

The catalog is a JSON array of {model, fov, altitude, overlap, speed} objects
kept in a per-user data directory. The first time it is opened the built-in
default list is written there, so users always start from something usable.
"""
import json
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from .constants import DroneCatalogConstants
from ..flight_path.data_models import DroneProfile


class DroneCatalog:
    """Loads, saves and looks up drone profiles."""
    def __init__(self, data_dir: Optional[Union[str, Path]] = None,
                 filename: str = DroneCatalogConstants.FILE_NAME):
        base = data_dir or os.environ.get(DroneCatalogConstants.DATA_DIR_ENV) or DroneCatalogConstants.default_data_dir()
        self.path = Path(base) / filename

    def _ensure_file(self):
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(DroneCatalogConstants.DEFAULT_DRONES, indent=2))
        logging.info(f"Seeded drone catalog with {len(DroneCatalogConstants.DEFAULT_DRONES)} defaults at {self.path}")

    def load(self) -> List[DroneProfile]:
        """All drones in the catalog. An unreadable file yields an empty list."""
        self._ensure_file()
        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logging.error(f"Drone catalog {self.path} could not be read: {e}")
            return []
        if not isinstance(data, list):
            logging.error(f"Drone catalog {self.path} is not a list; ignoring it.")
            return []

        drones = []
        for entry in data:
            try:
                drones.append(DroneProfile.from_dict(entry))
            except (KeyError, TypeError, ValueError) as e:
                logging.warning(f"Skipping malformed drone entry {entry!r}: {e}")
        return drones

    def save(self, drones: List[DroneProfile]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps([d.to_dict() for d in drones], indent=2))
        logging.info(f"Saved {len(drones)} drones to {self.path}")

    def get(self, model: str) -> Optional[DroneProfile]:
        return next((d for d in self.load() if d.model == model), None)
