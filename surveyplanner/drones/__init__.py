"""
drones - Drone profile catalog
"""

from .catalog import DroneCatalog
from .constants import DroneCatalogConstants

__all__ = [
    'DroneCatalog',
    'DroneCatalogConstants'
]
