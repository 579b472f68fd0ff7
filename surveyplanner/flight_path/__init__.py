"""
Initializes the flight_path module, defining its public API.

This file makes the planner, its data models and its error types directly
accessible to client modules, hiding the internal structure.
"""
# Core logic from core.py
from .core import FlightPathPlanner, generate_flightpath

# Public data models from data_models.py
from .data_models import (DroneProfile, PlannerConfig, SweepGeometry, Waypoint, CoverageRect,
                          FlightPlanResult)

# Error taxonomy
from .exceptions import FlightPlanError, InputError, ProjectionError, ElevationUnavailable

# Sweep strategies for clients that drive the generator directly
from .sweep import SweepGenerator, SlopeAwareSweep, FixedResolutionSweep

from .utils.projection import ProjectionAdapter, get_projection
