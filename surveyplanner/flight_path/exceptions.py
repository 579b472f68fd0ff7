# surveyplanner/flight_path/exceptions.py
"""
Flight Path Planner Exceptions
Standardized error types raised while planning a survey.
"""
# Raised by the terrain package when a raster cannot be used; always recovered
# by the planner, never surfaced to callers.
from ..terrain.exceptions import ElevationUnavailable


class FlightPlanError(Exception):
    """Base class for all flight planning errors"""
    pass


class InputError(FlightPlanError):
    """The request cannot produce a meaningful plan (bad polygon or drone profile)"""
    def __init__(self, parameter, value=None, message="Invalid planning input"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{message}: {parameter}={value!r}")


class ProjectionError(FlightPlanError):
    """A coordinate transform could not be built or a coordinate is outside its domain"""
    def __init__(self, source_crs, target_crs, coordinate=None, message="Projection failed"):
        self.source_crs = source_crs
        self.target_crs = target_crs
        self.coordinate = coordinate
        detail = f"{message} ({source_crs} -> {target_crs})"
        if coordinate is not None:
            detail += f" for coordinate {coordinate}"
        super().__init__(detail)


__all__ = ['FlightPlanError', 'InputError', 'ProjectionError', 'ElevationUnavailable']
