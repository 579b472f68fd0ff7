# surveyplanner/flight_path/constants.py
import math


class PlannerConstants:
    # Reference systems. NZTM is conformal and meter-accurate over the
    # operating region.
    GEOGRAPHIC_CRS: str = "EPSG:4326"
    PROJECTED_CRS: str = "EPSG:2193"

    # Sweep layout
    LINE_LENGTH_FACTOR: float = 2.0      # swath line length = factor * diagonal width
    FINE_RESOLUTION_DIVISOR: float = 4.0  # fixed stride and outside-polygon increment = spacing / divisor
    MAX_STEPS_PER_LINE: int = 10000
    MIN_SLOPE_FACTOR: float = 0.1        # floor on cos(slope)
    PERPENDICULAR_OFFSET_RAD: float = math.pi / 2

    # Unit conversions
    SQ_METERS_PER_SQ_KM: float = 1_000_000.0
    SECONDS_PER_MINUTE: float = 60.0

    MIN_POLYGON_VERTICES: int = 3
    MAX_OVERLAP_PERCENT: float = 100.0
