# surveyplanner/flight_path/utils/footprint.py
import math

from ..constants import PlannerConstants
from ..data_models import DroneProfile
from ..exceptions import InputError


def ground_footprint(drone: DroneProfile) -> float:
    """Ground width in meters covered by one photo: 2 * altitude * tan(fov / 2)."""
    if not (0.0 < drone.fov_deg < 180.0):
        raise InputError("fov_deg", drone.fov_deg, "Field of view must be between 0 and 180 degrees")
    if drone.altitude_m <= 0.0:
        raise InputError("altitude_m", drone.altitude_m, "Altitude must be positive")
    footprint = 2.0 * drone.altitude_m * math.tan(math.radians(drone.fov_deg) / 2.0)
    if not footprint > 0.0:
        raise InputError("footprint", footprint, "Ground footprint must be positive")
    return footprint


def swath_spacing(footprint_m: float, overlap_pct: float) -> float:
    """Distance between adjacent swath lines for the requested photo overlap."""
    if not (0.0 <= overlap_pct < PlannerConstants.MAX_OVERLAP_PERCENT):
        raise InputError("overlap_pct", overlap_pct, "Overlap must be in [0, 100)")
    spacing = footprint_m * (1.0 - overlap_pct / 100.0)
    if not spacing > 0.0:
        raise InputError("spacing", spacing, "Swath spacing must be positive")
    return spacing
