# surveyplanner/mission/handoff.py
"""
Hands a finished plan to a mission-file writer without waiting for it.

The writer (e.g. a DJI WPML/KMZ packager) is an external collaborator: it
receives the ordered waypoints, the drone profile and one heading angle for
gimbal orientation. Whatever happens inside the writer, the planning call has
already returned and its result is untouched.
"""
import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

if TYPE_CHECKING:
    from ..flight_path.data_models import DroneProfile, Waypoint


@dataclass(frozen=True)
class MissionHandoff:
    """Everything a mission writer receives."""
    waypoints: Tuple["Waypoint", ...]
    drone: "DroneProfile"
    heading_deg: float


def _run_writer(writer: Callable[[MissionHandoff], Any], handoff: MissionHandoff,
                done: Optional[threading.Event]):
    try:
        writer(handoff)
        logging.info(f"Mission writer finished for {len(handoff.waypoints)} waypoints.")
    except Exception as e:
        logging.error(f"Mission writer failed: {type(e).__name__}: {e}")
    finally:
        if done is not None:
            done.set()


def dispatch_mission_writer(
    writer: Callable[[MissionHandoff], Any],
    handoff: MissionHandoff,
    done: Optional[threading.Event] = None,
) -> threading.Thread:
    """Starts the writer on a daemon thread and returns immediately."""
    thread = threading.Thread(
        target=_run_writer,
        args=(writer, handoff, done),
        name="mission-writer",
        daemon=True,
    )
    thread.start()
    return thread
