"""
mission - Hand-off of finished flight plans to mission-file writers
"""

from .handoff import MissionHandoff, dispatch_mission_writer

__all__ = [
    'MissionHandoff',
    'dispatch_mission_writer'
]
