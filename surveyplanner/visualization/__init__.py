"""
visualization - Interactive maps of survey flight plans
"""

from .map_view import PlanMapVisualizer

__all__ = [
    'PlanMapVisualizer'
]
