"""surveyplanner/terrain/exceptions.py"""

class TerrainError(Exception):
    """Base exception for all elevation access errors."""
    pass

class ElevationUnavailable(TerrainError):
    """Raised when an elevation dataset cannot be opened or read."""
    def __init__(self, source, message="Elevation data unavailable"):
        self.source = source
        super().__init__(f"{message}: {source}")
