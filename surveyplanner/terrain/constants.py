# surveyplanner/terrain/constants.py

class TerrainConstants:
    """Shared constants for elevation raster access."""

    NODATA_SENTINEL = -32767.0
    NODATA_TOLERANCE = 0.1
    BAND_INDEX = 1               # rasterio bands are 1-based
    SLOPE_SAMPLE_PIXELS = 2.0    # finite-difference offset, in pixel widths
