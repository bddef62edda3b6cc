from .geo import (
    WGS84,
    df_to_points,
    coordinate_bounds,
    bounds_box,
    to_wgs84,
)
from .parse import as_int

__all__ = [
    "WGS84",
    "df_to_points",
    "coordinate_bounds",
    "bounds_box",
    "to_wgs84",
    "as_int",
]
