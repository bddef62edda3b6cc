"""Lightweight geospatial helpers for accident coordinates."""
from __future__ import annotations

import geopandas as gpd
import pandas as pd
from shapely.geometry import box

WGS84 = "EPSG:4326"

# Pad applied to a degenerate (single point) axis range, in degrees
MIN_EXTENT_DEG = 0.5


def df_to_points(df, lon_col: str = "LONGITUD", lat_col: str = "LATITUDE", crs: str = WGS84) -> gpd.GeoDataFrame:
    """Convert lon/lat columns to a GeoDataFrame with given CRS, dropping rows missing either."""
    missing = df[lon_col].isna() | df[lat_col].isna()
    gdf = gpd.GeoDataFrame(
        df.loc[~missing].copy(),
        geometry=gpd.points_from_xy(df.loc[~missing, lon_col], df.loc[~missing, lat_col]),
        crs=crs,
    )
    return gdf


def _axis_range(values: pd.Series) -> tuple[float, float]:
    lo, hi = float(values.min()), float(values.max())
    if lo == hi:
        return lo - MIN_EXTENT_DEG, hi + MIN_EXTENT_DEG
    return lo, hi


def coordinate_bounds(points: gpd.GeoDataFrame) -> tuple[float, float, float, float]:
    """Return ``(minx, miny, maxx, maxy)`` of point geometries.

    Raises
    ------
    ValueError
        If ``points`` is empty.
    """
    if points.empty:
        raise ValueError("cannot compute bounds of an empty point set")
    minx, maxx = _axis_range(points.geometry.x)
    miny, maxy = _axis_range(points.geometry.y)
    return minx, miny, maxx, maxy


def bounds_box(bounds: tuple[float, float, float, float]):
    """Shapely rectangle for ``(minx, miny, maxx, maxy)``."""
    return box(*bounds)


def to_wgs84(gdf: gpd.GeoDataFrame) -> gpd.GeoDataFrame:
    """Reproject to WGS84 if needed; a missing CRS is assumed to be WGS84."""
    if gdf.crs is None:
        return gdf.set_crs(WGS84)
    if gdf.crs == WGS84:
        return gdf
    return gdf.to_crs(WGS84)

__all__ = [
    "WGS84",
    "df_to_points",
    "coordinate_bounds",
    "bounds_box",
    "to_wgs84",
]
