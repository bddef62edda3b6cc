"""Raw data ingestion helpers for annual FARS accident archives."""
from __future__ import annotations

import numbers
import os
import pathlib
import warnings
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

import pandas as pd
import geopandas as gpd

from fars.data.records import MONTH, require_columns
from fars.utils.parse import as_int

FILENAME_TEMPLATE = "accident_{year:d}.csv.bz2"

# Summary columns are labelled by four-digit year
MIN_YEAR = 1000
MAX_YEAR = 9999

PathLike = Union[str, os.PathLike]


class InvalidYearWarning(UserWarning):
    """A requested year could not be loaded and was skipped."""


@dataclass(frozen=True)
class YearOutcome:
    year: object
    frame: Optional[pd.DataFrame] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def filename_for(year) -> str:
    """Archive filename for a year, e.g. ``accident_2013.csv.bz2``."""
    return FILENAME_TEMPLATE.format(year=as_int(year, "year"))


def read_accidents(filename: PathLike) -> pd.DataFrame:
    """Read one accident archive (CSV, compression inferred from the suffix)."""
    if not os.path.exists(filename):
        raise FileNotFoundError(f"file '{filename}' does not exist")
    return pd.read_csv(filename, low_memory=False)


def read_state_boundaries(path: PathLike) -> gpd.GeoDataFrame:
    """Read state boundary polygons (shapefile/geojson/zip)."""
    return gpd.read_file(path)


def archive_path(year, data_dir: Optional[PathLike] = None) -> PathLike:
    """Location of a year's archive, relative to the working directory unless ``data_dir`` is given."""
    name = filename_for(year)
    if data_dir is None:
        return name
    return pathlib.Path(data_dir) / name


def _load_year(year, data_dir: Optional[PathLike]) -> YearOutcome:
    try:
        value = as_int(year, "year")
        if not MIN_YEAR <= value <= MAX_YEAR:
            raise ValueError(f"year {value} is not a four-digit year")
        df = read_accidents(archive_path(value, data_dir))
        require_columns(df, [MONTH])
        out = df[[MONTH]].copy()
        out["year"] = value
    except Exception as exc:  # any failure skips just this year
        return YearOutcome(year=year, error=exc)
    return YearOutcome(year=year, frame=out)


def _as_year_list(years) -> list:
    if isinstance(years, (str, bytes, numbers.Number)):
        return [years]
    return list(years)


def load_year_outcomes(years: Iterable, data_dir: Optional[PathLike] = None) -> List[YearOutcome]:
    """Load every requested year, keeping failures as ``YearOutcome.error``."""
    return [_load_year(year, data_dir) for year in _as_year_list(years)]


def load_years(years: Iterable, data_dir: Optional[PathLike] = None) -> List[Optional[pd.DataFrame]]:
    """Read ``MONTH`` and ``year`` for each requested year.

    Returns one entry per input year, in order. A year whose archive cannot be
    read gives ``None`` and an ``InvalidYearWarning``.
    """
    frames = []
    for outcome in load_year_outcomes(years, data_dir):
        if not outcome.ok:
            warnings.warn(f"invalid year: {outcome.year} ({outcome.error})", InvalidYearWarning, stacklevel=2)
        frames.append(outcome.frame)
    return frames

__all__ = [
    "FILENAME_TEMPLATE",
    "InvalidYearWarning",
    "YearOutcome",
    "filename_for",
    "read_accidents",
    "read_state_boundaries",
    "archive_path",
    "load_year_outcomes",
    "load_years",
]
