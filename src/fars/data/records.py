"""Column names and a typed row view of FARS accident archives."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import pandas as pd

STATE = "STATE"
MONTH = "MONTH"
LONGITUD = "LONGITUD"
LATITUDE = "LATITUDE"

# Values above these thresholds mean "coordinate not recorded"
LONGITUDE_SENTINEL = 900
LATITUDE_SENTINEL = 90


@dataclass(frozen=True)
class AccidentRecord:
    state: int
    month: int
    longitude: Optional[float]
    latitude: Optional[float]

    @property
    def has_location(self) -> bool:
        return self.longitude is not None and self.latitude is not None


def require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    """Raise ``KeyError`` listing any of ``columns`` missing from ``df``."""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"accident data is missing column(s): {', '.join(missing)}")


def _coordinate(value, sentinel: float) -> Optional[float]:
    if pd.isna(value):
        return None
    value = float(value)
    return None if value > sentinel else value


def iter_records(df: pd.DataFrame) -> Iterator[AccidentRecord]:
    """Yield one ``AccidentRecord`` per row; sentinel coordinates become ``None``."""
    require_columns(df, [STATE, MONTH, LONGITUD, LATITUDE])
    for state, month, lon, lat in df[[STATE, MONTH, LONGITUD, LATITUDE]].itertuples(index=False, name=None):
        yield AccidentRecord(
            state=int(state),
            month=int(month),
            longitude=_coordinate(lon, LONGITUDE_SENTINEL),
            latitude=_coordinate(lat, LATITUDE_SENTINEL),
        )

__all__ = [
    "STATE",
    "MONTH",
    "LONGITUD",
    "LATITUDE",
    "LONGITUDE_SENTINEL",
    "LATITUDE_SENTINEL",
    "AccidentRecord",
    "require_columns",
    "iter_records",
]
