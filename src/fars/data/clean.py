"""Cleaning steps for raw accident archives."""
from __future__ import annotations

import numpy as np
import pandas as pd

from fars.data.records import (
    STATE,
    LONGITUD,
    LATITUDE,
    LONGITUDE_SENTINEL,
    LATITUDE_SENTINEL,
    require_columns,
)


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Replace sentinel longitudes (> 900) and latitudes (> 90) with NaN."""
    df = df.copy()
    df[LONGITUD] = pd.to_numeric(df[LONGITUD], errors="coerce")
    df[LATITUDE] = pd.to_numeric(df[LATITUDE], errors="coerce")
    df.loc[df[LONGITUD] > LONGITUDE_SENTINEL, LONGITUD] = np.nan
    df.loc[df[LATITUDE] > LATITUDE_SENTINEL, LATITUDE] = np.nan
    return df


def select_state(df: pd.DataFrame, state: int) -> pd.DataFrame:
    """Rows for one state code.

    Raises ``ValueError`` if ``state`` does not occur in the ``STATE`` column.
    """
    require_columns(df, [STATE])
    known = set(pd.to_numeric(df[STATE], errors="coerce").dropna().astype(int))
    if state not in known:
        raise ValueError(f"invalid STATE number: {state}")
    return df.loc[pd.to_numeric(df[STATE], errors="coerce") == state]

__all__ = [
    "clean_coordinates",
    "select_state",
]
