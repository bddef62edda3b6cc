"""Monthly summaries and state maps of FARS accident archives."""
from fars.data.ingest import (
    InvalidYearWarning,
    filename_for,
    load_years,
    read_accidents,
)
from fars.features.summarize import summarize_years
from fars.viz.map_state import map_state

read = read_accidents
summarize = summarize_years

__version__ = "0.1.0"

__all__ = [
    "InvalidYearWarning",
    "filename_for",
    "load_years",
    "map_state",
    "read",
    "read_accidents",
    "summarize",
    "summarize_years",
]
