"""Shared fixtures: small FARS-style archives written to a temp directory."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

ACCIDENTS_2013 = pd.DataFrame(
    {
        "ST_CASE": [10001, 10002, 10003, 10004, 60001, 60002, 90001],
        "STATE": [1, 1, 1, 1, 6, 6, 9],
        "MONTH": [1, 1, 2, 3, 1, 2, 4],
        "LONGITUD": [-86.5, -87.0, 999.9999, 999.9999, -120.0, -118.0, 999.9999],
        "LATITUDE": [32.5, 33.0, 99.9999, 31.0, 37.0, 34.0, 99.9999],
        "FATALS": [1, 1, 1, 2, 1, 2, 1],
    }
)

ACCIDENTS_2014 = pd.DataFrame(
    {
        "ST_CASE": [10001, 60001, 60002],
        "STATE": [1, 6, 6],
        "MONTH": [1, 12, 12],
        "LONGITUD": [-86.0, -119.0, -119.5],
        "LATITUDE": [32.0, 36.0, 36.5],
        "FATALS": [1, 1, 3],
    }
)


@pytest.fixture
def archive_dir(tmp_path):
    ACCIDENTS_2013.to_csv(tmp_path / "accident_2013.csv.bz2", index=False)
    ACCIDENTS_2014.to_csv(tmp_path / "accident_2014.csv.bz2", index=False)
    return tmp_path


@pytest.fixture
def in_archive_dir(archive_dir, monkeypatch):
    monkeypatch.chdir(archive_dir)
    return archive_dir


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
