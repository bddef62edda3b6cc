"""Tests for fars.features.summarize."""
import pandas as pd
import pytest

from fars.data.ingest import InvalidYearWarning, load_years
from fars.features.summarize import main, summarize_years


def test_summarize_years_pivots_month_by_year(archive_dir):
    summary = summarize_years([2013, 2014], data_dir=archive_dir)

    assert list(summary.columns) == ["2013", "2014"]
    assert summary.index.name == "MONTH"
    assert summary.index.tolist() == [1, 2, 3, 4, 12]
    assert summary.loc[1, "2013"] == 3
    assert summary.loc[2, "2013"] == 2
    assert summary.loc[12, "2014"] == 2
    assert pd.isna(summary.loc[12, "2013"])
    assert pd.isna(summary.loc[2, "2014"])


def test_summarize_years_preserves_row_count(archive_dir):
    frames = [f for f in load_years([2013, 2014], data_dir=archive_dir) if f is not None]
    summary = summarize_years([2013, 2014], data_dir=archive_dir)
    assert int(summary.sum().sum()) == sum(len(f) for f in frames) == 10


def test_summarize_years_in_working_directory(in_archive_dir):
    summary = summarize_years(["2014"])
    assert list(summary.columns) == ["2014"]
    assert summary["2014"].tolist() == [1, 2]


def test_summarize_years_skips_bad_year(archive_dir):
    with pytest.warns(InvalidYearWarning, match="9999"):
        summary = summarize_years([2013, 9999], data_dir=archive_dir)
    assert list(summary.columns) == ["2013"]


def test_summarize_years_no_data(archive_dir):
    with pytest.warns(InvalidYearWarning):
        with pytest.raises(ValueError, match="no accident data"):
            summarize_years([1998, 1999], data_dir=archive_dir)


def test_main_writes_csv(archive_dir, tmp_path, capsys):
    out = tmp_path / "reports" / "summary.csv"
    main(["2013", "2014", "--data-dir", str(archive_dir), "--out", str(out)])

    printed = capsys.readouterr().out
    assert "2013" in printed and "2014" in printed
    written = pd.read_csv(out, index_col="MONTH")
    assert written.loc[1, "2013"] == 3


def test_main_writes_parquet(archive_dir, tmp_path):
    out = tmp_path / "summary.parquet"
    main(["2013", "2014", "--data-dir", str(archive_dir), "--out", str(out)])

    written = pd.read_parquet(out)
    assert list(written.columns) == ["2013", "2014"]
    assert written.loc[1, "2013"] == 3
