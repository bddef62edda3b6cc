"""Monthly accident counts across years, one column per year."""
from __future__ import annotations

import sys
import pathlib
import argparse
import logging
from typing import Iterable, Optional

import pandas as pd

# Ensure src/ on path for direct execution
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from fars.data.ingest import load_years  # noqa: E402
from fars.data.records import MONTH  # noqa: E402

logger = logging.getLogger(__name__)


def summarize_years(years: Iterable, data_dir: Optional[pathlib.Path] = None) -> pd.DataFrame:
    """Count accidents per month for each year.

    Returns
    -------
    DataFrame indexed by ``MONTH`` with one ``Int64`` column per year, labelled
    by the year as a string. Month/year pairs with no accidents are ``<NA>``.
    """
    frames = [df for df in load_years(years, data_dir=data_dir) if df is not None and not df.empty]
    if not frames:
        raise ValueError("no accident data loaded for the requested years")

    data = pd.concat(frames, ignore_index=True)
    logger.debug("summarizing %d accident rows over %d year(s)", len(data), len(frames))
    counts = data.groupby(["year", MONTH]).size().rename("n").reset_index()
    wide = counts.pivot(index=MONTH, columns="year", values="n").sort_index()
    wide.columns = [str(c) for c in wide.columns]
    return wide.astype("Int64")


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Summarize FARS accidents per month and year")
    parser.add_argument("years", nargs="+", help="Years to summarize, e.g. 2013 2014 2015")
    parser.add_argument("--data-dir", default=pathlib.Path("."), type=pathlib.Path)
    parser.add_argument("--out", default=None, type=pathlib.Path, help="Write the summary to .csv or .parquet")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    summary = summarize_years(args.years, data_dir=args.data_dir)
    print(summary.to_string())

    if args.out:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        if args.out.suffix == ".parquet":
            summary.to_parquet(args.out)
        else:
            summary.to_csv(args.out)
        print(f"Wrote summary to {args.out} (months={len(summary)}, years={summary.shape[1]})")


if __name__ == "__main__":
    main()
