"""Plot accident locations for one state and year on a state-boundary map."""
from __future__ import annotations

import sys
import pathlib
import argparse
import logging
from typing import Optional, Union

import geopandas as gpd
import matplotlib.pyplot as plt

# Ensure src/ on path for direct execution
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from fars.data.clean import clean_coordinates, select_state  # noqa: E402
from fars.data.ingest import archive_path, read_accidents, read_state_boundaries  # noqa: E402
from fars.data.records import STATE, LONGITUD, LATITUDE, require_columns  # noqa: E402
from fars.utils.geo import bounds_box, coordinate_bounds, df_to_points, to_wgs84  # noqa: E402
from fars.utils.parse import as_int  # noqa: E402

logger = logging.getLogger(__name__)

# US Census cartographic boundary file, looked up in the data directory
DEFAULT_BOUNDARIES = "cb_2018_us_state_20m.zip"

Boundaries = Union[str, pathlib.Path, gpd.GeoDataFrame, gpd.GeoSeries, None]


def state_points(state, year, data_dir: Optional[pathlib.Path] = None) -> Optional[gpd.GeoDataFrame]:
    """Valid accident locations for one state and year, or ``None`` if there are none.

    A missing archive, an unparsable state/year or a state code absent from the
    archive raise; an empty selection only logs.
    """
    data = read_accidents(archive_path(year, data_dir))
    state = as_int(state, "state")
    require_columns(data, [STATE, LONGITUD, LATITUDE])

    subset = select_state(data, state)
    if subset.empty:
        logger.info("no accidents to plot")
        return None

    points = df_to_points(clean_coordinates(subset), lon_col=LONGITUD, lat_col=LATITUDE)
    if points.empty:
        logger.info("no valid coordinates to plot")
        return None
    return points


def _resolve_boundaries(boundaries: Boundaries, data_dir: Optional[pathlib.Path]):
    if isinstance(boundaries, (gpd.GeoDataFrame, gpd.GeoSeries)):
        return boundaries
    if boundaries is None:
        path = pathlib.Path(data_dir or ".") / DEFAULT_BOUNDARIES
        if not path.exists():
            logger.warning("state boundaries %s not found; plotting points only", path)
            return None
    else:
        path = pathlib.Path(boundaries)
        if not path.exists():
            raise FileNotFoundError(f"file '{path}' does not exist")
    return read_state_boundaries(path)


def map_state(
    state,
    year,
    *,
    data_dir: Optional[pathlib.Path] = None,
    boundaries: Boundaries = None,
    ax: Optional[plt.Axes] = None,
):
    """Draw state outlines and one dot per accident with a valid location.

    Axis limits come from the valid coordinates only; sentinel longitudes
    (> 900) and latitudes (> 90) are neither plotted nor used for the extent.

    Returns
    -------
    The matplotlib Axes drawn on, or ``None`` when there was nothing to plot.
    """
    points = state_points(state, year, data_dir=data_dir)
    if points is None:
        return None

    minx, miny, maxx, maxy = coordinate_bounds(points)
    base = _resolve_boundaries(boundaries, data_dir)
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    if base is not None:
        outlines = to_wgs84(base).boundary.clip(bounds_box((minx, miny, maxx, maxy)))
        if not outlines.empty:
            outlines.plot(ax=ax, color="black", linewidth=0.6)

    points.plot(ax=ax, marker=".", markersize=4, color="black")
    ax.set_xlim(minx, maxx)
    ax.set_ylim(miny, maxy)
    ax.set_title(f"Accidents in state {as_int(state, 'state')}, {as_int(year, 'year')} (n={len(points):,})")
    ax.set_axis_off()
    return ax


def build_state_map_html(
    state,
    year,
    output_html: pathlib.Path,
    *,
    data_dir: Optional[pathlib.Path] = None,
    title: str | None = None,
) -> int:
    """Create a Folium map with one circle marker per accident location.

    Returns the number of markers drawn; nothing is written when it is zero.
    """
    import folium

    points = state_points(state, year, data_dir=data_dir)
    if points is None:
        return 0

    minx, miny, maxx, maxy = coordinate_bounds(points)
    m = folium.Map(
        location=[(miny + maxy) / 2, (minx + maxx) / 2],
        tiles="CartoDB positron",
        control_scale=True,
    )
    for geom in points.geometry:
        folium.CircleMarker(
            location=[geom.y, geom.x],
            radius=2,
            color="#d73027",
            weight=0,
            fill=True,
            fill_opacity=0.8,
        ).add_to(m)
    m.fit_bounds([[miny, minx], [maxy, maxx]])

    title = title or f"Accidents in state {as_int(state, 'state')}, {as_int(year, 'year')}"
    title_html = f"""
    <div style="
      position: fixed; top: 10px; left: 50%; transform: translateX(-50%);
      z-index: 9999; padding: 10px 24px; background: rgba(255,255,255,0.96);
      border-radius: 8px; box-shadow: 0 2px 12px rgba(0,0,0,0.15);
      font-family: 'Segoe UI', system-ui, sans-serif; text-align: center;
    ">
      <div style="font-size: 18px; font-weight: 600; color: #1a1a2e;">{title}</div>
      <div style="font-size: 12px; color: #6b7280; margin-top: 4px;">{len(points):,} accidents with a recorded location</div>
    </div>
    """
    m.get_root().html.add_child(folium.Element(title_html))

    output_html = pathlib.Path(output_html)
    output_html.parent.mkdir(parents=True, exist_ok=True)
    m.save(str(output_html))
    logger.info("map saved to %s", output_html)
    return len(points)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Plot FARS accident locations for one state")
    parser.add_argument("state", help="FARS STATE code, e.g. 1 for Alabama")
    parser.add_argument("year", help="Archive year, e.g. 2013")
    parser.add_argument("--data-dir", default=pathlib.Path("."), type=pathlib.Path)
    parser.add_argument("--boundaries", default=None, type=pathlib.Path, help=f"State boundaries file (default: <data-dir>/{DEFAULT_BOUNDARIES})")
    parser.add_argument("--out", default=None, type=pathlib.Path, help="PNG output (default: reports/state_<STATE>_<YEAR>.png)")
    parser.add_argument("--html", default=None, type=pathlib.Path, help="Also write an interactive Folium map")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    ax = map_state(args.state, args.year, data_dir=args.data_dir, boundaries=args.boundaries)
    if ax is None:
        return

    out = args.out or pathlib.Path("reports") / f"state_{as_int(args.state, 'state')}_{as_int(args.year, 'year')}.png"
    out.parent.mkdir(parents=True, exist_ok=True)
    ax.figure.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(ax.figure)
    print(f"Map saved to {out}")

    if args.html:
        n = build_state_map_html(args.state, args.year, args.html, data_dir=args.data_dir)
        print(f"Interactive map with {n:,} markers saved to {args.html}")


if __name__ == "__main__":
    main()
