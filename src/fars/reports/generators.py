"""
FARS Report Generators (Imperative Shell)

Thin orchestration layer: resolves years → files, calls reader.py to load
DataFrames, calls the functional core to summarize / filter, and hands the
result to the plotting functions.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import fars_summarize_years, fars_map_state

    summary = fars_summarize_years([2013, 2014, 2015], data_dir="data")
    fig = fars_map_state(1, 2013, data_dir="data", output="al_2013.html")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.states import (
    coordinate_ranges,
    filter_state,
    sanitize_coordinates,
    valid_points,
)
from ..analysis.summary import summarize_counts
from ..data import reader
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)


def fars_summarize_years(
    years: Iterable[Union[int, str]],
    data_dir: Union[str, Path] = ".",
) -> pd.DataFrame:
    """
    Monthly accident counts for several years, one column per year.

    Years whose file cannot be read are logged and left out of the table.

    Args:
        years: Years as integers or integer-like strings.
        data_dir: Directory holding the ``accident_<YYYY>.csv.bz2`` files.

    Returns:
        Wide DataFrame – see ``fars.analysis.summary.summarize_counts``.
    """
    results = reader.fars_read_years(years, data_dir)
    skipped = [r.year for r in results if not r.ok]
    if skipped:
        log.debug("Summarizing without skipped years: %s", skipped)
    return summarize_counts(r.data for r in results)


def fars_map_state(
    state_num: Union[int, str],
    year: Union[int, str],
    data_dir: Union[str, Path] = ".",
    output: Optional[Union[str, Path]] = None,
) -> Optional[go.Figure]:
    """
    Map every accident of one state for one year.

    The full year is loaded directly (all columns are needed), filtered to
    the state, sentinel coordinates are dropped, and the remaining points
    are drawn on a state base map bounded to their extents.

    Args:
        state_num: FARS state code as an integer or integer-like string.
        year: Year as an integer or integer-like string.
        data_dir: Directory holding the yearly files.
        output: Optional ``.html`` path; when given the figure is written
            there.  The parent directory is created if needed.

    Returns:
        The map figure, or ``None`` when the state has nothing to plot.

    Raises:
        FileNotFoundError: If the year's file is missing.
        ValueError: If *state_num* or *year* is not numeric.
        InvalidStateError: If *state_num* is not present in the data.
    """
    data = reader.fars_read(reader.year_file_path(year, data_dir))
    data_sub = filter_state(data, state_num)

    if data_sub.empty:
        log.info("no accidents to plot")
        return None

    points = valid_points(sanitize_coordinates(data_sub))
    if not points:
        log.info(
            "no valid coordinates to plot",
            extra={"state": int(state_num), "accidents": len(data_sub)},
        )
        return None

    lat_range, lon_range = coordinate_ranges(points)
    fig = plot_state_map(
        points,
        lat_range,
        lon_range,
        title=f"FARS accidents – state {int(state_num)}, {int(year)}",
    )
    log.debug(
        "Plotted %d of %d accidents for state %s",
        len(points), len(data_sub), state_num,
    )

    if output is not None:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(out_path))
        log.info("Map written to %s", out_path)

    return fig
