"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is a sequence of ``[MONTH, year]`` DataFrames as produced by
``fars.data.reader.fars_read_years``; output is a wide count table.

Package Location: src/fars/analysis/summary.py

Missing Cell Rule:
    A (year, month) combination with no accidents in the input is left as
    ``<NA>`` in the wide table, never ``0``.  A count is only ever produced
    for a group that has at least one row, so "no data for this year and
    month" and "zero accidents" are kept distinct.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pandas as pd

# ---------------------------------------------------------------------------
# Column names
# ---------------------------------------------------------------------------
MONTH_COL: str = "MONTH"
YEAR_COL: str = "year"
_COUNT_COL: str = "n"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def summarize_counts(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Count accidents per month and year and pivot years into columns.

    ``None`` entries (years that could not be read) are ignored.  The
    remaining frames are stacked row-wise, grouped by ``(year, MONTH)`` and
    counted.  The grouped counts are then spread so that each distinct year
    becomes a column.

    Args:
        frames: DataFrames with at least the columns ``MONTH`` and ``year``;
            ``None`` entries are skipped.

    Returns:
        DataFrame with ``MONTH`` as the first column followed by one column
        per distinct year (ascending, labelled by the year value).  Cells
        are nullable ``Int64`` counts; absent combinations are ``<NA>``.
        When no frame is supplied the result is an empty frame with only
        the ``MONTH`` column.

    Example:
        >>> summarize_counts([df_2013, None, df_2015])
           MONTH  2013  2015
        0      1  2230  2368
        1      2  1952  1968
    """
    kept: List[pd.DataFrame] = [f for f in frames if f is not None]
    if not kept:
        return pd.DataFrame(columns=[MONTH_COL])

    combined = pd.concat(
        [f[[MONTH_COL, YEAR_COL]] for f in kept], ignore_index=True
    )
    counts = monthly_counts(combined)

    wide = counts.pivot(index=MONTH_COL, columns=YEAR_COL, values=_COUNT_COL)
    wide = wide.sort_index().sort_index(axis=1).astype("Int64")
    wide.columns.name = None
    return wide.reset_index()


def monthly_counts(combined: pd.DataFrame) -> pd.DataFrame:
    """
    Count rows per ``(year, MONTH)`` pair in long format.

    Args:
        combined: Stacked ``[MONTH, year]`` rows.

    Returns:
        DataFrame with columns ``[year, MONTH, n]``, one row per observed
        pair.
    """
    return (
        combined.groupby([YEAR_COL, MONTH_COL])
        .size()
        .reset_index(name=_COUNT_COL)
    )
