"""
FARS State Filtering and Coordinate Sanitization (Functional Core)

Pure functions only. No I/O, no plotting.
Input is a full FARS accident DataFrame; output is the filtered, sanitized
coordinate set and the bounding ranges handed to the map renderer.

Package Location: src/fars/analysis/states.py

Sentinel Rule:
    FARS records unknown locations with placeholder values instead of
    blanks.  Any ``LONGITUD`` above 900 and any ``LATITUDE`` above 90 is
    converted to ``NaN``.  A row is plotted, and counted toward the map
    ranges, only when both of its coordinates are valid.
"""

from __future__ import annotations

from typing import List, Tuple, Union

import numpy as np
import pandas as pd

# ---------------------------------------------------------------------------
# Column names and FARS sentinel thresholds
# ---------------------------------------------------------------------------
STATE_COL: str = "STATE"
LAT_COL: str = "LATITUDE"
LON_COL: str = "LONGITUD"

_LON_SENTINEL: float = 900.0
_LAT_SENTINEL: float = 90.0


class InvalidStateError(ValueError):
    """Raised when a state code does not occur in the loaded dataset."""

    def __init__(self, state_num: int) -> None:
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def filter_state(data: pd.DataFrame, state_num: Union[int, str]) -> pd.DataFrame:
    """
    Keep the accidents recorded for one state.

    Args:
        data: Full accident DataFrame with a ``STATE`` column.
        state_num: FARS state code as an integer or integer-like string.

    Returns:
        Copy of the matching rows (may be empty).

    Raises:
        ValueError: If *state_num* is not numeric.
        InvalidStateError: If the code does not appear in ``data["STATE"]``.
    """
    state_num = int(state_num)
    if state_num not in set(data[STATE_COL].dropna().unique()):
        raise InvalidStateError(state_num)
    return data.loc[data[STATE_COL] == state_num].copy()


def sanitize_coordinates(data: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with sentinel coordinates replaced by ``NaN``."""
    out = data.copy()
    lon = pd.to_numeric(out[LON_COL], errors="coerce")
    lat = pd.to_numeric(out[LAT_COL], errors="coerce")
    out[LON_COL] = lon.where(~(lon > _LON_SENTINEL), np.nan)
    out[LAT_COL] = lat.where(~(lat > _LAT_SENTINEL), np.nan)
    return out


def valid_points(data: pd.DataFrame) -> List[Tuple[float, float]]:
    """
    Extract the plottable ``(longitude, latitude)`` pairs.

    Args:
        data: Sanitized accident rows.

    Returns:
        List of ``(LONGITUD, LATITUDE)`` tuples, in row order, for rows
        where both coordinates are present.
    """
    pairs = data[[LON_COL, LAT_COL]].dropna()
    return list(zip(pairs[LON_COL].astype(float), pairs[LAT_COL].astype(float)))


def coordinate_ranges(
    points: List[Tuple[float, float]],
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    Compute the latitude and longitude extents of a point set.

    Args:
        points: ``(longitude, latitude)`` pairs; must not be empty.

    Returns:
        ``((lat_min, lat_max), (lon_min, lon_max))``.

    Raises:
        ValueError: If *points* is empty.
    """
    if not points:
        raise ValueError("Cannot compute coordinate ranges of an empty point set")
    lons, lats = zip(*points)
    return (min(lats), max(lats)), (min(lons), max(lons))
