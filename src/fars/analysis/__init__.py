"""
FARS Analysis Package (Functional Core)

Pure transformations only – no file I/O, no plotting.

Modules:
- summary: Monthly accident counts pivoted by year
- states:  State filtering and sentinel-coordinate sanitization
"""

from .summary import (
    MONTH_COL,
    YEAR_COL,
    monthly_counts,
    summarize_counts,
)

from .states import (
    LAT_COL,
    LON_COL,
    STATE_COL,
    InvalidStateError,
    coordinate_ranges,
    filter_state,
    sanitize_coordinates,
    valid_points,
)

__all__ = [
    # Summary
    'MONTH_COL',
    'YEAR_COL',
    'monthly_counts',
    'summarize_counts',
    # States
    'LAT_COL',
    'LON_COL',
    'STATE_COL',
    'InvalidStateError',
    'coordinate_ranges',
    'filter_state',
    'sanitize_coordinates',
    'valid_points',
]
