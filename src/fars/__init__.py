"""
FARS - Fatality Analysis Reporting System accident summaries

A small Python package for loading yearly FARS accident files, counting
accidents by month and year, and mapping accident locations by state,
using the Functional Core, Imperative Shell architecture.

Structure:
- data/     : Imperative Shell (file resolution and CSV loading)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : (orchestration of the above)
"""

from .analysis import InvalidStateError, summarize_counts
from .data import YearResult, fars_read, fars_read_years, make_filename
from .reports import fars_map_state, fars_summarize_years

__version__ = "0.1.0"

__all__ = [
    'InvalidStateError',
    'YearResult',
    'fars_map_state',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'make_filename',
    'summarize_counts',
]
