"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS tools.

Modules:
- reader: Year file resolution, CSV loading and multi-year reads
"""

from .reader import (
    MONTH_COL,
    YEAR_COL,
    YearResult,
    fars_read,
    fars_read_years,
    make_filename,
    year_file_path,
)

__all__ = [
    'MONTH_COL',
    'YEAR_COL',
    'YearResult',
    'fars_read',
    'fars_read_years',
    'make_filename',
    'year_file_path',
]
