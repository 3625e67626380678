"""
FARS Data Reader (Imperative Shell)

This module resolves yearly FARS accident files on disk and loads them into
DataFrames.  It is the only place in the package that touches the input
files.

Package Location: src/fars/data/reader.py

File naming:
   Each calendar year is one file named ``accident_<YYYY>.csv.bz2`` in the
   data directory (the current working directory by default).  pandas infers
   bz2 compression from the suffix, so an already decompressed
   ``accident_<YYYY>.csv`` is read the same way.

Failure policy:
   ``fars_read`` and ``make_filename`` raise.  ``fars_read_years`` is the
   single recovery boundary: a year that cannot be read is logged as
   ``invalid year: <year>`` and returned as a skipped ``YearResult`` while
   the remaining years are still processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from ..analysis.summary import MONTH_COL, YEAR_COL

log = logging.getLogger(__name__)

_FILENAME_TEMPLATE: str = "accident_{year:d}.csv.bz2"
_COMPRESSED_SUFFIX: str = ".bz2"

YearLike = Union[int, str]


@dataclass(frozen=True)
class YearResult:
    """Outcome of reading one year partition.

    ``data`` holds the ``[MONTH, year]`` frame when the year was read;
    otherwise it is ``None`` and ``reason`` says why the year was skipped.

    ``year`` is the coerced ``int`` for a read year and the caller's raw
    value (e.g. ``"abc"``) for a skipped one.  Equality compares ``year``
    and ``reason`` only; ``data`` is excluded.
    """

    year: YearLike
    data: Optional[pd.DataFrame] = field(default=None, compare=False)
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when the year was read and ``data`` is set."""
        return self.data is not None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: YearLike) -> str:
    """
    Build the canonical FARS file name for a year.

    Args:
        year: Year as an integer or an integer-like string (``2013`` or
            ``"2013"``).

    Returns:
        File name of the form ``accident_<YYYY>.csv.bz2``.

    Raises:
        ValueError: If *year* is a non-numeric string.
        TypeError: If *year* cannot be converted to ``int`` at all.
    """
    return _FILENAME_TEMPLATE.format(year=int(year))


def year_file_path(year: YearLike, data_dir: Union[str, Path] = ".") -> Path:
    """
    Resolve the on-disk path for a year inside *data_dir*.

    The canonical ``.bz2`` file is preferred.  When only the decompressed
    ``.csv`` exists, that path is returned.  When neither exists the
    canonical path is returned so that ``fars_read`` reports it as missing.

    Args:
        year: Year as an integer or integer-like string.
        data_dir: Directory holding the yearly files.

    Returns:
        Path to the file to load.
    """
    canonical = Path(data_dir) / make_filename(year)
    if canonical.exists():
        return canonical

    decompressed = canonical.with_name(canonical.name[: -len(_COMPRESSED_SUFFIX)])
    if decompressed.exists():
        log.debug("Using decompressed file %s", decompressed)
        return decompressed
    return canonical


def fars_read(filename: Union[str, Path]) -> pd.DataFrame:
    """
    Read one FARS CSV file into a DataFrame.

    Compression is inferred from the file suffix, so ``.csv.bz2`` files are
    decompressed transparently.  Every call re-reads the file from disk.

    Args:
        filename: Path to the (optionally bz2-compressed) CSV file.

    Returns:
        DataFrame with the file's columns and inferred dtypes.

    Raises:
        FileNotFoundError: If *filename* does not exist.
        pandas.errors.ParserError: If the file is not valid delimited text.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    # low_memory=False reads in one pass and avoids mixed-dtype warnings
    return pd.read_csv(path, compression="infer", low_memory=False)


def fars_read_years(
    years: Iterable[YearLike],
    data_dir: Union[str, Path] = ".",
) -> List[YearResult]:
    """
    Read several year partitions and keep only the month of each accident.

    For every year the file is resolved and loaded, a constant ``year``
    column is added and the frame is projected to ``[MONTH, year]``.
    Failures are isolated per year: the year is logged as invalid and its
    slot in the result is a skipped ``YearResult``.

    Args:
        years: Years as integers or integer-like strings.
        data_dir: Directory holding the yearly files.

    Returns:
        One ``YearResult`` per input year, in input order.
    """
    results: List[YearResult] = []
    for year in years:
        try:
            year_int = int(year)
            data = fars_read(year_file_path(year_int, data_dir))
            month_df = data.assign(**{YEAR_COL: year_int})[[MONTH_COL, YEAR_COL]]
        except Exception as exc:
            log.warning(
                "invalid year: %s",
                year,
                extra={"year": str(year), "error": str(exc)},
            )
            results.append(YearResult(year=year, reason=str(exc)))
            continue

        log.debug("Read %d accidents for %s", len(month_df), year_int)
        results.append(YearResult(year=year_int, data=month_df))
    return results
