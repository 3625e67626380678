"""Shared fixtures: small bz2-compressed FARS accident files in a temp dir."""

from pathlib import Path

import pandas as pd
import pytest

_COLUMNS = ["ST_CASE", "STATE", "MONTH", "LATITUDE", "LONGITUD", "FATALS"]

# 2013: state 1 has one latitude sentinel row and one longitude sentinel row
ACCIDENTS_2013 = [
    (10001, 1, 1, 32.5000, -86.5000, 1),
    (10002, 1, 1, 33.0000, -87.0000, 2),
    (10003, 1, 2, 99.9999, -86.0000, 1),
    (10004, 1, 3, 34.0000, 999.9999, 1),
    (20001, 2, 3, 61.2000, -149.9000, 1),
]

ACCIDENTS_2014 = [
    (10001, 1, 1, 31.0000, -85.5000, 1),
    (20001, 2, 4, 60.0000, -150.0000, 3),
    (20002, 2, 4, 64.8000, -147.7000, 1),
]


def write_accidents(directory: Path, year: int, rows, compressed: bool = True) -> Path:
    suffix = ".csv.bz2" if compressed else ".csv"
    path = directory / f"accident_{year}{suffix}"
    pd.DataFrame(rows, columns=_COLUMNS).to_csv(path, index=False)
    return path


@pytest.fixture
def data_dir(tmp_path):
    write_accidents(tmp_path, 2013, ACCIDENTS_2013)
    write_accidents(tmp_path, 2014, ACCIDENTS_2014)
    return tmp_path
