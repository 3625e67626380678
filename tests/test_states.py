import math

import pandas as pd
import pytest

from fars.analysis.states import (
    InvalidStateError,
    coordinate_ranges,
    filter_state,
    sanitize_coordinates,
    valid_points,
)


@pytest.fixture
def accidents():
    return pd.DataFrame({
        "STATE":    [1, 1, 1, 1, 2],
        "MONTH":    [1, 1, 2, 3, 3],
        "LATITUDE": [32.5, 33.0, 95.0, 34.0, 61.2],
        "LONGITUD": [-86.5, -87.0, -86.0, 999.0, -149.9],
    })


def test_filter_state_keeps_matching_rows(accidents):
    sub = filter_state(accidents, 1)
    assert len(sub) == 4
    assert set(sub["STATE"]) == {1}


def test_filter_state_accepts_string_code(accidents):
    assert len(filter_state(accidents, "2")) == 1


def test_filter_state_unknown_code(accidents):
    with pytest.raises(InvalidStateError, match="invalid STATE number: 56") as info:
        filter_state(accidents, 56)
    assert info.value.state_num == 56
    assert isinstance(info.value, ValueError)


def test_filter_state_non_numeric_code(accidents):
    with pytest.raises(ValueError):
        filter_state(accidents, "AL")


def test_filter_state_returns_copy(accidents):
    sub = filter_state(accidents, 1)
    sub["LATITUDE"] = 0.0
    assert accidents["LATITUDE"].iloc[0] == 32.5


def test_sanitize_coordinates_replaces_sentinels(accidents):
    clean = sanitize_coordinates(accidents)

    assert math.isnan(clean["LATITUDE"].iloc[2])
    assert math.isnan(clean["LONGITUD"].iloc[3])
    assert clean["LATITUDE"].iloc[3] == 34.0
    # input untouched
    assert accidents["LONGITUD"].iloc[3] == 999.0


def test_sanitize_coordinates_keeps_boundary_values():
    clean = sanitize_coordinates(
        pd.DataFrame({"LATITUDE": [90.0], "LONGITUD": [900.0]})
    )
    assert clean["LATITUDE"].iloc[0] == 90.0
    assert clean["LONGITUD"].iloc[0] == 900.0


def test_valid_points_drops_rows_with_any_sentinel(accidents):
    points = valid_points(sanitize_coordinates(filter_state(accidents, 1)))
    assert points == [(-86.5, 32.5), (-87.0, 33.0)]


def test_coordinate_ranges_exclude_sentinel_rows(accidents):
    points = valid_points(sanitize_coordinates(filter_state(accidents, 1)))
    lat_range, lon_range = coordinate_ranges(points)

    assert lat_range == (32.5, 33.0)
    assert lon_range == (-87.0, -86.5)


def test_coordinate_ranges_empty():
    with pytest.raises(ValueError):
        coordinate_ranges([])
