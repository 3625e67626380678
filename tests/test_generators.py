import logging

import pandas as pd
import pytest

from fars.analysis.states import InvalidStateError
from fars.reports import generators
from fars.reports.generators import fars_map_state, fars_summarize_years

from conftest import write_accidents


@pytest.fixture
def render_calls(monkeypatch):
    """Record calls to the map renderer while still building the figure."""
    calls = []
    real = generators.plot_state_map

    def _spy(*args, **kwargs):
        calls.append((args, kwargs))
        return real(*args, **kwargs)

    monkeypatch.setattr(generators, "plot_state_map", _spy)
    return calls


# ---------------------------------------------------------------------------
# fars_summarize_years
# ---------------------------------------------------------------------------

def test_summarize_years(data_dir):
    wide = fars_summarize_years([2013, 2014], data_dir)

    assert list(wide.columns) == ["MONTH", 2013, 2014]
    assert wide["MONTH"].tolist() == [1, 2, 3, 4]
    by_month = wide.set_index("MONTH")
    assert by_month.loc[1, 2013] == 2
    assert by_month.loc[1, 2014] == 1
    assert by_month.loc[4, 2014] == 2
    assert pd.isna(by_month.loc[4, 2013])


def test_summarize_years_drops_failed_year(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="fars"):
        wide = fars_summarize_years(["2013", 1800], data_dir)

    assert list(wide.columns) == ["MONTH", 2013]
    assert len(wide) == 3
    assert "invalid year: 1800" in caplog.text


def test_summarize_years_all_failed(tmp_path):
    wide = fars_summarize_years([1800, 1801], tmp_path)
    assert list(wide.columns) == ["MONTH"]
    assert wide.empty


# ---------------------------------------------------------------------------
# fars_map_state
# ---------------------------------------------------------------------------

def test_map_state_plots_only_valid_coordinates(data_dir, render_calls):
    fig = fars_map_state(1, 2013, data_dir)

    assert len(render_calls) == 1
    (points, lat_range, lon_range), _ = render_calls[0]
    assert points == [(-86.5, 32.5), (-87.0, 33.0)]
    assert lat_range == (32.5, 33.0)
    assert lon_range == (-87.0, -86.5)

    trace = fig.data[0]
    assert 999.9999 not in list(trace.lon)
    assert 99.9999 not in list(trace.lat)


def test_map_state_accepts_string_arguments(data_dir, render_calls):
    fig = fars_map_state("2", "2014", data_dir)

    assert fig is not None
    assert len(fig.data[0].lat) == 2


def test_map_state_invalid_state_does_not_render(data_dir, render_calls):
    with pytest.raises(InvalidStateError, match="56"):
        fars_map_state(56, 2013, data_dir)
    assert render_calls == []


def test_map_state_missing_year(data_dir, render_calls):
    with pytest.raises(FileNotFoundError):
        fars_map_state(1, 2020, data_dir)
    assert render_calls == []


def test_map_state_non_numeric_state(data_dir):
    with pytest.raises(ValueError):
        fars_map_state("AL", 2013, data_dir)


def test_map_state_no_rows_logs_notice(data_dir, render_calls, monkeypatch, caplog):
    monkeypatch.setattr(
        generators, "filter_state", lambda data, state_num: data.iloc[0:0]
    )
    with caplog.at_level(logging.INFO, logger="fars"):
        result = fars_map_state(1, 2013, data_dir)

    assert result is None
    assert render_calls == []
    assert "no accidents to plot" in caplog.text


def test_map_state_all_coordinates_unknown(tmp_path, render_calls, caplog):
    write_accidents(tmp_path, 2016, [
        (1, 5, 1, 99.9999, -92.0, 1),
        (2, 5, 2, 35.0, 999.9999, 1),
    ])
    with caplog.at_level(logging.INFO, logger="fars"):
        result = fars_map_state(5, 2016, tmp_path)

    assert result is None
    assert render_calls == []
    assert "no valid coordinates to plot" in caplog.text


def test_map_state_writes_html(data_dir, tmp_path):
    out = tmp_path / "maps" / "state_1_2013.html"
    fig = fars_map_state(1, 2013, data_dir, output=out)

    assert fig is not None
    assert out.exists()
    assert "plotly" in out.read_text(encoding="utf-8").lower()
