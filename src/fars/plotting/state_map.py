"""
FARS State Accident Map (Functional Core)

Pure plotting functions – no file I/O, no data loading.
Input: coordinate ranges and ``(longitude, latitude)`` pairs.
Output: ``plotly.graph_objects.Figure``.

Package Location: src/fars/plotting/state_map.py

Two-step interface:
    ``render_map`` draws the base map (state borders) clipped to the given
    latitude/longitude ranges; ``plot_points`` adds one small marker per
    accident.  ``plot_state_map`` chains both for the common case.

Projection note:
    The default ``albers usa`` projection of the ``usa`` scope ignores axis
    ranges, so a mercator projection is used to keep the map bounded to
    the accident extents.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import plotly.graph_objects as go

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Region keys accepted by render_map → plotly geo scope
_REGION_SCOPES: Dict[str, str] = {
    'state': 'usa',
}

# Degrees added around the accident extents so edge points stay visible
_RANGE_PAD_DEG: float = 0.25

_POINT_STYLE: Dict[str, object] = {'color': 'black', 'size': 3, 'symbol': 'circle'}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def render_map(
    region: str,
    lat_range: Tuple[float, float],
    lon_range: Tuple[float, float],
    title: Optional[str] = None,
) -> go.Figure:
    """
    Draw an empty base map bounded to the given ranges.

    Args:
        region: Map region key; only ``'state'`` (the U.S. with state
            borders) is supported.
        lat_range: ``(min, max)`` latitude in decimal degrees.
        lon_range: ``(min, max)`` longitude in decimal degrees.
        title: Optional figure title.

    Returns:
        Figure with a configured ``geo`` layout and no traces.

    Raises:
        ValueError: If *region* is not a known key.
    """
    try:
        scope = _REGION_SCOPES[region]
    except KeyError:
        raise ValueError(
            f"Unknown map region '{region}'. "
            f"Expected one of: {sorted(_REGION_SCOPES)}"
        )

    fig = go.Figure()
    fig.update_geos(
        scope=scope,
        projection_type='mercator',
        showsubunits=True,
        subunitcolor='gray',
        showland=True,
        landcolor='white',
        lataxis_range=_padded(lat_range),
        lonaxis_range=_padded(lon_range),
    )
    fig.update_layout(
        title=title,
        showlegend=False,
        template='plotly_white',
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
    )
    return fig


def plot_points(
    fig: go.Figure,
    points: Sequence[Tuple[float, float]],
    name: str = 'Accidents',
) -> go.Figure:
    """
    Add accident locations to a base map.

    Args:
        fig: Figure returned by ``render_map``.
        points: ``(longitude, latitude)`` pairs.
        name: Trace name shown in hover labels.

    Returns:
        The same figure, with one ``Scattergeo`` trace appended.
    """
    lons: List[float] = [p[0] for p in points]
    lats: List[float] = [p[1] for p in points]

    fig.add_trace(go.Scattergeo(
        lon=lons,
        lat=lats,
        mode='markers',
        marker=_POINT_STYLE,
        name=name,
        hovertemplate=(
            'Lat: %{lat:.4f}<br>'
            'Lon: %{lon:.4f}<extra></extra>'
        ),
    ))
    return fig


def plot_state_map(
    points: Sequence[Tuple[float, float]],
    lat_range: Tuple[float, float],
    lon_range: Tuple[float, float],
    title: Optional[str] = None,
) -> go.Figure:
    """Render the state base map and plot *points* on it."""
    fig = render_map('state', lat_range, lon_range, title=title)
    return plot_points(fig, points)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _padded(bounds: Tuple[float, float]) -> List[float]:
    lo, hi = bounds
    return [lo - _RANGE_PAD_DEG, hi + _RANGE_PAD_DEG]
