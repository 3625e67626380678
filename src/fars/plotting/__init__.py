"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function returns a ``plotly.graph_objects.Figure``.

Modules:
    state_map: Accident locations on a U.S. state base map.
"""

from .state_map import plot_points, plot_state_map, render_map

__all__ = [
    'plot_points',
    'plot_state_map',
    'render_map',
]
