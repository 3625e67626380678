"""
FARS Reports Package (Imperative Shell)

Orchestrates reader → analysis → plotting for the two end-user reports.

Modules:
    generators: ``fars_summarize_years`` and ``fars_map_state``.
"""

from .generators import fars_map_state, fars_summarize_years

__all__ = [
    'fars_map_state',
    'fars_summarize_years',
]
