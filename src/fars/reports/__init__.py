"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, figure building and output.
No analysis logic lives here — this package calls the plotting layer
(src/fars/plotting/) via the data reader (src/fars/data/reader.py).

Modules:
    state_map: map_state() – per-state accident location map for one year.
"""

from .state_map import map_state

__all__ = [
    'map_state',
]
