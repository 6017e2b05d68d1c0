"""
FARS - Fatality Analysis Reporting System explorer

Loads yearly accident extracts, counts accidents per month across years
and maps one state's accident locations.

Structure:
- data/     : Imperative Shell (file I/O)
- analysis/ : Functional Core (pure transformations)
- plotting/ : Plotly figure builders
- reports/  : Orchestration (load -> plot -> show/save)
- utils/    : Logging helpers
"""

from .data import (
    YearFailure,
    YearReadResult,
    available_years,
    make_filename,
    read_file,
    read_years,
    summarize_years,
)
from .analysis import monthly_summary
from .errors import FarsError, InvalidInput, InvalidState
from .plotting import plot_state_map
from .reports import map_state
from .utils.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    'read_file',
    'make_filename',
    'read_years',
    'summarize_years',
    'map_state',
    'available_years',
    'monthly_summary',
    'plot_state_map',
    'configure_logging',
    'YearReadResult',
    'YearFailure',
    'FarsError',
    'InvalidInput',
    'InvalidState',
]
