"""
FARS State Map Report (Imperative Shell)

Thin orchestration layer: loads one year's file via the data reader,
checks and filters to one state, calls the pure plotting function and
renders or saves the figure.

Package Location: src/fars/reports/state_map.py

Usage::

    from fars import map_state

    map_state(6, 2014)                              # opens in a browser
    map_state(6, 2014, output_path="ca_2014.html", show=False)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.validation import coerce_int, validate_columns
from ..data.reader import PathLike, resolve_data_dir, make_filename, read_file
from ..errors import InvalidState
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)


def map_state(
    state_code: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Plot the accident locations of one state for one year.

    Args:
        state_code: FARS state code (int or numeric string).
        year: Data year (int, integral float or numeric string).
        data_dir: Directory holding ``accident_<year>.csv.bz2``.  Defaults
            to the current working directory.
        output_path: When given, the figure is also written there as a
            standalone HTML file.
        show: Call ``fig.show()`` after building the figure.

    Returns:
        The figure, or ``None`` when the state has no accidents to plot.

    Raises:
        InvalidInput: If *state_code* or *year* is not an integer value.
        FileNotFoundError: If the year's file does not exist.
        InvalidState: If *state_code* does not occur in the file.
    """
    state = coerce_int(state_code, name='state_code')
    year = coerce_int(year, name='year')

    base = resolve_data_dir(data_dir)
    df = read_file(base / make_filename(year))
    validate_columns(df, required=['STATE'], label=make_filename(year))

    states = pd.to_numeric(df['STATE'], errors='coerce')
    in_state = states == state
    if not in_state.any():
        raise InvalidState(state)

    df_state = df[in_state]
    if df_state.empty:
        log.info("no accidents to plot", extra={"state": state, "year": year})
        return None

    fig = plot_state_map(df_state, state, year)

    lat = fig.data[0].lat
    n_points = 0 if lat is None else len(lat)
    log.info(
        "Plotted %d/%d accidents for state %d (%d)",
        n_points, len(df_state), state, year,
        extra={"state": state, "year": year, "points": n_points},
    )

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(output_path))
        log.info("Saved state map to %s", output_path)

    if show:
        fig.show()

    return fig
