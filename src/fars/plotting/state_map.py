"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: one state's accident DataFrame.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Missing Coordinates:
    Sentinel positions are already NaN by the time a frame reaches this
    module (``fars.data.reader.read_file`` masks them on load).  Rows
    with a NaN latitude or longitude are dropped from the marker trace
    and from the map extent.  If no row survives, the figure is returned
    with an empty trace over a whole-US base map.

Map Extent:
    The geo sub-plot is fitted to the min/max of the valid coordinates,
    padded by ``margin`` degrees on every side.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from ..analysis.validation import validate_columns

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_COORD_COLUMNS: List[str] = ['LONGITUD', 'LATITUDE']

_MARKER_STYLE: Dict[str, Any] = {
    'color': 'firebrick',
    'symbol': 'circle',
    'size': 4,
    'opacity': 0.7,
}

# FARS state codes (US Census FIPS plus PR / VI)
_STATE_NAMES: Dict[int, str] = {
    1: 'Alabama',         2: 'Alaska',          4: 'Arizona',
    5: 'Arkansas',        6: 'California',      8: 'Colorado',
    9: 'Connecticut',     10: 'Delaware',       11: 'District of Columbia',
    12: 'Florida',        13: 'Georgia',        15: 'Hawaii',
    16: 'Idaho',          17: 'Illinois',       18: 'Indiana',
    19: 'Iowa',           20: 'Kansas',         21: 'Kentucky',
    22: 'Louisiana',      23: 'Maine',          24: 'Maryland',
    25: 'Massachusetts',  26: 'Michigan',       27: 'Minnesota',
    28: 'Mississippi',    29: 'Missouri',       30: 'Montana',
    31: 'Nebraska',       32: 'Nevada',         33: 'New Hampshire',
    34: 'New Jersey',     35: 'New Mexico',     36: 'New York',
    37: 'North Carolina', 38: 'North Dakota',   39: 'Ohio',
    40: 'Oklahoma',       41: 'Oregon',         42: 'Pennsylvania',
    43: 'Puerto Rico',    44: 'Rhode Island',   45: 'South Carolina',
    46: 'South Dakota',   47: 'Tennessee',      48: 'Texas',
    49: 'Utah',           50: 'Vermont',        51: 'Virginia',
    52: 'Virgin Islands', 53: 'Washington',     54: 'West Virginia',
    55: 'Wisconsin',      56: 'Wyoming',
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df_state: pd.DataFrame,
    state_code: int,
    year: int,
    margin: float = 0.5,
) -> go.Figure:
    """
    Build a scatter map of accident locations for one state.

    Args:
        df_state: Accident records already filtered to *state_code*, with
            columns ``LONGITUD`` and ``LATITUDE`` (NaN = unknown).  An
            ``ST_CASE`` column, when present, is shown on hover.
        state_code: FARS state code, used for the title.
        year: Data year, used for the title.
        margin: Padding in degrees added around the point extent.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo`` trace,
        ready for ``fig.show()`` or ``fig.write_html()``.

    Raises:
        ValueError: If ``df_state`` is missing coordinate columns.
    """
    validate_columns(df_state, required=_COORD_COLUMNS, label='df_state')

    df = df_state.dropna(subset=_COORD_COLUMNS)

    has_case = 'ST_CASE' in df.columns
    hover = (
        "Lat: %{lat:.4f}<br>"
        "Lon: %{lon:.4f}"
    )
    if has_case:
        hover = "<b>Case %{customdata}</b><br>" + hover

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=df['LONGITUD'].tolist(),
        lat=df['LATITUDE'].tolist(),
        mode='markers',
        marker=dict(
            color=_MARKER_STYLE['color'],
            symbol=_MARKER_STYLE['symbol'],
            size=_MARKER_STYLE['size'],
            opacity=_MARKER_STYLE['opacity'],
        ),
        name='Accidents',
        customdata=df['ST_CASE'].tolist() if has_case else None,
        hovertemplate=hover + "<extra></extra>",
        showlegend=False,
    ))

    geo = dict(
        resolution=50,
        projection=dict(type='mercator'),
        showland=True,
        landcolor='whitesmoke',
        showcountries=True,
        countrycolor='gray',
        showsubunits=True,
        subunitcolor='black',
        showlakes=True,
        lakecolor='white',
    )

    extent = _coordinate_extent(df, margin)
    if extent is not None:
        (lon_min, lon_max), (lat_min, lat_max) = extent
        geo['lonaxis'] = dict(range=[lon_min, lon_max])
        geo['lataxis'] = dict(range=[lat_min, lat_max])
    else:
        geo['scope'] = 'usa'
        geo['projection'] = dict(type='albers usa')

    fig.update_layout(
        title=_build_title(state_code, year),
        geo=geo,
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )
    return fig


def state_name(state_code: int) -> Optional[str]:
    """Return the state name for a FARS state code, or ``None``."""
    return _STATE_NAMES.get(int(state_code))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _coordinate_extent(
    df: pd.DataFrame,
    margin: float,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Padded ``((lon_min, lon_max), (lat_min, lat_max))`` of *df*.

    Returns ``None`` when *df* has no rows.  Latitude is clipped to
    [-90, 90] after padding.
    """
    if df.empty:
        return None

    lon_min = float(df['LONGITUD'].min()) - margin
    lon_max = float(df['LONGITUD'].max()) + margin
    lat_min = max(float(df['LATITUDE'].min()) - margin, -90.0)
    lat_max = min(float(df['LATITUDE'].max()) + margin, 90.0)
    return (lon_min, lon_max), (lat_min, lat_max)


def _build_title(state_code: int, year: int) -> str:
    """
    Construct a plot title such as ``'Alabama (1) – Accidents 2013'``.

    Falls back to ``'State <code>'`` for codes not in the name table.
    """
    name = state_name(state_code)
    location = f'{name} ({state_code})' if name else f'State {state_code}'
    return f'{location} – Accidents {year}'
