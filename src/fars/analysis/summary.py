"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input is a list of per-year DataFrames as produced by
``fars.data.reader.read_years``; output is a month x year count table.

Package Location: src/fars/analysis/summary.py

Table layout:
    One row per month observed (ascending), a leading ``MONTH`` column,
    then one column per year observed (ascending, integer labels).
    Counts use the nullable ``Int64`` dtype: a (year, month) pair with
    no accidents is ``<NA>``, not ``0``.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import pandas as pd

from .validation import validate_columns

log = logging.getLogger(__name__)

_GROUP_KEYS: List[str] = ['year', 'MONTH']


def monthly_summary(frames: Sequence[pd.DataFrame]) -> pd.DataFrame:
    """
    Count accidents per month for each year.

    Args:
        frames: DataFrames with at least ``MONTH`` and ``year`` columns.
            ``None`` entries are skipped so the tables of a
            ``YearReadResult`` can be passed as-is.

    Returns:
        Wide DataFrame (see module docstring).  When there is nothing to
        count the result is an empty DataFrame with only a ``MONTH``
        column.

    Raises:
        ValueError: If a frame lacks ``MONTH`` or ``year``.
    """
    frames = [f for f in frames if f is not None]
    for df in frames:
        validate_columns(df, required=_GROUP_KEYS, label='year table')

    frames = [f for f in frames if not f.empty]
    if not frames:
        log.warning("No accident records to summarize.")
        return pd.DataFrame({'MONTH': pd.Series([], dtype='int64')})

    combined = pd.concat([f[_GROUP_KEYS] for f in frames], ignore_index=True)

    counts = (
        combined.groupby(_GROUP_KEYS)
        .size()
        .rename('n')
        .reset_index()
    )

    table = (
        counts.pivot(index='MONTH', columns='year', values='n')
        .sort_index()
        .sort_index(axis=1)
        .astype('Int64')
    )
    table.columns.name = None

    return table.reset_index()
