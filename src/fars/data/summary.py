"""
FARS Monthly Summary Orchestration (Imperative Shell)

Reads the requested years from disk and delegates the counting to the
Functional Core in ``src/fars/analysis/summary.py``.

Package Location: src/fars/data/summary.py
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Union

import pandas as pd

from .reader import PathLike, read_years
from ..analysis.summary import monthly_summary

log = logging.getLogger(__name__)


def summarize_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Build a month x year accident count table.

    Years that cannot be read are skipped (``read_years`` logs a warning
    for each) and get no column in the result.

    Args:
        years: Iterable of years, or a single year.
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            Defaults to the current working directory.

    Returns:
        DataFrame with a ``MONTH`` column followed by one ``Int64`` count
        column per loaded year.  Empty (``MONTH`` column only) when no
        year could be loaded.
    """
    result = read_years(years, data_dir=data_dir)

    table = monthly_summary(result.loaded)

    log.info(
        "Summarized %d/%d years", len(result.loaded), len(result),
        extra={"failed_years": [str(y) for y in result.failed_years]},
    )
    return table
