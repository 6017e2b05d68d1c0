"""
FARS Data Reader (Imperative Shell)

Reads yearly accident extracts from bz2-compressed CSV files and
returns DataFrames for the analysis and plotting layers.

Package Location: src/fars/data/reader.py

File convention:
    One file per year named ``accident_<year>.csv.bz2``, resolved
    against ``data_dir`` (default: the current working directory).

Missing-coordinate rule:
    FARS encodes unknown positions as ``LONGITUD >= 900`` and
    ``LATITUDE > 90``.  ``read_file`` replaces those sentinels with NaN
    on load, so downstream code only ever sees real coordinates or NaN.

Failure handling:
    ``read_file`` raises on a missing or unreadable file.  ``read_years``
    never raises for a bad year: the failure is logged, recorded on the
    returned ``YearReadResult`` and the remaining years are still read.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Union

import numpy as np
import pandas as pd

from ..analysis.validation import coerce_int, validate_columns

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File naming and sentinel constants
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = 'accident_{year}.csv.bz2'
_FILENAME_PATTERN = re.compile(r'^accident_(-?\d+)\.csv\.bz2$')

# Values at or beyond these bounds mean "position unknown"
LONGITUD_SENTINEL: float = 900.0   # LONGITUD >= 900
LATITUDE_MAX: float = 90.0         # LATITUDE > 90

# Columns kept per year by read_years
_YEAR_COLUMNS: List[str] = ['MONTH', 'year']

# Per-year errors that read_years downgrades to a warning.  OSError covers
# a missing file as well as a corrupt bz2 stream; pandas parse errors and
# InvalidInput are ValueError subclasses.
_RECOVERABLE_ERRORS = (OSError, EOFError, ValueError, KeyError)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class YearFailure:
    """A year that ``read_years`` could not load."""

    year: Any
    cause: BaseException

    @property
    def message(self) -> str:
        return f"invalid year: {self.year} ({type(self.cause).__name__}: {self.cause})"


@dataclass
class YearReadResult:
    """
    Outcome of reading several years.

    Behaves as a sequence of per-year tables in input order; a failed
    year's slot holds ``None``.  Failures are kept alongside so callers
    can inspect them programmatically.

    Attributes:
        years: Requested years, as given (after scalar promotion).
        tables: One ``DataFrame`` (columns ``MONTH``, ``year``) or ``None``
            per requested year.
        failures: One ``YearFailure`` per ``None`` entry in *tables*.
    """

    years: List[Any] = field(default_factory=list)
    tables: List[Optional[pd.DataFrame]] = field(default_factory=list)
    failures: List[YearFailure] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tables)

    def __getitem__(self, index):
        return self.tables[index]

    def __iter__(self) -> Iterator[Optional[pd.DataFrame]]:
        return iter(self.tables)

    @property
    def loaded(self) -> List[pd.DataFrame]:
        """Successfully loaded tables, in input order."""
        return [t for t in self.tables if t is not None]

    @property
    def failed_years(self) -> List[Any]:
        return [f.year for f in self.failures]

    @property
    def ok(self) -> bool:
        return not self.failures


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Build the file name for one year's accident extract.

    Args:
        year: Year as int, integral float or numeric string.

    Returns:
        ``'accident_<year>.csv.bz2'``, e.g. ``'accident_2013.csv.bz2'``.

    Raises:
        InvalidInput: If *year* is not an integer value.
    """
    return FILENAME_TEMPLATE.format(year=coerce_int(year, name='year'))


def read_file(path: PathLike) -> pd.DataFrame:
    """
    Load one bz2-compressed accident CSV.

    Column names come from the header row.  Sentinel coordinates are
    replaced by NaN (see module docstring).

    Args:
        path: Path to an ``accident_<year>.csv.bz2`` file.

    Returns:
        DataFrame with one row per accident record.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    df = pd.read_csv(path, compression='bz2')
    df = _mask_coordinate_sentinels(df)

    log.debug(
        "Read %d rows from %s", len(df), path.name,
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def read_years(
    years: Union[Any, Iterable[Any]],
    data_dir: Optional[PathLike] = None,
) -> YearReadResult:
    """
    Load the ``MONTH`` column of several yearly files, tagged by year.

    Each year is read independently.  A year that fails (bad year value,
    missing file, parse error, no ``MONTH`` column) is logged as a
    warning, recorded in ``failures`` and leaves ``None`` in its slot;
    the other years are unaffected.

    Args:
        years: Iterable of years, or a single year.
        data_dir: Directory holding the files.  Defaults to the current
            working directory.

    Returns:
        ``YearReadResult`` with one entry per requested year, in order.
    """
    year_list = _as_list(years)
    base = resolve_data_dir(data_dir)
    result = YearReadResult(years=year_list)

    for raw_year in year_list:
        try:
            table = _read_one_year(raw_year, base)
        except _RECOVERABLE_ERRORS as exc:
            failure = YearFailure(year=raw_year, cause=exc)
            log.warning(
                "invalid year: %s", raw_year,
                extra={"year": str(raw_year), "error": str(exc)},
            )
            result.tables.append(None)
            result.failures.append(failure)
            continue
        result.tables.append(table)

    return result


def available_years(data_dir: Optional[PathLike] = None) -> List[int]:
    """
    List the years that have an accident file in *data_dir*.

    Args:
        data_dir: Directory to scan.  Defaults to the working directory.

    Returns:
        Sorted list of years; empty if none are found.
    """
    base = resolve_data_dir(data_dir)
    if not base.is_dir():
        return []

    years = set()
    for path in base.glob('accident_*.csv.bz2'):
        match = _FILENAME_PATTERN.match(path.name)
        if match:
            years.add(int(match.group(1)))
    return sorted(years)


def resolve_data_dir(data_dir: Optional[PathLike]) -> Path:
    """Directory to read from: *data_dir*, or the working directory."""
    return Path(data_dir) if data_dir is not None else Path.cwd()


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _read_one_year(raw_year: Any, base: Path) -> pd.DataFrame:
    """Read one year's file and project it to ``MONTH`` and ``year``."""
    year = coerce_int(raw_year, name='year')
    df = read_file(base / make_filename(year))
    validate_columns(df, required=['MONTH'], label=make_filename(year))
    return df.assign(year=year)[_YEAR_COLUMNS]


def _mask_coordinate_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Only columns present in *df* are touched; non-numeric values are
    coerced to NaN as well.
    """
    if 'LONGITUD' in df.columns:
        lon = pd.to_numeric(df['LONGITUD'], errors='coerce')
        df['LONGITUD'] = lon.where(lon < LONGITUD_SENTINEL, np.nan)
    if 'LATITUDE' in df.columns:
        lat = pd.to_numeric(df['LATITUDE'], errors='coerce')
        df['LATITUDE'] = lat.where(lat <= LATITUDE_MAX, np.nan)
    return df


def _as_list(years: Union[Any, Iterable[Any]]) -> List[Any]:
    """Promote a scalar year to a one-element list."""
    if isinstance(years, (str, bytes)) or not hasattr(years, '__iter__'):
        return [years]
    return list(years)
