"""
Pytest configuration and fixtures for fars tests.
"""

import pandas as pd
import pytest


def _record(state=1, month=1, lon=-86.5, lat=32.5, case=10001):
    return {
        'STATE': state,
        'ST_CASE': case,
        'MONTH': month,
        'LONGITUD': lon,
        'LATITUDE': lat,
    }


@pytest.fixture
def make_record():
    """Factory for one accident row."""
    return _record


@pytest.fixture
def write_year(tmp_path):
    """Write ``accident_<year>.csv.bz2`` into tmp_path from a list of rows."""
    def _write(year, rows, directory=None):
        directory = directory or tmp_path
        path = directory / f'accident_{year}.csv.bz2'
        pd.DataFrame(rows).to_csv(path, index=False, compression='bz2')
        return path
    return _write


@pytest.fixture
def data_dir(tmp_path, write_year):
    """Two years of small, realistic extracts."""
    write_year(2013, [
        _record(state=1, month=1, lon=-86.6, lat=32.4, case=10001),
        _record(state=1, month=1, lon=-87.1, lat=33.9, case=10002),
        _record(state=1, month=3, lon=-85.9, lat=31.2, case=10003),
        _record(state=6, month=2, lon=-118.2, lat=34.1, case=60001),
        _record(state=6, month=12, lon=999.9999, lat=99.9999, case=60002),
    ])
    write_year(2014, [
        _record(state=1, month=1, lon=-86.8, lat=33.5, case=10001),
        _record(state=6, month=2, lon=-121.5, lat=38.6, case=60001),
        _record(state=6, month=2, lon=-117.2, lat=32.7, case=60002),
    ])
    return tmp_path
