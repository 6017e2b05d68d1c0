"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS accident extracts.

Modules:
- reader:  Yearly file naming, loading and multi-year reads
- summary: Monthly count table across years
"""

from .reader import (
    YearFailure,
    YearReadResult,
    available_years,
    make_filename,
    read_file,
    read_years,
)
from .summary import summarize_years

__all__ = [
    # Reader
    'YearFailure',
    'YearReadResult',
    'available_years',
    'make_filename',
    'read_file',
    'read_years',
    # Summary
    'summarize_years',
]
