"""
FARS Analysis Package (Functional Core)

Pure transformations only: no file I/O, no side effects.

Modules:
    summary:    Month x year accident count table.
    validation: Integer coercion and column checks for user input.
"""

from .summary import monthly_summary
from .validation import coerce_int, validate_columns

__all__ = [
    'monthly_summary',
    'coerce_int',
    'validate_columns',
]
