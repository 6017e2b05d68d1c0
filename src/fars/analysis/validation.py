"""
FARS Input Validation (Functional Core)

Pure helpers that turn loosely-typed user input (years, state codes)
into integers at the package boundary.

Package Location: src/fars/analysis/validation.py
"""

from __future__ import annotations

import numbers
from typing import Any, List

import pandas as pd

from ..errors import InvalidInput


def coerce_int(value: Any, name: str = 'value') -> int:
    """
    Parse *value* as an integer.

    Accepts ints (including numpy integers), integral floats such as
    ``2013.0`` and numeric strings such as ``"2013"`` or ``" 1 "``.
    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        value: Raw user input.
        name: Argument name used in the error message.

    Returns:
        The integer value.

    Raises:
        InvalidInput: If *value* is not numeric or not integral.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInput(f"{name} must be an integer, got {value!r}")

    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise InvalidInput(
                    f"{name} must be an integer, got {value!r}"
                ) from None

    if isinstance(value, numbers.Real):
        if pd.isna(value) or not float(value).is_integer():
            raise InvalidInput(f"{name} must be an integer, got {value!r}")
        return int(value)

    raise InvalidInput(f"{name} must be an integer, got {value!r}")


def validate_columns(df: pd.DataFrame, required: List[str], label: str = 'df') -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: List of column names that must be present.
        label: Name of the frame used in the error message.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{label} is missing required columns: {missing}")
