"""Coercion of loosely typed date values (ISO strings, timestamps)."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any


def parse_date(value: Any) -> date | None:
    """Convert a value to a date, or None if null/missing.

    Handles date, datetime, pandas Timestamp and ISO-format strings.
    Datetimes are reduced to their calendar date.
    """
    if value is None:
        return None

    # Handle pandas/numpy NA-like sentinels
    try:
        import pandas as pd  # type: ignore[import-untyped]

        if pd.isna(value):
            return None
    except (ImportError, TypeError, ValueError):
        pass

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())

    # pandas Timestamp
    if hasattr(value, "date") and callable(value.date):
        return value.date()

    raise TypeError(f"Cannot convert {type(value).__name__} to date: {value!r}")
