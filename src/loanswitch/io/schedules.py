"""DataFrame export for Schedule objects (export only)."""

from __future__ import annotations

from typing import Any

from ..schedule import Schedule
from ._backends import require_pandas, require_polars
from ._columns import SCHEDULE_COLUMNS
from ._convert import _schedule_to_rows, _to_columns


def schedule_to_pandas(schedule: Schedule) -> Any:
    """Export a Schedule to a pandas DataFrame.

    Args:
        schedule: Schedule to export.

    Returns:
        pandas.DataFrame with one row per week, in schedule order.

    Raises:
        ImportError: If pandas is not installed.
    """
    pd = require_pandas()
    rows = _schedule_to_rows(schedule)
    return pd.DataFrame(_to_columns(rows, SCHEDULE_COLUMNS))


def schedule_to_polars(schedule: Schedule) -> Any:
    """Export a Schedule to a polars DataFrame.

    Args:
        schedule: Schedule to export.

    Returns:
        polars.DataFrame with one row per week, in schedule order.

    Raises:
        ImportError: If polars is not installed.
    """
    pl = require_polars()
    rows = _schedule_to_rows(schedule)
    return pl.DataFrame(_to_columns(rows, SCHEDULE_COLUMNS))
