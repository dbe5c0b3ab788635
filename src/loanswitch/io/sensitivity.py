"""DataFrame export for sensitivity series (export only)."""

from __future__ import annotations

from typing import Any

from ..analysis import SensitivityPoint
from ._backends import require_pandas, require_polars
from ._columns import SENSITIVITY_COLUMNS
from ._convert import _sensitivity_to_rows, _to_columns


def sensitivity_to_pandas(series: list[SensitivityPoint]) -> Any:
    """Export a sensitivity series to a pandas DataFrame.

    Columns are switch_period, date and gain; ready to plot gain by date.

    Raises:
        ImportError: If pandas is not installed.
    """
    pd = require_pandas()
    rows = _sensitivity_to_rows(list(series))
    return pd.DataFrame(_to_columns(rows, SENSITIVITY_COLUMNS))


def sensitivity_to_polars(series: list[SensitivityPoint]) -> Any:
    """Export a sensitivity series to a polars DataFrame.

    Raises:
        ImportError: If polars is not installed.
    """
    pl = require_polars()
    rows = _sensitivity_to_rows(list(series))
    return pl.DataFrame(_to_columns(rows, SENSITIVITY_COLUMNS))
