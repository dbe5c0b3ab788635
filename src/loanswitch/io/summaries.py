"""DataFrame export for analysis summary totals."""

from __future__ import annotations

from typing import Any

from ..analysis import SwitchAnalysis
from ._backends import require_pandas, require_polars
from ._columns import SUMMARY_COLUMNS
from ._convert import _summary_to_rows, _to_columns


def summary_to_pandas(analysis: SwitchAnalysis) -> Any:
    """Export original and switched totals as a two-row pandas DataFrame.

    Raises:
        ImportError: If pandas is not installed.
    """
    pd = require_pandas()
    return pd.DataFrame(_to_columns(_summary_to_rows(analysis), SUMMARY_COLUMNS))


def summary_to_polars(analysis: SwitchAnalysis) -> Any:
    """Export original and switched totals as a two-row polars DataFrame.

    Raises:
        ImportError: If polars is not installed.
    """
    pl = require_polars()
    return pl.DataFrame(_to_columns(_summary_to_rows(analysis), SUMMARY_COLUMNS))
