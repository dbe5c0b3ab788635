"""Shared row conversion for DataFrame export.

Both backends are fed the same column-ordered data, so pandas and polars
frames built from one object always carry identical columns.
"""

from __future__ import annotations

from typing import Any

from ..analysis import SensitivityPoint, SwitchAnalysis
from ..schedule import Schedule, ScheduleTotals
from ._columns import (
    COL_DATE,
    COL_GAIN,
    COL_INITIAL,
    COL_INTEREST_PAYMENT,
    COL_PAYMENT,
    COL_PRINCIPAL_PAYMENT,
    COL_RATE,
    COL_REMAINING,
    COL_SCHEDULE,
    COL_SWITCH_PERIOD,
    COL_TOTAL_INTEREST,
    COL_TOTAL_PAYMENT,
    COL_TOTAL_PRINCIPAL,
)


def _schedule_to_rows(schedule: Schedule) -> list[dict[str, Any]]:
    """Convert a Schedule to a list of row dicts."""
    return [
        {
            COL_DATE: week.date,
            COL_INITIAL: week.initial,
            COL_PAYMENT: week.payment,
            COL_RATE: week.rate,
            COL_INTEREST_PAYMENT: week.interest_payment,
            COL_PRINCIPAL_PAYMENT: week.principal_payment,
            COL_REMAINING: week.remaining,
        }
        for week in schedule
    ]


def _sensitivity_to_rows(series: list[SensitivityPoint]) -> list[dict[str, Any]]:
    return [
        {
            COL_SWITCH_PERIOD: point.switch_period,
            COL_DATE: point.date,
            COL_GAIN: point.gain,
        }
        for point in series
    ]


def _totals_to_row(name: str, totals: ScheduleTotals) -> dict[str, Any]:
    return {
        COL_SCHEDULE: name,
        COL_TOTAL_PAYMENT: totals.total_payment,
        COL_TOTAL_INTEREST: totals.total_interest,
        COL_TOTAL_PRINCIPAL: totals.total_principal,
        COL_REMAINING: totals.remaining,
    }


def _summary_to_rows(analysis: SwitchAnalysis) -> list[dict[str, Any]]:
    return [
        _totals_to_row("original", analysis.original_totals),
        _totals_to_row("switched", analysis.switched_totals),
    ]


def _to_columns(
    rows: list[dict[str, Any]], columns: tuple[str, ...]
) -> dict[str, list[Any]]:
    """Pivot row dicts into ordered column lists (empty lists for no rows)."""
    return {col: [row[col] for row in rows] for col in columns}
