"""DataFrame export for loanswitch results.

Provides functions to convert Schedules, sensitivity series and analysis
summaries to pandas and polars DataFrames for tables and charts.

Both pandas and polars are optional dependencies. Install them with::

    pip install loanswitch[pandas]
    pip install loanswitch[polars]
    pip install loanswitch[dataframe]   # both
"""

from .schedules import (
    schedule_to_pandas,
    schedule_to_polars,
)
from .sensitivity import (
    sensitivity_to_pandas,
    sensitivity_to_polars,
)
from .summaries import (
    summary_to_pandas,
    summary_to_polars,
)

__all__ = [
    # Schedules
    "schedule_to_pandas",
    "schedule_to_polars",
    # Sensitivity series
    "sensitivity_to_pandas",
    "sensitivity_to_polars",
    # Summaries
    "summary_to_pandas",
    "summary_to_polars",
]
