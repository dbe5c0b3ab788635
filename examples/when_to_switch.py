# %% [markdown]
"""
# When Should You Switch Rates?

A walk through a rate-switch decision using loanswitch.

A borrower pays 500 a week on a 500,000 loan at 3.2%. The lender offers
1.9% from now on, but charges a penalty: the interest it gives up (priced at
its own 1.1% comparison rate) or three months of interest, whichever is
higher. Is the switch worth it, and does timing matter?

**Key findings:**
- Switching early pays down far more principal
- The penalty eats most of that benefit
- Late switches only ever pay the three-month floor
"""

# %% Imports
from datetime import date

from loanswitch import SwitchParameters, analyze, best_switch

# %% [markdown]
"""
## Setup

Start from the default parameters: a 13-month horizon, switching in the
first week.
"""

# %% Build parameters
params = SwitchParameters.default(date(2024, 1, 1))
result = analyze(params)

print(f"Principal: {params.principal:,.2f}")
print(f"Rates: current {params.interest_rate}%, new {params.new_rate}%, "
      f"comparison {params.comparison_rate}%")
print(f"Weekly periods to maturity: {result.periods}")

# %% [markdown]
"""
## 1. Original vs Switched
"""

# %% Compare totals
print(f"{'Metric':<24} {'Original':>14} {'Switched':>14}")
print("-" * 54)
print(f"{'Total interest':<24} {result.original_totals.total_interest:>14,.2f} "
      f"{result.switched_totals.total_interest:>14,.2f}")
print(f"{'Total principal':<24} {result.original_totals.total_principal:>14,.2f} "
      f"{result.switched_totals.total_principal:>14,.2f}")
print(f"{'Remaining at maturity':<24} {result.original_totals.remaining:>14,.2f} "
      f"{result.switched_totals.remaining:>14,.2f}")

# %% Gain
print(f"\nBenefit (additional paydown): {result.paydown_benefit:+,.2f}")
print(f"Cost (penalty):               {result.switch_penalty:,.2f}")
print(f"Total:                        {result.gain:,.2f}")

# %% [markdown]
"""
## 2. Timing the Switch

Sweep every possible switch week and find the best one.
"""

# %% Sensitivity
best = best_switch(list(result.sensitivity))
for point in result.sensitivity[::8]:
    print(f"  week {point.switch_period:>3} ({point.date}): {point.gain:>12,.2f}")
print(f"\nBest week to switch: {best.switch_period} ({best.date}), gain {best.gain:,.2f}")

# %% Chart-ready data
from loanswitch.io import sensitivity_to_pandas

df = sensitivity_to_pandas(result.sensitivity)
print(df.head())
