"""Switch penalty, net gain, sensitivity sweep and the recompute entry point."""

from .gain import gain, paydown_benefit
from .penalty import switch_penalty
from .recompute import SwitchAnalysis, SwitchParameters, analyze
from .sweep import SensitivityPoint, best_switch, gain_at, sensitivity_series

__all__ = [
    "switch_penalty",
    "gain",
    "paydown_benefit",
    "SensitivityPoint",
    "sensitivity_series",
    "gain_at",
    "best_switch",
    "SwitchParameters",
    "SwitchAnalysis",
    "analyze",
]
