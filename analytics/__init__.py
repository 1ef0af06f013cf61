"""
Analytics on the simulated series — break-even, run-rate, crew scaling, summary.
"""

from .breakeven import BreakEven, NotReached, break_even
from .metrics import RunRate, run_rate
from .scaling import (
    BookingTarget,
    ScalingTrigger,
    booking_targets,
    crew_scaling_trigger,
    suggest_crew_addition,
)
from .report import ProjectionSummary, summarize_projection

__all__ = [
    "BreakEven",
    "NotReached",
    "break_even",
    "RunRate",
    "run_rate",
    "BookingTarget",
    "ScalingTrigger",
    "booking_targets",
    "crew_scaling_trigger",
    "suggest_crew_addition",
    "ProjectionSummary",
    "summarize_projection",
]
