"""
Projection engine — business inputs, day-by-day cash simulation, interpolation.
The orchestrating run_projection lives in engine.runner (it depends on analytics).
"""

from .params import (
    AGGRESSION_PROFILES,
    AggressionProfile,
    BusinessParameters,
    CrewSchedule,
    JobCostModel,
    get_profile,
)
from .series import Series
from .interpolate import fraction_at_crossing, value_at
from .simulation import simulate, simulate_frame

__all__ = [
    "AGGRESSION_PROFILES",
    "AggressionProfile",
    "BusinessParameters",
    "CrewSchedule",
    "JobCostModel",
    "get_profile",
    "Series",
    "fraction_at_crossing",
    "value_at",
    "simulate",
    "simulate_frame",
]
