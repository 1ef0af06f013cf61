"""
Projection configuration.
Business inputs live in engine/params.py (BusinessParameters, CrewSchedule).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .schema import DAYS_PER_MONTH, SEASONAL_HORIZON_DAYS


@dataclass(frozen=True)
class ProjectionConfig:
    time_frame_months: int = 6
    # explicit override; otherwise derived from the time frame / seasonality
    horizon_days: Optional[int] = None
    start_month_index: int = 0  # 0 = January

    # crew-scaling trigger strategy (closed_form degrades to simulated when seasonal)
    scaling_mode: Literal["simulated", "closed_form"] = "simulated"

    def resolve_horizon_days(self, seasonal: bool) -> int:
        if self.horizon_days is not None:
            return max(int(self.horizon_days), 1)
        if seasonal:
            return SEASONAL_HORIZON_DAYS
        return max(int(self.time_frame_months), 1) * DAYS_PER_MONTH
