"""
Run-rate and per-job metrics derived from the parameters and the series.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.schema import DAYS_PER_MONTH, WEEKS_PER_MONTH
from engine.params import BusinessParameters
from engine.series import Series


@dataclass(frozen=True)
class RunRate:
    monthly: float
    yearly: float


def run_rate(series: Series, horizon_days: int) -> RunRate:
    """
    Average cash generated per 30-day month over the horizon.

    Measured from the day-1 sample onward, so the one-time startup charge
    (booked on day 1) does not drag the rate down.
    """
    n = min(int(horizon_days), len(series))
    if n < 2:
        return RunRate(monthly=0.0, yearly=0.0)
    per_day = (float(series.y[n - 1]) - float(series.y[0])) / (n - 1)
    monthly = per_day * DAYS_PER_MONTH
    return RunRate(monthly=monthly, yearly=monthly * 12)


def monthly_job_capacity(params: BusinessParameters, crew_count: int = 1) -> float:
    return params.base_jobs_per_week_per_crew * crew_count * WEEKS_PER_MONTH


def monthly_net_revenue(params: BusinessParameters, crew_count: int = 1) -> float:
    """Net revenue at full capacity, before ad spend and overhead."""
    return params.net_revenue_per_job * monthly_job_capacity(params, crew_count)
