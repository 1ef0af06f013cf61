"""
Day-by-day cash simulation.

simulate() is the pure contract consumed by every analytic; simulate_frame()
runs the same loop but keeps every intermediate quantity for tables and charts.
"""

from __future__ import annotations

from typing import Iterator, Optional

import numpy as np
import pandas as pd

from seasonality.base import SeasonalityTable

from .events import DayResult, simulate_day
from .params import BusinessParameters, CrewSchedule
from .series import Series


def iter_days(
    params: BusinessParameters,
    crew_schedule: CrewSchedule,
    seasonality: Optional[SeasonalityTable],
    horizon_days: int,
    start_month_index: int,
) -> Iterator[DayResult]:
    for day in range(1, int(horizon_days) + 1):
        yield simulate_day(
            day,
            params=params,
            crew_schedule=crew_schedule,
            seasonality=seasonality,
            start_month_index=start_month_index,
        )


def simulate(
    params: BusinessParameters,
    crew_schedule: Optional[CrewSchedule] = None,
    seasonality: Optional[SeasonalityTable] = None,
    horizon_days: int = 360,
    start_month_index: int = 0,
) -> Series:
    """
    Cumulative cash flow for days 1..horizon_days.

    Deterministic and side-effect free; every call returns its own Series.
    """
    schedule = crew_schedule if crew_schedule is not None else CrewSchedule()
    cumulative = np.zeros(max(int(horizon_days), 0), dtype=float)

    running = 0.0
    for t, result in enumerate(iter_days(params, schedule, seasonality, horizon_days, start_month_index)):
        running += result.daily_profit
        cumulative[t] = running

    return Series.from_cumulative(cumulative)


def simulate_frame(
    params: BusinessParameters,
    crew_schedule: Optional[CrewSchedule] = None,
    seasonality: Optional[SeasonalityTable] = None,
    horizon_days: int = 360,
    start_month_index: int = 0,
) -> pd.DataFrame:
    """
    Per-day breakdown of the simulation, one row per day.

    Adds a running booking backlog: bookings beyond what the crews can absorb
    pile up, and the backlog never goes negative.
    """
    schedule = crew_schedule if crew_schedule is not None else CrewSchedule()

    rows = []
    running = 0.0
    backlog = 0.0
    for result in iter_days(params, schedule, seasonality, horizon_days, start_month_index):
        jobs = result.jobs
        running += result.daily_profit
        backlog = max(backlog + jobs.bookings - jobs.daily_capacity, 0.0)
        rows.append({
            "day": jobs.day,
            "month": jobs.day / 30.0,
            "month_index": jobs.month_index,
            "crew_count": jobs.crew_count,
            "multiplier": jobs.multiplier,
            "daily_capacity": jobs.daily_capacity,
            "ad_spend": jobs.ad_spend,
            "leads": jobs.leads,
            "bookings": jobs.bookings,
            "jobs_done": jobs.jobs_done,
            "backlog": backlog,
            "deposit_revenue": result.deposit_revenue,
            "final_payment_revenue": result.final_payment_revenue,
            "daily_profit": result.daily_profit,
            "cumulative": running,
        })

    columns = [
        "day", "month", "month_index", "crew_count", "multiplier", "daily_capacity",
        "ad_spend", "leads", "bookings", "jobs_done", "backlog",
        "deposit_revenue", "final_payment_revenue", "daily_profit", "cumulative",
    ]
    return pd.DataFrame(rows, columns=columns)
