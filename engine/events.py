"""
Single-day step of the projection — what one calendar day produces.

Two layers share this step:
  simulation.py: turns every day into profit and accumulates cash
  analytics/scaling.py: replays only the job-completion half (crew, season,
                        ad spend, leads, jobs) to find when to add a crew
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.schema import (
    AD_SPEND_CUTOFF,
    AD_SPEND_FULL,
    AD_SPEND_RAMP_CAP,
    DAYS_PER_MONTH,
    WEEKS_PER_MONTH,
)
from core.utils import month_index_for_day, safe_div
from seasonality.base import SeasonalityTable, multiplier_for_day

from .params import BusinessParameters, CrewSchedule


@dataclass(frozen=True)
class DayJobs:
    """Job-side result of one day (crew, season, lead funnel)."""
    day: int
    crew_count: int
    month_index: int
    multiplier: float
    daily_capacity: float
    ad_spend: float
    leads: float
    bookings: float
    jobs_done: float


@dataclass(frozen=True)
class DayResult:
    """Full result of one day including recognized cash."""
    jobs: DayJobs
    deposit_revenue: float
    final_payment_revenue: float
    daily_profit: float


def seasonal_ad_spend(raw_ad_spend: float, multiplier: float) -> float:
    """
    Scale ad spend by workability.

    Below 0.3 nothing is spent, 0.3-0.5 ramps linearly up to half of the raw
    spend, and 0.5 and above spends in full.
    """
    if multiplier < AD_SPEND_CUTOFF:
        return 0.0
    if multiplier < AD_SPEND_FULL:
        ramp = (multiplier - AD_SPEND_CUTOFF) / (AD_SPEND_FULL - AD_SPEND_CUTOFF)
        return raw_ad_spend * ramp * AD_SPEND_RAMP_CAP
    return raw_ad_spend


def daily_capacity(crew_count: int, params: BusinessParameters) -> float:
    # weekly capacity -> 30-day month -> day
    return crew_count * params.base_jobs_per_week_per_crew * WEEKS_PER_MONTH / DAYS_PER_MONTH


def simulate_day_jobs(
    day: int,
    *,
    params: BusinessParameters,
    crew_schedule: CrewSchedule,
    seasonality: Optional[SeasonalityTable],
    start_month_index: int,
) -> DayJobs:
    crews = crew_schedule.crew_count(day, params.max_crews)
    month_index = month_index_for_day(day, start_month_index)
    multiplier = multiplier_for_day(seasonality, day, start_month_index)

    capacity = daily_capacity(crews, params)
    ad_spend = seasonal_ad_spend(params.daily_ad_spend * crews, multiplier)

    leads = safe_div(ad_spend, params.cost_per_lead)
    bookings = leads * params.close_rate
    jobs_done = min(capacity, bookings)

    return DayJobs(
        day=day,
        crew_count=crews,
        month_index=month_index,
        multiplier=multiplier,
        daily_capacity=capacity,
        ad_spend=ad_spend,
        leads=leads,
        bookings=bookings,
        jobs_done=jobs_done,
    )


def simulate_day(
    day: int,
    *,
    params: BusinessParameters,
    crew_schedule: CrewSchedule,
    seasonality: Optional[SeasonalityTable],
    start_month_index: int,
) -> DayResult:
    """
    Simulate one 1-based day.

    Final payments are gated on the calendar as a whole: once the day is past
    the payout delay, the same day's completed jobs also pay their remainder.
    Cohorts are not tracked individually.
    """
    jobs = simulate_day_jobs(
        day,
        params=params,
        crew_schedule=crew_schedule,
        seasonality=seasonality,
        start_month_index=start_month_index,
    )
    m = jobs.multiplier

    deposit_revenue = jobs.jobs_done * params.deposit_per_job
    final_payment_revenue = 0.0
    if day > params.payout_delay_days:
        final_payment_revenue = jobs.jobs_done * params.final_payment_per_job

    profit = (deposit_revenue + final_payment_revenue) * m - jobs.ad_spend * m - params.fixed_daily_overhead
    if day == 1:
        profit -= params.startup_cost

    return DayResult(
        jobs=jobs,
        deposit_revenue=deposit_revenue,
        final_payment_revenue=final_payment_revenue,
        daily_profit=profit,
    )
