"""
Crew-scaling triggers — when should the business add another crew?

Two strategies:
  simulated   (canonical) replays the engine's job-completion step from the
              last crew addition and counts completed jobs per crew until the
              profile's threshold is reached.
  closed_form (degraded)  divides the booked-out target by a constant daily
              booking rate. Only meaningful with flat seasonality and a single
              crew, so any other input falls back to the simulated strategy.

Both clamp to the horizon instead of extrapolating past it.

Booking targets (the chart dots) follow the booking backlog instead: each
sits where the backlog first reaches a profile's weeks-booked target.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

import numpy as np

from core.schema import DAYS_PER_MONTH
from core.utils import safe_div
from engine.events import simulate_day_jobs
from engine.interpolate import fraction_at_crossing, value_at
from engine.params import AGGRESSION_PROFILES, AggressionProfile, BusinessParameters, CrewSchedule
from engine.series import Series
from seasonality.base import SeasonalityTable

logger = logging.getLogger(__name__)

ScalingMode = Literal["simulated", "closed_form"]


@dataclass(frozen=True)
class ScalingTrigger:
    day: int
    x: float
    y: float
    mode: str
    reached: bool = True


@dataclass(frozen=True)
class BookingTarget:
    label: str
    color: str
    day: float  # fractional 1-based day
    x: float
    y: float
    reached: bool = True


def _point(series: Series, day: int, mode: str, reached: bool) -> ScalingTrigger:
    x = day / DAYS_PER_MONTH
    return ScalingTrigger(day=day, x=x, y=value_at(series, x), mode=mode, reached=reached)


def simulated_trigger_day(
    profile: AggressionProfile,
    crew_schedule: CrewSchedule,
    params: BusinessParameters,
    seasonality: Optional[SeasonalityTable],
    horizon_days: int,
    start_month_index: int = 0,
) -> Optional[int]:
    """First day per-crew completed jobs reach the threshold, or None within the horizon."""
    per_crew_jobs = 0.0
    for day in range(crew_schedule.last_addition_day + 1, horizon_days + 1):
        jobs = simulate_day_jobs(
            day,
            params=params,
            crew_schedule=crew_schedule,
            seasonality=seasonality,
            start_month_index=start_month_index,
        )
        per_crew_jobs += safe_div(jobs.jobs_done, jobs.crew_count)
        if per_crew_jobs >= profile.job_threshold:
            return day
    return None


def closed_form_trigger_day(
    weeks_booked: float,
    params: BusinessParameters,
    horizon_days: int,
) -> Optional[int]:
    """Days of steady bookings needed to be `weeks_booked` weeks booked out."""
    required = weeks_booked * params.base_jobs_per_week_per_crew
    rate = safe_div(params.daily_ad_spend, params.cost_per_lead) * params.close_rate
    if rate <= 0:
        return None
    day = int(math.ceil(required / rate))
    if day > horizon_days:
        return None
    return max(day, 1)


def crew_scaling_trigger(
    series: Series,
    profile: AggressionProfile,
    crew_schedule: CrewSchedule,
    params: BusinessParameters,
    seasonality: Optional[SeasonalityTable] = None,
    *,
    start_month_index: int = 0,
    mode: ScalingMode = "simulated",
) -> ScalingTrigger:
    horizon = max(len(series), 1)

    if mode == "closed_form":
        if seasonality is None and len(crew_schedule) == 0:
            day = closed_form_trigger_day(profile.weeks_booked, params, horizon)
            return _point(series, horizon if day is None else day, "closed_form", day is not None)
        logger.debug(
            "closed_form scaling needs flat seasonality and no prior crews; using simulated"
        )

    day = simulated_trigger_day(profile, crew_schedule, params, seasonality, horizon, start_month_index)
    return _point(series, horizon if day is None else day, "simulated", day is not None)


def suggest_crew_addition(
    trigger: ScalingTrigger,
    crew_schedule: CrewSchedule,
    params: BusinessParameters,
) -> CrewSchedule:
    """
    Schedule with the suggested crew added; it starts the day after the trigger.
    Unchanged when the trigger was never reached or the crew cap is already met.
    """
    if not trigger.reached:
        return crew_schedule
    if crew_schedule.crew_count(trigger.day, params.max_crews) >= params.max_crews:
        return crew_schedule
    return crew_schedule.add(trigger.day + 1)


def booking_targets(
    series: Series,
    backlog: Sequence[float],
    params: BusinessParameters,
    profiles: Sequence[AggressionProfile] = AGGRESSION_PROFILES,
    *,
    crew_count: int = 1,
) -> List[BookingTarget]:
    """
    One chart dot per aggression profile, placed where the booking backlog
    first reaches the profile's weeks-booked target.

    backlog is the per-day running backlog (engine.simulation.simulate_frame).
    The target is `weeks_booked` weeks of work for `crew_count` crews; a target
    never reached within the horizon sits on the last day.
    """
    values = np.asarray(backlog, dtype=float)
    top = float(values.max()) if values.size else 0.0
    targets = []
    for profile in profiles:
        needed = profile.weeks_booked * params.base_jobs_per_week_per_crew * crew_count
        day = fraction_at_crossing(values, needed) + 1.0
        x = day / DAYS_PER_MONTH
        targets.append(BookingTarget(
            label=profile.label,
            color=profile.color,
            day=day,
            x=x,
            y=value_at(series, x),
            reached=top >= needed,
        ))
    return targets
