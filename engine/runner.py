"""
Projection runner — one call from form inputs to everything the chart needs.

Steps:
  1. apply the aggression profile's payout delay to the parameters
  2. simulate the per-day breakdown (frame) and the cumulative series
  3. derive break-even, run-rate, the crew-scaling trigger and booking targets

The presentation layer (chart, PDF, email) consumes the returned frame and
results dict directly; nothing here is cached or persisted.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import pandas as pd

from analytics.report import summarize_projection
from analytics.scaling import booking_targets, crew_scaling_trigger
from core.config import ProjectionConfig
from seasonality.base import SeasonalityTable

from .params import MODERATE, AggressionProfile, BusinessParameters, CrewSchedule
from .series import Series
from .simulation import simulate_frame

logger = logging.getLogger(__name__)


def run_projection(
    params: BusinessParameters,
    config: ProjectionConfig,
    *,
    crew_schedule: Optional[CrewSchedule] = None,
    seasonality: Optional[SeasonalityTable] = None,
    profile: Optional[AggressionProfile] = None,
) -> Tuple[pd.DataFrame, Dict]:
    """
    Run the projection and its analytics.

    Parameters
    ----------
    params : BusinessParameters
        Already validated/clamped business inputs
    config : ProjectionConfig
        Horizon, start month and crew-scaling strategy
    crew_schedule : CrewSchedule, optional
        Days on which extra crews start (default: one crew throughout)
    seasonality : SeasonalityTable, optional
        Regional workability; None runs the flat, non-seasonal variant
    profile : AggressionProfile, optional
        Scaling posture (default: Moderate)

    Returns
    -------
    (daily_df, results)
    daily_df: one row per day, see engine.simulation.simulate_frame
    results:  series, break_even, run_rate, scaling_trigger, booking_targets,
              summary, horizon_days, profile
    """
    schedule = crew_schedule if crew_schedule is not None else CrewSchedule()
    profile = profile if profile is not None else MODERATE
    p = params.with_profile(profile)

    horizon = config.resolve_horizon_days(seasonal=seasonality is not None)
    start = int(config.start_month_index) % 12

    daily = simulate_frame(p, schedule, seasonality, horizon, start)
    series = Series.from_cumulative(daily["cumulative"].to_numpy(dtype=float))

    trigger = crew_scaling_trigger(
        series, profile, schedule, p, seasonality,
        start_month_index=start, mode=config.scaling_mode,
    )
    targets = booking_targets(
        series, daily["backlog"].to_numpy(dtype=float), p,
        crew_count=schedule.crew_count(1, p.max_crews),
    )
    summary = summarize_projection(
        series, p,
        crew_count=schedule.crew_count(1, p.max_crews),
        horizon_days=horizon,
        scaling_trigger=trigger,
    )

    logger.info(
        "Projection %s: %d days, tier=%s, crews=%d, break-even=%s, add crew day %d",
        seasonality.region if seasonality is not None else "flat",
        horizon,
        p.ad_spend_tier,
        schedule.crew_count(horizon, p.max_crews),
        summary.break_even.label,
        trigger.day,
    )

    results = {
        "series": series,
        "break_even": summary.break_even,
        "run_rate": summary.run_rate,
        "scaling_trigger": trigger,
        "booking_targets": targets,
        "summary": summary,
        "horizon_days": horizon,
        "profile": profile,
    }
    return daily, results
