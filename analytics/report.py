"""
Projection summary — the headline numbers shown next to the chart.

Translates the engine output into the questions an owner asks:
  "What does one job make me?"     → gross / net revenue per job
  "How much can my crews do?"      → monthly job capacity
  "When do I get my money back?"   → break-even
  "What is this worth per month?"  → run-rate
  "When do I hire?"                → crew-scaling trigger
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from engine.params import BusinessParameters
from engine.series import Series

from .breakeven import BreakEvenResult, break_even
from .metrics import RunRate, monthly_job_capacity, monthly_net_revenue, run_rate
from .scaling import ScalingTrigger


@dataclass
class ProjectionSummary:
    gross_revenue_per_job: float
    net_revenue_per_job: float
    monthly_jobs: float
    monthly_net_revenue: float
    break_even: BreakEvenResult
    run_rate: RunRate
    final_cumulative: float
    horizon_days: int
    scaling_trigger: Optional[ScalingTrigger] = None

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Gross Revenue per Job", "Value": f"${self.gross_revenue_per_job:,.2f}", "Unit": ""},
            {"Metric": "Net Revenue per Job", "Value": f"${self.net_revenue_per_job:,.2f}", "Unit": ""},
            {"Metric": "Monthly Jobs", "Value": f"{self.monthly_jobs:.1f}", "Unit": "jobs"},
            {"Metric": "Monthly Net Revenue", "Value": f"${self.monthly_net_revenue:,.2f}", "Unit": ""},
            {"Metric": "Break-Even", "Value": self.break_even.label, "Unit": ""},
            {"Metric": "Monthly Run-Rate", "Value": f"${self.run_rate.monthly:,.2f}", "Unit": "/mo"},
            {"Metric": "Yearly Run-Rate", "Value": f"${self.run_rate.yearly:,.2f}", "Unit": "/yr"},
            {"Metric": "Cumulative Cash", "Value": f"${self.final_cumulative:,.2f}",
             "Unit": f"after {self.horizon_days} days"},
        ]
        if self.scaling_trigger is not None:
            value = f"day {self.scaling_trigger.day}"
            if not self.scaling_trigger.reached:
                value += " (not reached)"
            rows.append({"Metric": "Add Crew", "Value": value, "Unit": ""})
        return pd.DataFrame(rows)


def summarize_projection(
    series: Series,
    params: BusinessParameters,
    *,
    crew_count: int = 1,
    horizon_days: Optional[int] = None,
    scaling_trigger: Optional[ScalingTrigger] = None,
) -> ProjectionSummary:
    horizon = len(series) if horizon_days is None else int(horizon_days)
    return ProjectionSummary(
        gross_revenue_per_job=params.gross_revenue_per_job,
        net_revenue_per_job=params.net_revenue_per_job,
        monthly_jobs=monthly_job_capacity(params, crew_count),
        monthly_net_revenue=monthly_net_revenue(params, crew_count),
        break_even=break_even(series),
        run_rate=run_rate(series, horizon),
        final_cumulative=float(series.y[-1]) if len(series) else 0.0,
        horizon_days=horizon,
        scaling_trigger=scaling_trigger,
    )
