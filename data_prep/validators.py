"""
Input validation and clamping before parameters enter the engine.

The engine assumes valid inputs. This module is where the form's raw values
are checked and pulled back into range:
- Negative money amounts or rates outside [0, 1]
- Time frames outside the 3-24 month slider
- Unknown ad-spend tiers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from core.schema import (
    DEFAULT_AD_SPEND_TIER,
    MAX_TIME_FRAME_MONTHS,
    MIN_TIME_FRAME_MONTHS,
)
from core.utils import clamp
from engine.params import BusinessParameters


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a parameter set."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_parameters(params: BusinessParameters) -> ValidationResult:
    """
    Run all checks on a BusinessParameters instance.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    # --- Money ---
    for name in ["gross_revenue_per_job", "average_cost_per_job", "fixed_daily_overhead", "startup_cost"]:
        value = getattr(params, name)
        if value < 0:
            result.errors.append(f"{name} is negative ({value}).")

    if params.net_revenue_per_job <= 0:
        result.warnings.append(
            f"Net revenue per job is {params.net_revenue_per_job:,.2f}; every job loses money."
        )
    if params.final_payment_per_job < 0:
        result.warnings.append(
            "Deposit exceeds net revenue per job; final payments will reduce cash."
        )

    # --- Rates ---
    for name in ["deposit_fraction", "close_rate"]:
        value = getattr(params, name)
        if not (0.0 <= value <= 1.0):
            result.errors.append(f"{name} must be between 0 and 1, got {value}.")

    if params.cost_per_lead < 0:
        result.errors.append(f"cost_per_lead is negative ({params.cost_per_lead}).")
    elif params.cost_per_lead == 0:
        result.warnings.append("cost_per_lead is 0, so ads will generate no leads.")

    # --- Capacity ---
    if params.base_jobs_per_week_per_crew <= 0:
        result.errors.append("base_jobs_per_week_per_crew must be positive.")
    if params.max_crews < 1:
        result.errors.append(f"max_crews must be at least 1, got {params.max_crews}.")
    if params.payout_delay_days < 0:
        result.errors.append(f"payout_delay_days is negative ({params.payout_delay_days}).")

    # --- Ad spend ---
    if params.ad_spend_tier not in params.ad_spend_tiers:
        result.warnings.append(
            f"Unknown ad spend tier {params.ad_spend_tier!r}; no ads will run."
        )
    negative = [k for k, v in params.ad_spend_tiers.items() if v < 0]
    if negative:
        result.errors.append(f"Negative ad spend for tiers: {negative}")

    return result


@dataclass(frozen=True)
class ClampedInputs:
    time_frame_months: int
    ad_spend_tier: str


def clamp_inputs(
    params: BusinessParameters,
    *,
    time_frame_months: int = 6,
    ad_spend_tier: Optional[str] = None,
) -> ClampedInputs:
    """Pull raw form values back into the ranges the engine expects."""
    tier = ad_spend_tier if ad_spend_tier is not None else params.ad_spend_tier
    if tier not in params.ad_spend_tiers:
        tier = DEFAULT_AD_SPEND_TIER
    return ClampedInputs(
        time_frame_months=int(clamp(int(time_frame_months), MIN_TIME_FRAME_MONTHS, MAX_TIME_FRAME_MONTHS)),
        ad_spend_tier=tier,
    )
