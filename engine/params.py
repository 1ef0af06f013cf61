"""
Business inputs for the projection engine.

Everything the calculator's form used to hold in component state is an
explicit, frozen value object here. The engine reads these and never mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Tuple

from core.schema import (
    AD_SPEND_TIERS,
    CLOSE_RATE,
    COST_PER_LEAD,
    DEFAULT_AD_SPEND_TIER,
    MAX_CREWS,
)
from core.utils import lookup_tier


@dataclass(frozen=True)
class AggressionProfile:
    """
    A named scaling posture.

    job_threshold:     completed jobs per crew (since the last crew addition) that
                       justify adding another crew
    payout_delay_days: days before the final (non-deposit) payment is recognized
    weeks_booked:      booked-out target used by the closed-form trigger
    """

    name: str
    job_threshold: float
    payout_delay_days: int
    weeks_booked: float
    color: str = "blue"

    @property
    def label(self) -> str:
        return f"{self.name} ({self.weeks_booked:g} wks)"


AGGRESSIVE = AggressionProfile("Aggressive", job_threshold=8, payout_delay_days=28, weeks_booked=4, color="red")
MODERATE = AggressionProfile("Moderate", job_threshold=16, payout_delay_days=42, weeks_booked=8, color="yellow")
CONSERVATIVE = AggressionProfile("Conservative", job_threshold=20, payout_delay_days=56, weeks_booked=10, color="green")

AGGRESSION_PROFILES: Tuple[AggressionProfile, ...] = (AGGRESSIVE, MODERATE, CONSERVATIVE)


def get_profile(name: str) -> AggressionProfile:
    for profile in AGGRESSION_PROFILES:
        if profile.name.lower() == str(name).strip().lower():
            return profile
    raise KeyError(f"Unknown aggression profile: {name!r}")


@dataclass(frozen=True)
class BusinessParameters:
    base_jobs_per_week_per_crew: float = 2.0
    gross_revenue_per_job: float = 6250.0
    average_cost_per_job: float = 2400.0
    deposit_fraction: float = 0.5
    fixed_daily_overhead: float = 20.0
    startup_cost: float = 15_000.0

    # lead funnel
    cost_per_lead: float = COST_PER_LEAD
    close_rate: float = CLOSE_RATE
    ad_spend_tiers: Dict[str, float] = field(default_factory=lambda: dict(AD_SPEND_TIERS))
    ad_spend_tier: str = DEFAULT_AD_SPEND_TIER

    max_crews: int = MAX_CREWS
    payout_delay_days: int = 42

    @property
    def net_revenue_per_job(self) -> float:
        return self.gross_revenue_per_job - self.average_cost_per_job

    @property
    def deposit_per_job(self) -> float:
        return self.gross_revenue_per_job * self.deposit_fraction

    @property
    def final_payment_per_job(self) -> float:
        return self.net_revenue_per_job - self.deposit_per_job

    @property
    def daily_ad_spend(self) -> float:
        """Selected tier's daily amount for one crew; unknown tiers spend nothing."""
        return lookup_tier(self.ad_spend_tiers, self.ad_spend_tier)

    def with_profile(self, profile: AggressionProfile) -> "BusinessParameters":
        return replace(self, payout_delay_days=int(profile.payout_delay_days))


@dataclass(frozen=True)
class JobCostModel:
    """
    Per-job economics as a contractor quotes them (square footage, labour,
    materials), rolled up into BusinessParameters.
    """

    job_size_sqft: float = 1800.0
    price_per_sqft: float = 3.75
    labor_cost_per_hour: float = 48.0
    job_hours: float = 21.0
    materials_cost: float = 1526.0
    marketing_cost: float = 180.0
    base_jobs_per_week: float = 2.5
    equipment_cost: float = 4800.0
    license_fee: float = 10_000.0

    @property
    def gross_revenue_per_job(self) -> float:
        return self.job_size_sqft * self.price_per_sqft

    @property
    def labor_cost_per_job(self) -> float:
        return self.job_hours * self.labor_cost_per_hour

    @property
    def average_cost_per_job(self) -> float:
        return self.labor_cost_per_job + self.materials_cost + self.marketing_cost

    @property
    def startup_cost(self) -> float:
        return self.equipment_cost + self.license_fee

    def to_parameters(self, **overrides) -> BusinessParameters:
        values = dict(
            base_jobs_per_week_per_crew=self.base_jobs_per_week,
            gross_revenue_per_job=self.gross_revenue_per_job,
            average_cost_per_job=self.average_cost_per_job,
            startup_cost=self.startup_cost,
        )
        values.update(overrides)
        return BusinessParameters(**values)


@dataclass(frozen=True)
class CrewSchedule:
    """
    1-based days on which an additional crew becomes active.

    Days are kept sorted and unique, so adding the same day twice is a no-op.
    Entries past the crew cap are kept but have no effect (see crew_count).
    """

    days: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", tuple(sorted({int(d) for d in self.days})))

    @classmethod
    def of(cls, days: Iterable[int]) -> "CrewSchedule":
        return cls(days=tuple(days))

    def add(self, day: int) -> "CrewSchedule":
        if int(day) in self.days:
            return self
        return CrewSchedule(days=self.days + (int(day),))

    def crew_count(self, day: int, max_crews: int = MAX_CREWS) -> int:
        active = sum(1 for a in self.days if a <= day)
        return min(1 + active, int(max_crews))

    @property
    def last_addition_day(self) -> int:
        return self.days[-1] if self.days else 0

    def __len__(self) -> int:
        return len(self.days)
