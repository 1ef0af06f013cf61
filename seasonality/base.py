"""
Base classes for seasonality lookups.
The engine only sees SeasonalityTable; where the numbers come from is a provider concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from core.utils import month_index_for_day


@dataclass(frozen=True)
class SeasonalityTable:
    """
    Twelve monthly workability scores for one region.

    multipliers[0] is January. Each score is in [0, 1] and scales both the
    ad spend that is worth running and the revenue recognized in that month.
    workable_weeks is the region's yearly summary shown next to the chart.
    """

    region: str
    multipliers: Tuple[float, ...]
    workable_weeks: int

    def __post_init__(self) -> None:
        if len(self.multipliers) != 12:
            raise ValueError(
                f"Seasonality table for {self.region!r} needs 12 multipliers, "
                f"got {len(self.multipliers)}."
            )
        clipped = tuple(float(np.clip(m, 0.0, 1.0)) for m in self.multipliers)
        object.__setattr__(self, "multipliers", clipped)

    def multiplier(self, month_index: int) -> float:
        return self.multipliers[int(month_index) % 12]

    def multiplier_for_day(self, day: int, start_month_index: int = 0) -> float:
        return self.multiplier(month_index_for_day(day, start_month_index))

    @classmethod
    def from_scores(
        cls,
        region: str,
        scores: Sequence[float],
        workable_weeks: Optional[int] = None,
    ) -> "SeasonalityTable":
        """Build a table, deriving workable weeks from the scores when not given."""
        scores = tuple(float(s) for s in scores)
        if workable_weeks is None:
            workable_weeks = estimate_workable_weeks(scores)
        return cls(region=region, multipliers=scores, workable_weeks=int(workable_weeks))


def estimate_workable_weeks(scores: Sequence[float]) -> int:
    """~52/12 weeks per month, weighted by each month's workability."""
    clipped = np.clip(np.asarray(scores, dtype=float), 0.0, 1.0)
    return int(round(float(clipped.sum()) * 52.0 / 12.0))


def multiplier_for_day(
    seasonality: Optional[SeasonalityTable], day: int, start_month_index: int = 0
) -> float:
    """Multiplier for a simulation day; no table means a flat 1.0."""
    if seasonality is None:
        return 1.0
    return seasonality.multiplier_for_day(day, start_month_index)


def normalize_region_key(region_key: object) -> str:
    """
    ZIP codes collapse to their 3-digit prefix ("30301" and "30301-1234" -> "303").
    A 4-digit key is a ZIP that lost its leading zero ("2134" -> "021"); a
    3-digit key is already a prefix. Any other key is stripped and upper-cased.
    """
    key = str(region_key).strip()
    digits = key.split("-")[0]
    if digits.isdigit() and len(digits) >= 3:
        if len(digits) == 4:
            return digits.zfill(5)[:3]
        return digits[:3]
    return key.upper()


class SeasonalityProvider:
    """Interface for region -> SeasonalityTable lookups."""

    def lookup(self, region_key: object) -> Optional[SeasonalityTable]:
        raise NotImplementedError

    def regions(self) -> Tuple[str, ...]:
        return ()
