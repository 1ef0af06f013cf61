"""
Break-even detection on a cumulative cash series.

Break-even is the first point at which cumulative cash is non-negative.
The day is refined by linear interpolation between the last negative sample
and the first non-negative one, then shown in half-week steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from core.utils import round_to_nearest_half
from engine.series import Series


@dataclass(frozen=True)
class BreakEven:
    day: float            # fractional 1-based day
    weeks: float          # day / 7
    display_weeks: float  # rounded to the half-week for display

    @property
    def reached(self) -> bool:
        return True

    @property
    def label(self) -> str:
        return f"{self.display_weeks:g} weeks"


@dataclass(frozen=True)
class NotReached:
    horizon_days: int
    final_cumulative: float

    @property
    def reached(self) -> bool:
        return False

    @property
    def label(self) -> str:
        return "Not reached"


BreakEvenResult = Union[BreakEven, NotReached]


def break_even(series: Series) -> BreakEvenResult:
    ys = series.y
    hits = np.nonzero(ys >= 0.0)[0]
    if hits.size == 0:
        final = float(ys[-1]) if len(ys) else 0.0
        return NotReached(horizon_days=len(ys), final_cumulative=final)

    i = int(hits[0])
    if i == 0:
        day = 1.0
    else:
        prev, curr = float(ys[i - 1]), float(ys[i])
        # sample i is day i + 1; the crossing lies between day i and day i + 1
        day = i + (0.0 - prev) / (curr - prev)

    weeks = day / 7.0
    return BreakEven(day=day, weeks=weeks, display_weeks=round_to_nearest_half(weeks))
