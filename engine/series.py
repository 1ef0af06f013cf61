"""
Series — the engine's output: one (month-fraction, cumulative cash) sample per day.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import numpy as np
import pandas as pd

from core.schema import DAYS_PER_MONTH


def _frozen(values: Sequence[float]) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Series:
    """
    x is the month fraction (day / 30), y the cumulative cash flow.

    Arrays are copied on construction and marked read-only.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = _frozen(self.x)
        y = _frozen(self.y)
        if x.shape != y.shape or x.ndim != 1:
            raise ValueError(f"x and y must be 1-D arrays of equal length, got {x.shape} and {y.shape}")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_cumulative(cls, cumulative: Sequence[float]) -> "Series":
        """Samples for days 1..n from a cumulative cash array."""
        days = np.arange(1, len(cumulative) + 1, dtype=float)
        return cls(x=days / DAYS_PER_MONTH, y=np.asarray(cumulative, dtype=float))

    def __len__(self) -> int:
        return int(self.x.shape[0])

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return zip(self.x.tolist(), self.y.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return np.array_equal(self.x, other.x) and np.array_equal(self.y, other.y)

    @property
    def days(self) -> np.ndarray:
        return np.arange(1, len(self) + 1)

    @property
    def first(self) -> Tuple[float, float]:
        return float(self.x[0]), float(self.y[0])

    @property
    def last(self) -> Tuple[float, float]:
        return float(self.x[-1]), float(self.y[-1])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"day": self.days, "month": self.x, "cumulative": self.y})
