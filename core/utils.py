from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

import pandas as pd

from .schema import DAYS_PER_MONTH


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def safe_div(num: float, den: float) -> float:
    """Division that yields 0.0 instead of raising on a zero denominator."""
    if den == 0:
        return 0.0
    return num / den


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def month_index_for_day(day: int, start_month_index: int) -> int:
    """Calendar month (0-11) of a 1-based simulation day, using 30-day months."""
    return (int(start_month_index) + (int(day) - 1) // DAYS_PER_MONTH) % 12


def round_to_nearest_half(weeks: float) -> float:
    """
    Display rounding for week counts.

    Fractional part <= 0.55 rounds to the half-week (3.54 -> 3.5),
    anything above rounds up to the next whole week (3.56 -> 4.0).
    """
    whole = math.floor(weeks)
    if weeks - whole <= 0.55:
        return whole + 0.5
    return float(math.ceil(weeks))


def lookup_tier(tiers: Mapping[str, Any], tier: str, default: float = 0.0) -> float:
    value = tiers.get(tier)
    if value is None:
        return default
    return float(value)
