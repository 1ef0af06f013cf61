"""
Piecewise-linear sampling over a Series (or a plain array of values).
Nothing here extrapolates: out-of-range requests clamp to the end samples.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .series import Series


def value_at(series: Series, x: float) -> float:
    """Cumulative value at a month fraction, clamped to the first/last sample."""
    n = len(series)
    if n == 0:
        return 0.0
    xs, ys = series.x, series.y
    if n == 1 or x <= xs[0]:
        return float(ys[0])
    if x >= xs[-1]:
        return float(ys[-1])
    return float(np.interp(x, xs, ys))


def fraction_at_crossing(values: Union[Series, Sequence[float]], threshold: float) -> float:
    """
    Fractional 0-based index where the values first reach `threshold`.

    Returns 0 when the first value is already there, and the last index when
    the threshold is never reached.
    """
    ys = values.y if isinstance(values, Series) else np.asarray(values, dtype=float)
    n = len(ys)
    if n == 0:
        return 0.0
    if ys[0] >= threshold:
        return 0.0
    hits = np.nonzero(ys >= threshold)[0]
    if hits.size == 0:
        return float(n - 1)
    i = int(hits[0])
    prev, curr = float(ys[i - 1]), float(ys[i])
    return (i - 1) + (threshold - prev) / (curr - prev)
