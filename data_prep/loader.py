from __future__ import annotations

import logging

import pandas as pd

from seasonality.frame import FrameSeasonalityProvider

logger = logging.getLogger(__name__)


def load_seasonality_csv(path: str) -> FrameSeasonalityProvider:
    """
    Load regional workability scores (region, jan..dec, optional workable_weeks).
    Everything is read as text so ZIP prefixes keep their leading zeros;
    the provider coerces the scores to numbers.
    """
    frame = pd.read_csv(path, dtype=str)
    frame.columns = [str(c).strip().lower() for c in frame.columns]
    logger.info("Read %d seasonality rows from %s", len(frame), path)
    return FrameSeasonalityProvider(frame)
