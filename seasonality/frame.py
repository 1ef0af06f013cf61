"""
FrameSeasonalityProvider — seasonality tables held in a pandas DataFrame.

Expected layout (one row per region):

    region | jan | feb | ... | dec | workable_weeks (optional)

Rows with a missing workable_weeks value get one derived from the monthly
scores (see base.estimate_workable_weeks).
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from core.schema import MONTH_COLUMNS
from core.utils import require_columns

from .base import SeasonalityProvider, SeasonalityTable, normalize_region_key

logger = logging.getLogger(__name__)


class FrameSeasonalityProvider(SeasonalityProvider):

    def __init__(self, frame: pd.DataFrame):
        require_columns(frame, ("region",) + MONTH_COLUMNS)
        out = frame.copy()
        out["region"] = out["region"].map(normalize_region_key)
        for col in MONTH_COLUMNS:
            out[col] = pd.to_numeric(out[col], errors="coerce")

        bad = out[list(MONTH_COLUMNS)].isna().any(axis=1)
        if bad.any():
            raise ValueError(
                f"{int(bad.sum())} seasonality rows have missing or non-numeric monthly scores: "
                f"{out.loc[bad, 'region'].tolist()}"
            )

        out[list(MONTH_COLUMNS)] = np.clip(out[list(MONTH_COLUMNS)].to_numpy(dtype=float), 0.0, 1.0)
        if "workable_weeks" in out.columns:
            out["workable_weeks"] = pd.to_numeric(out["workable_weeks"], errors="coerce")
        else:
            out["workable_weeks"] = np.nan

        self._frame = out.drop_duplicates(subset="region", keep="last").set_index("region")
        logger.debug("Loaded seasonality for %d regions", len(self._frame))

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame.copy()

    def lookup(self, region_key: object) -> Optional[SeasonalityTable]:
        key = normalize_region_key(region_key)
        if key not in self._frame.index:
            logger.debug("No seasonality data for region %r", region_key)
            return None
        row = self._frame.loc[key]
        weeks = row["workable_weeks"]
        return SeasonalityTable.from_scores(
            key,
            [float(row[c]) for c in MONTH_COLUMNS],
            workable_weeks=None if pd.isna(weeks) else int(weeks),
        )

    def regions(self) -> Tuple[str, ...]:
        return tuple(sorted(self._frame.index))
