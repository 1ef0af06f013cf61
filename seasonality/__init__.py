"""
Seasonality — regional monthly workability scores consumed by the engine.
"""

from .base import (
    SeasonalityTable,
    SeasonalityProvider,
    multiplier_for_day,
    normalize_region_key,
)
from .static import NullSeasonalityProvider, StaticSeasonalityProvider
from .frame import FrameSeasonalityProvider

__all__ = [
    "SeasonalityTable",
    "SeasonalityProvider",
    "multiplier_for_day",
    "normalize_region_key",
    "NullSeasonalityProvider",
    "StaticSeasonalityProvider",
    "FrameSeasonalityProvider",
]
