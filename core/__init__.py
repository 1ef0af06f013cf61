"""
Core package — schema constants, configuration, and shared numeric helpers.
No business logic lives here.
"""

from .schema import AD_SPEND_TIERS, MAX_CREWS, MONTH_COLUMNS
from .config import ProjectionConfig
from .utils import require_columns, round_to_nearest_half, month_index_for_day

__all__ = [
    "AD_SPEND_TIERS",
    "MAX_CREWS",
    "MONTH_COLUMNS",
    "ProjectionConfig",
    "require_columns",
    "round_to_nearest_half",
    "month_index_for_day",
]
