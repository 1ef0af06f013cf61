"""
In-memory providers: a null provider (no seasonal data anywhere) and a
mapping-backed provider for tables known at import time.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from .base import SeasonalityProvider, SeasonalityTable, normalize_region_key

logger = logging.getLogger(__name__)


class NullSeasonalityProvider(SeasonalityProvider):
    """Every region is flat: the engine runs with a multiplier of 1."""

    def lookup(self, region_key: object) -> Optional[SeasonalityTable]:
        return None


class StaticSeasonalityProvider(SeasonalityProvider):
    """Lookup over a fixed set of tables, keyed by normalized region."""

    def __init__(self, tables: Iterable[SeasonalityTable]):
        self._tables: Dict[str, SeasonalityTable] = {}
        for table in tables:
            key = normalize_region_key(table.region)
            if key in self._tables:
                logger.debug("Duplicate seasonality region %s, keeping the last table", key)
            self._tables[key] = table

    def lookup(self, region_key: object) -> Optional[SeasonalityTable]:
        table = self._tables.get(normalize_region_key(region_key))
        if table is None:
            logger.debug("No seasonality data for region %r", region_key)
        return table

    def regions(self) -> Tuple[str, ...]:
        return tuple(sorted(self._tables))

    def __len__(self) -> int:
        return len(self._tables)
