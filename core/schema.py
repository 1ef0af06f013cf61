from __future__ import annotations

from typing import Dict, Tuple

# Daily ad-spend tiers offered by the calculator ($/day per crew).
AD_SPEND_TIERS: Dict[str, float] = {
    "Aggressive": 75.0,
    "Moderate": 50.0,
    "Conservative": 30.0,
}
DEFAULT_AD_SPEND_TIER = "Moderate"

# Lead economics (UT reference: $36/day => ~1 lead/day => 0.5 bookings/day)
COST_PER_LEAD = 36.0
CLOSE_RATE = 0.5

MAX_CREWS = 4

# Fixed business-week-to-month conversion (30/7 ~ 4.3 weeks per month)
DAYS_PER_MONTH = 30
WEEKS_PER_MONTH = DAYS_PER_MONTH / 7.0
SEASONAL_HORIZON_DAYS = 360

# Caller-side slider bounds
MIN_TIME_FRAME_MONTHS = 3
MAX_TIME_FRAME_MONTHS = 24

# Ad spend ramp on poor-workability months
AD_SPEND_CUTOFF = 0.3
AD_SPEND_FULL = 0.5
AD_SPEND_RAMP_CAP = 0.5

# Index 0 is the reference month used by every seasonality table.
MONTH_COLUMNS: Tuple[str, ...] = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

SCALING_MODES: Tuple[str, ...] = ("simulated", "closed_form")
