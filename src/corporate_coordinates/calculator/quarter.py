"""
CORPORATE COORDINATES - Quarter Calculator

Maps one fixed-offset instant to its position within the calendar quarter.

Rules:
1. quarter = ceil(month / 3), fiscal year starts January 1
2. Quarter boundaries are local midnights in the instant's own offset
3. Whole-day differences truncate toward zero
4. days_left_in_quarter counts today and the last day (+1)
5. days_in_quarter has no +1, one short of the days_left convention
6. weeks_in_quarter is the nominal constant, never computed

Pure function. No clock access, no I/O.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from corporate_coordinates.clock import to_fixed_offset
from corporate_coordinates.config import QuarterConfig
from corporate_coordinates.types import CorporateCoordinates

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def quarter_of_month(month: int, months_per_quarter: int = 3) -> int:
    """1-based calendar month -> 1-based quarter."""
    return math.ceil(month / months_per_quarter)


def whole_days_between(later: datetime, earlier: datetime) -> int:
    """
    Signed count of whole days from earlier to later.

    Partial days are dropped toward zero, so a gap of minus sixteen hours
    is 0 days, not -1 (timedelta.days would floor it).
    """
    delta = later - earlier
    days = abs(delta) // _ONE_DAY
    return days if delta >= timedelta(0) else -days


def compute_coordinates(
    now: datetime,
    config: QuarterConfig | None = None,
) -> CorporateCoordinates:
    """
    Compute the quarter coordinates of an instant.

    Args:
        now: Timezone-aware instant. Its UTC offset is frozen for all arithmetic.
        config: Quarter constants (default: QuarterConfig()).

    Returns:
        CorporateCoordinates with generation_time == now.
    """
    config = config or QuarterConfig()
    local = to_fixed_offset(now)
    tz = local.tzinfo

    quarter = quarter_of_month(local.month, config.months_per_quarter)
    start_of_year = datetime(local.year, 1, 1, tzinfo=tz)
    start_of_quarter = start_of_year + relativedelta(
        months=(quarter - 1) * config.months_per_quarter
    )
    # day=31 clamps to the last day of the final month (Mar 31, Jun 30, ...)
    end_of_quarter = start_of_quarter + relativedelta(
        months=config.months_per_quarter - 1, day=31
    )

    logger.debug(
        f"{local.isoformat()} -> Q{quarter} "
        f"[{start_of_quarter.isoformat()} .. {end_of_quarter.isoformat()}]"
    )

    return CorporateCoordinates(
        generation_time=now,
        year=str(local.year),
        quarter=quarter,
        start_of_quarter=start_of_quarter,
        end_of_quarter=end_of_quarter,
        full_week_of_quarter_done=(
            whole_days_between(now, start_of_quarter) // config.days_per_week
        ),
        weeks_in_quarter=config.weeks_in_quarter,
        days_left_in_quarter=whole_days_between(end_of_quarter, now) + 1,
        days_in_quarter=whole_days_between(end_of_quarter, start_of_quarter),
    )
