"""
CORPORATE COORDINATES - Summary Presenter

Turns a CorporateCoordinates record into four human-readable lines.
Factual statements only, no localization.
"""

from __future__ import annotations

import sys
from typing import TextIO

from corporate_coordinates.config import PresenterConfig
from corporate_coordinates.types import CorporateCoordinates


def render_summary(
    coordinates: CorporateCoordinates,
    config: PresenterConfig | None = None,
) -> list[str]:
    """
    Render the quarter summary.

    Args:
        coordinates: Computed quarter coordinates.
        config: Date and percentage formats.

    Returns:
        Four lines: weeks done, quarter span, remaining share, generation time.
    """
    config = config or PresenterConfig()
    start = coordinates.start_of_quarter.strftime(config.date_format)
    end = coordinates.end_of_quarter.strftime(config.date_format)
    pct = f"{coordinates.percent_remaining:.{config.percent_decimals}f}%"

    return [
        f"We are {coordinates.full_week_of_quarter_done} weeks into {coordinates.label}.",
        f"The quarter started {start} and will end {end} "
        f"(each quarter is {coordinates.weeks_in_quarter} weeks).",
        f"There is {pct} of the quarter remaining "
        f"({coordinates.days_left_in_quarter} calendar days).",
        f"The time and date now is {coordinates.generation_time.isoformat()}.",
    ]


def print_summary(
    coordinates: CorporateCoordinates,
    config: PresenterConfig | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write the rendered summary, one line each, to stdout or the given stream."""
    out = stream or sys.stdout
    for line in render_summary(coordinates, config):
        print(line, file=out)
