"""
CORPORATE COORDINATES - Configuration & Constants

Single source of truth for the quarter constants and display formats.
All values are named, documented, and centralized.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuarterConfig:
    """Calendar quarter constants."""

    months_per_quarter: int = 3
    days_per_week: int = 7
    weeks_in_quarter: int = 13  # Nominal display value, never derived from day count


@dataclass(frozen=True)
class PresenterConfig:
    """Summary text formats."""

    date_format: str = "%A, %d %B"  # e.g. "Wednesday, 01 January"
    percent_decimals: int = 2


@dataclass(frozen=True)
class CoordinatesConfig:
    """Master configuration for CORPORATE COORDINATES."""

    quarter: QuarterConfig = QuarterConfig()
    presenter: PresenterConfig = PresenterConfig()
