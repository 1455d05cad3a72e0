"""
CORPORATE COORDINATES - Core Type Definitions

The single output record of the quarter calculator.
No date arithmetic here, only data and read-only views of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CorporateCoordinates:
    """Position of one instant within its calendar quarter. Immutable."""

    generation_time: datetime
    year: str
    quarter: int  # 1..4
    start_of_quarter: datetime  # Midnight, first day of the quarter
    end_of_quarter: datetime  # Midnight, last day of the quarter
    full_week_of_quarter_done: int
    weeks_in_quarter: int
    days_left_in_quarter: int  # Inclusive of today and the last day
    days_in_quarter: int  # Start to end, exclusive of one endpoint

    @property
    def label(self) -> str:
        return f"Q{self.quarter}, {self.year}"

    @property
    def percent_remaining(self) -> float:
        """Days left as a percentage of days in quarter (can exceed 100 on day one)."""
        return self.days_left_in_quarter / self.days_in_quarter * 100.0

    def to_dict(self) -> dict:
        """Field name to value, timestamps as ISO-8601 text. Dashboard table rows."""
        return {
            "generation_time": self.generation_time.isoformat(),
            "year": self.year,
            "quarter": self.quarter,
            "start_of_quarter": self.start_of_quarter.isoformat(),
            "end_of_quarter": self.end_of_quarter.isoformat(),
            "full_week_of_quarter_done": self.full_week_of_quarter_done,
            "weeks_in_quarter": self.weeks_in_quarter,
            "days_left_in_quarter": self.days_left_in_quarter,
            "days_in_quarter": self.days_in_quarter,
        }
