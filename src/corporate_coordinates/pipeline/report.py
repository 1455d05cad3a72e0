"""
CORPORATE COORDINATES - Quarter Report Orchestration

Flow: clock -> calculate -> present

run() is the single entry point that touches the clock.
Everything after the clock read is pure.
"""

from __future__ import annotations

import logging
from datetime import datetime

from corporate_coordinates.calculator.quarter import compute_coordinates
from corporate_coordinates.clock import Clock, SystemClock
from corporate_coordinates.config import CoordinatesConfig
from corporate_coordinates.presenter.summary import render_summary
from corporate_coordinates.types import CorporateCoordinates

logger = logging.getLogger(__name__)


class QuarterReport:
    """
    Quarter position report.

    Orchestrates: clock -> calculate -> present
    """

    def __init__(
        self,
        clock: Clock | None = None,
        config: CoordinatesConfig | None = None,
    ) -> None:
        self.clock = clock or SystemClock()
        self.config = config or CoordinatesConfig()

    def run(self) -> CorporateCoordinates:
        """
        Read the clock once and compute the coordinates for that instant.

        Raises:
            ClockUnavailableError: the clock or its offset could not be read.
        """
        now = self.clock.now()
        return self.process(now)

    def process(self, now: datetime) -> CorporateCoordinates:
        """
        Compute coordinates for a given instant.

        Can be called independently for testing without a clock.
        """
        coordinates = compute_coordinates(now, self.config.quarter)
        logger.info(
            f"{coordinates.label}: week {coordinates.full_week_of_quarter_done} done, "
            f"{coordinates.days_left_in_quarter} of {coordinates.days_in_quarter} days left"
        )
        return coordinates

    def lines(self, coordinates: CorporateCoordinates) -> list[str]:
        """Summary text for the given coordinates."""
        return render_summary(coordinates, self.config.presenter)
