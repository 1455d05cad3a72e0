"""
CORPORATE COORDINATES command line.

Usage:
    corporate-coordinates
    python scripts/run_report.py
"""

from __future__ import annotations

import argparse
import logging
import sys

from corporate_coordinates.clock import Clock, ClockUnavailableError
from corporate_coordinates.pipeline.report import QuarterReport
from corporate_coordinates.presenter.summary import print_summary

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, clock: Clock | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print where the current moment sits within its calendar quarter",
    )
    parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    report = QuarterReport(clock=clock)
    try:
        coordinates = report.run()
    except ClockUnavailableError as e:
        logger.error(f"Clock read failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(coordinates, report.config.presenter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
