"""Shared fixtures for CORPORATE COORDINATES tests."""

import sys
from pathlib import Path

import pytest

# Ensure corporate_coordinates is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from corporate_coordinates.clock import FixedClock, parse_rfc3339


@pytest.fixture
def feb_1999():
    """Early Q1 1999, mid-afternoon UTC."""
    return parse_rfc3339("1999-02-01T16:39:57+00:00")


@pytest.fixture
def first_day_q2():
    return parse_rfc3339("1999-04-01T16:39:57+00:00")


@pytest.fixture
def last_day_q2():
    return parse_rfc3339("1999-06-30T16:39:57+00:00")


@pytest.fixture
def fixed_clock(feb_1999) -> FixedClock:
    return FixedClock(instant=feb_1999)
