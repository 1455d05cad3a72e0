"""
CORPORATE COORDINATES - Clock Sources

The only module that reads the system clock.
Every instant handed out carries a frozen UTC offset (datetime.timezone),
never a timezone-rules object that could re-derive it later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Protocol

logger = logging.getLogger(__name__)


class ClockUnavailableError(RuntimeError):
    """The system clock or its local UTC offset could not be read."""


class Clock(Protocol):
    def now(self) -> datetime: ...


def to_fixed_offset(when: datetime) -> datetime:
    """
    Freeze the current UTC offset of an aware datetime.

    Args:
        when: Timezone-aware datetime (any tzinfo).

    Returns:
        The same instant and wall time, tagged with datetime.timezone(offset).
    """
    offset = when.utcoffset()
    if offset is None:
        raise ValueError(f"Naive datetime has no UTC offset: {when!r}")
    return when.replace(tzinfo=timezone(offset))


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC-3339 timestamp such as '1999-01-01T16:39:57+00:00'."""
    value = text.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"Timestamp '{text}' has no UTC offset")
    return to_fixed_offset(parsed)


class SystemClock:
    """Local wall clock, captured with its offset at the moment of reading."""

    def now(self) -> datetime:
        try:
            local = datetime.now().astimezone()
            fixed = to_fixed_offset(local)
        except (OSError, OverflowError, ValueError) as e:
            raise ClockUnavailableError(f"Cannot read local time and UTC offset: {e}") from e
        logger.debug(f"Clock read {fixed.isoformat()}")
        return fixed


@dataclass(frozen=True)
class FixedClock:
    """Clock that always returns the same instant. For tests and replays."""

    instant: datetime

    @classmethod
    def from_rfc3339(cls, text: str) -> "FixedClock":
        return cls(instant=parse_rfc3339(text))

    def now(self) -> datetime:
        return self.instant
