"""
Wall-clock time parsing and same-day time spans.

All comparisons in the booking core happen on integer minutes since
midnight, so no calendar, timezone, or locale-dependent parsing is involved.

Usage:
    start = parse_time_of_day("09:00")        # 540
    span = parse_time_span("09:00", "17:00")  # TimeSpan(start=540, end=1020)
    format_time_of_day(span.end)              # "17:00"
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
LAST_MINUTE_OF_DAY = MINUTES_PER_DAY - 1

_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_time_of_day(text: Any) -> Optional[int]:
    """Parse ``H:MM`` or ``HH:MM`` (24-hour) into minutes since midnight.

    Returns None for anything else: empty strings, missing colon,
    out-of-range hours or minutes, surrounding whitespace, or non-strings.
    Invalid input is never clamped or defaulted to midnight.
    """
    if not isinstance(text, str):
        return None
    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * MINUTES_PER_HOUR + minutes


def format_time_of_day(minutes: int) -> str:
    """Format minutes since midnight as zero-padded ``HH:MM``."""
    if not 0 <= minutes <= LAST_MINUTE_OF_DAY:
        raise ValueError(f"Minutes since midnight out of range: {minutes}")
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


@dataclass(frozen=True)
class TimeSpan:
    """A (start, end) pair of minutes since midnight on a single day.

    Construction does not enforce ordering; the booking validator is the
    gate that guarantees ``start < end`` for accepted spans.
    """

    start: int
    end: int

    @property
    def is_ordered(self) -> bool:
        return self.start < self.end

    @property
    def duration_minutes(self) -> int:
        """Length of the span, or 0 when it is not strictly ordered."""
        return self.end - self.start if self.is_ordered else 0

    def contains(self, other: "TimeSpan") -> bool:
        """True when ``other`` fits entirely inside this span (edges inclusive)."""
        return self.start <= other.start and other.end <= self.end

    def as_text(self) -> tuple[str, str]:
        return format_time_of_day(self.start), format_time_of_day(self.end)

    def __str__(self) -> str:
        start, end = self.as_text()
        return f"{start} - {end}"


def parse_time_span(start_text: Any, end_text: Any) -> Optional[TimeSpan]:
    """Parse both ends of a span. Returns None if either end is invalid."""
    start = parse_time_of_day(start_text)
    end = parse_time_of_day(end_text)
    if start is None or end is None:
        return None
    return TimeSpan(start=start, end=end)


def spans_overlap(a: TimeSpan, b: TimeSpan) -> bool:
    """
    Half-open interval overlap: [start, end)
    Overlap iff a.start < b.end AND b.start < a.end.
    Back-to-back is allowed (end == other.start is NOT overlap).
    """
    return a.start < b.end and b.start < a.end
