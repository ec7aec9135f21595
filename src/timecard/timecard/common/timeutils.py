"""Minutes-based time arithmetic.

All helpers here are lenient: malformed input degrades to 0 instead of raising,
so form values can be passed through without pre-validation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import INVALID_WORK_MINUTES
from ..core.enums import InvalidReason


def _to_number(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _round_half_up(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def _to_int(part: str) -> int:
    try:
        return int(part.strip())
    except ValueError:
        return 0


def parse_time_to_minutes(hm: Optional[str]) -> int:
    """Parse ``HH:MM`` into minutes since midnight.

    ``""`` -> 0, ``"09"`` -> 540, ``"xx:30"`` -> 30. Out-of-range values are
    not checked.
    """
    parts = (hm or "00:00").split(":")
    hours = _to_int(parts[0])
    minutes = _to_int(parts[1]) if len(parts) > 1 else 0
    return hours * 60 + minutes


def hours_to_minutes(hours: Any) -> int:
    """Decimal hours -> minutes, rounded, never below 0; an overflowing product is 0."""
    return max(0, _round_half_up(_to_number(hours) * 60))


def parse_hours(text: Optional[str]) -> float:
    """Parse a decimal-hours form value (``"1.5"``); blank or junk -> 0.0."""
    return _to_number((text or "").strip() or 0)


def format_minutes(minutes: Any) -> str:
    safe = max(0, _round_half_up(_to_number(minutes)))
    return f"{safe // 60:02d}:{safe % 60:02d}"


@dataclass(frozen=True)
class WorkDuration:
    """Tagged worked-duration result: either ``minutes`` or a ``reason``."""

    minutes: Optional[int]
    reason: Optional[InvalidReason] = None

    @property
    def is_valid(self) -> bool:
        return self.minutes is not None

    def as_sentinel(self) -> int:
        return self.minutes if self.minutes is not None else INVALID_WORK_MINUTES


def calc_work_duration(start: Optional[str], end: Optional[str], break_minutes: Any) -> WorkDuration:
    if not start or not end:
        return WorkDuration(None, InvalidReason.MISSING_TIME)

    span = parse_time_to_minutes(end) - parse_time_to_minutes(start)
    if span < 0:
        return WorkDuration(None, InvalidReason.END_BEFORE_START)

    diff = span - int(break_minutes or 0)
    if diff < 0:
        return WorkDuration(None, InvalidReason.BREAK_EXCEEDS_SHIFT)
    return WorkDuration(diff)


def calc_work_minutes(start: Optional[str], end: Optional[str], break_minutes: Any) -> int:
    """Worked minutes, or -1 when the duration is not computable."""
    return calc_work_duration(start, end, break_minutes).as_sentinel()


def year_month(value: Optional[str]) -> Optional[tuple[int, int]]:
    """Split ``YYYY-MM`` (or ``YYYY-MM-DD``) into integers without any date parsing."""
    if not value:
        return None
    parts = value.split("-")
    if len(parts) < 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def month_of(date_str: Optional[str]) -> str:
    return (date_str or "")[:7]
