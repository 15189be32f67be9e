from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .validators import safe_date, safe_string


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now()


_CLOCK_PART = re.compile(r"[+-]?[0-9]+")


def _clock_part(part: str) -> Optional[int]:
    part = part.strip()
    if not _CLOCK_PART.fullmatch(part):
        return None
    return int(part)


def parse_clock(value: Any) -> Optional[int]:
    """Seconds since midnight for an ``HH:MM[:SS]`` string.

    Returns None when the value is unusable: blank, fewer than two
    components, a non-integer component, or a component out of range.
    Components must be ASCII digits with an optional sign.
    """
    s = safe_string(value)
    if not s:
        return None

    parts = s.split(":")
    if len(parts) < 2:
        return None

    hours = _clock_part(parts[0])
    minutes = _clock_part(parts[1])
    seconds = _clock_part(parts[2]) if len(parts) >= 3 else 0
    if hours is None or minutes is None or seconds is None:
        return None

    if not (0 <= hours <= 23 and 0 <= minutes <= 59 and 0 <= seconds <= 59):
        return None
    return hours * 3600 + minutes * 60 + seconds


def format_hms(total_seconds: float) -> str:
    """Zero-padded HH:MM:SS, flooring each unit."""
    hours = math.floor(total_seconds / 3600)
    minutes = math.floor((total_seconds % 3600) / 60)
    seconds = math.floor(total_seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


@dataclass(frozen=True)
class DateRange:
    """Inclusive YYYY-MM-DD window; unbounded when either end is missing."""

    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def from_args(cls, start: Optional[str], end: Optional[str]) -> "DateRange":
        start, end = safe_string(start), safe_string(end)
        if not start or not end:
            return cls()
        return cls(start=parse_iso_date(start), end=parse_iso_date(end))

    @property
    def bounded(self) -> bool:
        return self.start is not None and self.end is not None

    def contains(self, value: Any) -> bool:
        if not self.bounded:
            return True
        s = safe_date(value)
        if s is None:
            return False
        return self.start.isoformat() <= s[:10] <= self.end.isoformat()
