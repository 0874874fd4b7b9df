"""Header date and time normalisation."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Callable


def format_date(moment: date) -> str:
    """``DDMMYY``."""
    return f"{moment.day:02d}{moment.month:02d}{moment.year % 100:02d}"


def format_time(moment: datetime | time) -> str:
    """``HHmm``, 24-hour clock."""
    return f"{moment.hour:02d}{moment.minute:02d}"


def _is_formatted(value: Any, length: int) -> bool:
    return isinstance(value, str) and len(value) == length


def normalise_header_moment(
    date_value: Any,
    time_value: Any,
    clock: Callable[[], datetime],
) -> tuple[str, str]:
    """Resolve the header's ``(date, time)`` pair into their fixed-width text.

    The reference moment is the explicit time when it carries a date, then the
    explicit date, then ``clock()``. A date that is not already six characters
    is formatted from it. Time stays blank unless given; a time object is
    formatted as ``HHmm``.
    """
    if not _is_formatted(date_value, 6):
        if isinstance(time_value, datetime):
            reference: date = time_value
        elif isinstance(date_value, date):
            reference = date_value
        else:
            reference = clock()
        date_value = format_date(reference)

    if not time_value:
        time_value = ""
    elif not _is_formatted(time_value, 4):
        time_value = format_time(time_value)

    return date_value, time_value
