"""
Cadence helpers.

Clients treat a cadence as an opaque cron string and only format it for
display. Validation and trigger construction are used by the backend.
"""

from __future__ import annotations

from typing import Callable

from apscheduler.triggers.cron import CronTrigger

CadenceFormatter = Callable[[str], str]

_DAY_OF_WEEK_LABELS = {
    "1-5": "Weekdays",
    "0,6": "Weekends",
    "*": "Daily",
}

_CRON_DAY_NAMES = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]


def format_cadence(cadence: str) -> str:
    """Short human label for a five-field cron cadence.

    ``"0 9 * * 1-5"`` becomes ``"9:00 on Weekdays"``. Anything the formatter
    does not recognise is returned unchanged.
    """
    parts = cadence.split(" ")
    if len(parts) != 5:
        return cadence

    minute, hour, _day, _month, day_of_week = parts
    day_display = _DAY_OF_WEEK_LABELS.get(day_of_week, day_of_week)

    if "," in hour:
        time_display = ", ".join(f"{h}:{minute.rjust(2, '0')}" for h in hour.split(","))
    elif hour != "*":
        time_display = f"{hour}:{minute.rjust(2, '0')}"
    else:
        time_display = ""

    if time_display and day_display != "Daily":
        return f"{time_display} on {day_display}"
    return cadence


def build_trigger(cadence: str, timezone: str | None = None) -> CronTrigger:
    """Build an APScheduler trigger; raises ValueError for invalid cadences.

    The day-of-week field uses cron numbering (0 or 7 is Sunday) and is
    rewritten to APScheduler's (0 is Monday) before the trigger is built.
    """
    fields = cadence.split()
    if len(fields) != 5:
        raise ValueError(f"Wrong number of fields; got {len(fields)}, expected 5")
    fields[4] = _to_scheduler_days(fields[4])
    return CronTrigger.from_crontab(" ".join(fields), timezone=timezone)


def is_valid_cadence(cadence: str) -> bool:
    try:
        build_trigger(cadence)
    except ValueError:
        return False
    return True


def _cron_day(token: str) -> int:
    name = token.lower()
    if name in _CRON_DAY_NAMES:
        return _CRON_DAY_NAMES.index(name)
    if not token.isdigit() or int(token) > 7:
        raise ValueError(f"Invalid day of week '{token}'")
    return int(token)


def _expand_cron_days(element: str) -> set[int]:
    base, slash, step_text = element.partition("/")
    step = int(step_text) if step_text.isdigit() and int(step_text) > 0 else None
    if slash and step is None:
        raise ValueError(f"Invalid step in day of week '{element}'")

    if base in ("*", "?"):
        first, last = 0, 6
    elif "-" in base:
        start, end = base.split("-", 1)
        first, last = _cron_day(start), _cron_day(end)
        if last == 0 and first > 0:
            last = 7
        if first > last:
            raise ValueError(f"Invalid day of week range '{base}'")
    else:
        first = _cron_day(base)
        last = max(first, 6) if step else first

    return {day % 7 for day in range(first, last + 1, step or 1)}


def _to_scheduler_days(field: str) -> str:
    """Rewrite a cron day-of-week field as an APScheduler weekday list."""
    if field in ("*", "?"):
        return "*"
    days: set[int] = set()
    for element in field.split(","):
        days |= _expand_cron_days(element)
    return ",".join(str(day) for day in sorted((day - 1) % 7 for day in days))
