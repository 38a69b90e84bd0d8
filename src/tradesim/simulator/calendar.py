"""Business-day calendar helpers for simulation runs."""

from __future__ import annotations

import calendar
import math
from datetime import date, datetime, timedelta

from tradesim.simulator.models import TradingDay

WEEKEND = {5, 6}


def as_date(value: date | datetime | str) -> date:
    """Normalize a date-like value, dropping any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError as exc:
        raise ValueError(f"Invalid date: {value}") from exc


def month_abbr(day: date) -> str:
    return calendar.month_abbr[day.month]


def day_label(day: date) -> str:
    return f"{month_abbr(day)} {day.day} {day.year}"


def month_key(day: date) -> str:
    return f"{month_abbr(day)} {day.year}"


def week_number(day: date) -> int:
    # Sunday-based offset of January 1st, weeks counted from 1.
    first_day = date(day.year, 1, 1)
    first_weekday = (first_day.weekday() + 1) % 7
    past_days = (day - first_day).days
    return math.ceil((past_days + first_weekday + 1) / 7)


def week_key(day: date) -> str:
    return f"Week {week_number(day)}, {day.year}"


def is_trading_day(day: date) -> bool:
    return day.weekday() not in WEEKEND


def generate_trading_days(start: date | datetime, end: date | datetime) -> list[TradingDay]:
    start_day = as_date(start)
    end_day = as_date(end)
    days: list[TradingDay] = []
    current = start_day
    while current <= end_day:
        if is_trading_day(current):
            days.append(
                TradingDay(
                    label=day_label(current),
                    month=month_key(current),
                    week=week_key(current),
                    day=current,
                )
            )
        current += timedelta(days=1)
    return days


def count_weekdays(start: date | datetime, end: date | datetime) -> int:
    start_day = as_date(start)
    end_day = as_date(end)
    if end_day < start_day:
        return 0
    total = (end_day - start_day).days + 1
    full_weeks, remainder = divmod(total, 7)
    count = full_weeks * 5
    for offset in range(remainder):
        if is_trading_day(start_day + timedelta(days=full_weeks * 7 + offset)):
            count += 1
    return count


def estimate_trading_days(start: date | datetime, end: date | datetime) -> int:
    """Rough weekday estimate shown next to the settings form."""
    start_day = as_date(start)
    end_day = as_date(end)
    if end_day < start_day:
        return 0
    day_diff = (end_day - start_day).days
    return max(1, round(day_diff / 7 * 5))
