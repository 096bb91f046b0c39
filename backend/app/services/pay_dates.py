from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

SATURDAY = 5
SUNDAY = 6
SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class PayDayResult:
    next_pay_day: date
    days_until_pay_day: int


def _midnight(value: date) -> datetime:
    return datetime(value.year, value.month, value.day)


def _last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def _first_of_next_month(year: int, month: int) -> date:
    if month == 12:
        return date(year + 1, 1, 1)
    return date(year, month + 1, 1)


def _literal_date(month_start: date, day: int) -> date:
    # Day `day` counted from `month_start`; days past the month end spill into the next one.
    return month_start + timedelta(days=day - 1)


def normalize_pay_date(pay_day: int, month: int, year: int) -> date:
    """
    Map a nominal pay day onto the date it is actually paid in `month`.

    Only day 31 is moved off weekends: when the month is shorter, a Saturday
    month end pays on Friday and a Sunday month end pays on the 1st of the
    following month. Days 29/30 in February carry over into March.
    """
    if pay_day != 31:
        return _literal_date(date(year, month, 1), pay_day)

    last_day = _last_day_of_month(year, month)
    if last_day.day == 31:
        return last_day

    weekday = last_day.weekday()
    if weekday == SATURDAY:
        return last_day - timedelta(days=1)
    if weekday == SUNDAY:
        return _first_of_next_month(year, month)
    return last_day


def _rollover_pay_date(pay_day: int, now: datetime) -> date:
    # Literal (year, month + 1, pay_day), without the day-31 weekend shift.
    return _literal_date(_first_of_next_month(now.year, now.month), pay_day)


def compute_next_pay_day(pay_day: int, now: datetime) -> PayDayResult:
    """Return the next pay date on or after `now` and the whole days left until it."""
    next_pay_day = normalize_pay_date(pay_day, now.month, now.year)

    if _midnight(next_pay_day) < now:
        next_pay_day = _rollover_pay_date(pay_day, now)

    # Naive local wall-clock difference; a DST change in between is not counted.
    remaining = _midnight(next_pay_day) - now
    days_until = int(remaining.total_seconds() / SECONDS_PER_DAY) + 1

    return PayDayResult(next_pay_day=next_pay_day, days_until_pay_day=days_until)


def compute_remaining_pay_dates(pay_day: int, now: datetime) -> list[date]:
    """Pay dates from the current month through December that fall after `now`, oldest first."""
    dates: list[date] = []
    for month in range(now.month, 13):
        pay_date = normalize_pay_date(pay_day, month, now.year)
        if _midnight(pay_date) > now:
            dates.append(pay_date)
    return dates
