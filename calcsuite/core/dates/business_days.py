# calcsuite/core/dates/business_days.py
"""
Business-day aware date arithmetic for probation and notice periods.

A *business day* is any calendar day that is not a Saturday, a Sunday or a
listed holiday. Holidays match by calendar day only; a time-of-day carried by
an input entry is dropped.

Public API
----------
- to_date(value) -> date
- parse_holidays(text, strict=True) -> frozenset[date]
- is_non_working_day(day, holidays) -> bool
- add_duration(start, value, unit) -> date
- probation_end_date(start_date, duration, unit) -> date
- notice_period_end_date(resignation_date, duration, unit) -> date
- last_working_day(resignation_date, notice_duration, notice_unit, holidays) -> LastWorkingDayResult
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from calcsuite.core.errors import CalculatorError, InvalidHolidayError, UnknownUnitError
from calcsuite.schemas.models import DURATION_UNITS, LastWorkingDayResult

logger = logging.getLogger(__name__)

HolidaysLike = str | Iterable[date] | None

_ONE_DAY = timedelta(days=1)
_WEEKEND = (5, 6)  # Saturday, Sunday


def to_date(value: date | datetime | str) -> date:
    """Normalize a date, datetime or ISO-8601 string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError as e:
            raise ValueError(f"Unsupported date string format: {value!r}") from e
    raise TypeError(f"Unsupported type for date: {type(value)}")


def parse_holidays(text: str | None, *, strict: bool = True) -> frozenset[date]:
    """
    Parse a comma-separated list of ISO-8601 dates.

    Entries are trimmed and empty entries discarded. A malformed entry raises
    InvalidHolidayError when ``strict``; otherwise it is skipped with a warning.
    """
    out: set[date] = set()
    for raw in (text or "").split(","):
        entry = raw.strip()
        if not entry:
            continue
        try:
            out.add(to_date(entry))
        except ValueError as e:
            if strict:
                raise InvalidHolidayError(entry) from e
            logger.warning("skipping invalid holiday entry %r", entry)
    return frozenset(out)


def _coerce_holidays(holidays: HolidaysLike, *, strict: bool = True) -> frozenset[date]:
    if holidays is None:
        return frozenset()
    if isinstance(holidays, str):
        return parse_holidays(holidays, strict=strict)
    return frozenset(to_date(h) for h in holidays)


def is_non_working_day(day: date, holidays: Iterable[date] = ()) -> bool:
    """True for Saturdays, Sundays and listed holidays."""
    if day.weekday() in _WEEKEND:
        return True
    return day in holidays


def add_duration(start: date, value: int, unit: str) -> date:
    """
    Calendar addition of days, weeks or months (no business-day skipping).

    Month addition clamps to the last day of a shorter month (Jan 31 + 1 month -> Feb 28/29).
    """
    if value < 0:
        raise CalculatorError(f"duration must be >= 0, got {value}")
    if unit == "days":
        return start + timedelta(days=value)
    if unit == "weeks":
        return start + relativedelta(weeks=value)
    if unit == "months":
        return start + relativedelta(months=value)
    raise UnknownUnitError(unit, DURATION_UNITS)


def probation_end_date(start_date: date, duration: int, unit: str) -> date:
    """Last calendar day of a probation period starting on ``start_date``."""
    return add_duration(start_date, duration, unit) - _ONE_DAY


def notice_period_end_date(resignation_date: date, duration: int, unit: str) -> date:
    """Last calendar day of a notice period counted from ``resignation_date``."""
    return add_duration(resignation_date, duration, unit) - _ONE_DAY


def _add_working_days(start: date, count: int, holidays: frozenset[date]) -> date:
    """Walk forward from ``start`` (exclusive) until ``count`` working days have passed."""
    current = start
    counted = 0
    while counted < count:
        current += _ONE_DAY
        if not is_non_working_day(current, holidays):
            counted += 1
    return current


def last_working_day(
    resignation_date: date,
    notice_duration: int,
    notice_unit: str,
    holidays: HolidaysLike = None,
    *,
    strict_holidays: bool = True,
) -> LastWorkingDayResult:
    """
    Compute the notice-period end and the last working day.

    Rules:
      - unit "days" counts *working* days after the resignation date; the day
        the count is reached is both the notice end and the last working day.
      - units "weeks"/"months" add calendar time, then subtract one day.
      - the last working day then steps back over weekends and holidays, so
        for weeks/months it may fall before ``notice_period_end_date``.
      - holidays_observed counts holidays strictly after the resignation date
        and on or before the last working day.
    """
    if notice_unit not in DURATION_UNITS:
        raise UnknownUnitError(notice_unit, DURATION_UNITS)
    if notice_duration < 0:
        raise CalculatorError("notice_duration must be >= 0")

    resignation = to_date(resignation_date)
    holiday_set = _coerce_holidays(holidays, strict=strict_holidays)

    if notice_unit == "days":
        notice_end = _add_working_days(resignation, notice_duration, holiday_set)
    else:
        notice_end = notice_period_end_date(resignation, notice_duration, notice_unit)

    last_day = notice_end
    while is_non_working_day(last_day, holiday_set):
        last_day -= _ONE_DAY

    observed = sum(1 for h in holiday_set if resignation < h <= last_day)

    logger.debug(
        "notice %d %s from %s: end=%s last_working_day=%s holidays=%d",
        notice_duration,
        notice_unit,
        resignation,
        notice_end,
        last_day,
        observed,
    )
    return LastWorkingDayResult(
        notice_period_end_date=notice_end,
        last_working_day=last_day,
        holidays_observed=observed,
    )
