# calcsuite/core/dates/anniversary.py

from __future__ import annotations

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from calcsuite.core.errors import CalculatorError
from calcsuite.schemas.models import Anniversary, AnniversaryProjection

logger = logging.getLogger(__name__)

PAST_WINDOW = 5
UPCOMING_WINDOW = 5


def today_in(timezone: str = "UTC") -> date:
    """Current calendar date in the given IANA zone."""
    return datetime.now(tz=ZoneInfo(timezone)).date()


def years_of_service(hire_date: date, today: date) -> int:
    """
    Full calendar years elapsed between hire_date and today (floor).

    A year counts once today's (month, day) reaches the hire (month, day); a
    Feb 29 hire completes its year on Mar 1 in common years.
    """
    years = today.year - hire_date.year
    if (today.month, today.day) < (hire_date.month, hire_date.day):
        years -= 1
    return years


def anniversary_on(hire_date: date, year: int) -> date:
    """The ``year``-th anniversary; a Feb 29 hire date falls on Feb 28 in common years."""
    return hire_date + relativedelta(years=year)


def anniversaries(hire_date: date, today: date | None = None, *, timezone: str = "UTC") -> AnniversaryProjection:
    """
    Project work anniversaries around ``today``.

    - total_years_of_service: full years since hire.
    - next_anniversary: anniversary number total + 1, with days_until.
    - past: up to 5 most recent anniversaries (number > 0), oldest first, with days_ago.
    - upcoming: anniversaries total + 1 .. total + 5 in order, with days_until;
      the first one is the next anniversary.
    """
    ref = today if today is not None else today_in(timezone)
    if hire_date > ref:
        raise CalculatorError(f"hire_date {hire_date.isoformat()} is after the reference date {ref.isoformat()}")

    total = years_of_service(hire_date, ref)

    next_date = anniversary_on(hire_date, total + 1)
    next_anniversary = Anniversary(year=total + 1, anniversary_date=next_date, days_until=(next_date - ref).days)

    past: list[Anniversary] = []
    for i in range(PAST_WINDOW):
        year = total - i
        if year <= 0:
            break
        d = anniversary_on(hire_date, year)
        past.insert(0, Anniversary(year=year, anniversary_date=d, days_ago=(ref - d).days))

    upcoming: list[Anniversary] = []
    for i in range(1, UPCOMING_WINDOW + 1):
        year = total + i
        d = anniversary_on(hire_date, year)
        upcoming.append(Anniversary(year=year, anniversary_date=d, days_until=(d - ref).days))

    logger.debug("hire=%s today=%s years=%d next=%s", hire_date, ref, total, next_date)
    return AnniversaryProjection(
        hire_date=hire_date,
        today=ref,
        total_years_of_service=total,
        next_anniversary=next_anniversary,
        past=past,
        upcoming=upcoming,
    )
