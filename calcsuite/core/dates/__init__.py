# calcsuite/core/dates/__init__.py

from .anniversary import anniversaries, anniversary_on, today_in, years_of_service
from .business_days import (
    add_duration,
    is_non_working_day,
    last_working_day,
    notice_period_end_date,
    parse_holidays,
    probation_end_date,
    to_date,
)

__all__ = [
    "add_duration",
    "anniversaries",
    "anniversary_on",
    "is_non_working_day",
    "last_working_day",
    "notice_period_end_date",
    "parse_holidays",
    "probation_end_date",
    "to_date",
    "today_in",
    "years_of_service",
]
