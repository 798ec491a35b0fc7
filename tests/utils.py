# tests/utils.py
"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any

from calcsuite.schemas.models import (
    AutoLoanInputs,
    DateDuration,
    LoanInputs,
    NoticeInputs,
    SavingsInputs,
)

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_PRINCIPAL = 50_000.0
DEFAULT_RATE_PCT = 7.5
DEFAULT_TERM_YEARS = 5
DEFAULT_PAYMENT = 1001.90  # 50k @ 7.5% over 5 years, rounded for display

# 2024-01-01 is a Monday
MONDAY_2024 = date(2024, 1, 1)

DEFAULT_HOLIDAYS = "2024-12-25, 2024-12-26"

# Canonical config payload used by loader and CLI tests
DEFAULT_CONFIG: dict[str, Any] = {
    "format": {"currency_symbol": "€", "decimals": 2, "date_format": "%d.%m.%Y"},
    "run": {"timezone": "Europe/Berlin", "strict_holidays": True},
    "holidays": DEFAULT_HOLIDAYS,
    "loan": {"principal": DEFAULT_PRINCIPAL, "annual_rate_percent": DEFAULT_RATE_PCT, "term_years": DEFAULT_TERM_YEARS},
    "probation": {"start_date": "2024-01-15", "probation": {"value": 3, "unit": "months"}},
    "notice": {"resignation_date": "2024-01-01", "notice": {"value": 5, "unit": "days"}},
}


# -----------------------------
# Factories
# -----------------------------


def make_loan_inputs(**overrides: Any) -> LoanInputs:
    data = {"principal": DEFAULT_PRINCIPAL, "annual_rate_percent": DEFAULT_RATE_PCT, "term_years": DEFAULT_TERM_YEARS}
    data.update(overrides)
    return LoanInputs(**data)


def make_auto_loan_inputs(**overrides: Any) -> AutoLoanInputs:
    data = {
        "car_price": 35_000.0,
        "down_payment": 5_000.0,
        "trade_in_value": 10_000.0,
        "annual_rate_percent": 6.5,
        "term_years": 5,
    }
    data.update(overrides)
    return AutoLoanInputs(**data)


def make_savings_inputs(**overrides: Any) -> SavingsInputs:
    data = {"initial_investment": 1_000.0, "monthly_contribution": 200.0, "annual_rate_percent": 5.0, "years": 10}
    data.update(overrides)
    return SavingsInputs(**data)


def make_notice_inputs(value: int = 5, unit: str = "days", holidays: str = "", start: date = MONDAY_2024) -> NoticeInputs:
    return NoticeInputs(resignation_date=start, notice=DateDuration(value=value, unit=unit), holidays=holidays)


def write_config(dirpath: Path, payload: dict[str, Any] | None = None, filename: str = "calcsuite.json") -> Path:
    """Write a JSON config into ``dirpath`` and return its path."""
    p = dirpath / filename
    p.write_text(json.dumps(payload if payload is not None else DEFAULT_CONFIG), encoding="utf-8")
    return p
