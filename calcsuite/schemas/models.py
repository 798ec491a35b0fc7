# calcsuite/schemas/models.py

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DurationUnit = Literal["days", "weeks", "months"]
DURATION_UNITS: tuple[str, ...] = ("days", "weeks", "months")

# =========================
# Calculator inputs
# =========================
# Inputs are typed but intentionally loose on ranges: degenerate values
# (zero principal, zero term) are answered by the engines with empty results.


class LoanInputs(BaseModel):
    """Fixed-rate loan parameters as entered on the loan form."""

    principal: float = Field(..., description="Amount borrowed (currency units).")
    annual_rate_percent: float = Field(..., description="Nominal annual rate in percent (e.g., 7.5 = 7.5%).")
    term_years: int = Field(..., description="Loan term in whole years; N = term_years * 12 monthly payments.")


class AutoLoanInputs(BaseModel):
    """Vehicle purchase; financed amount = price - down payment - trade-in."""

    car_price: float = Field(..., description="Vehicle purchase price.")
    down_payment: float = Field(0.0, description="Cash paid upfront.")
    trade_in_value: float = Field(0.0, description="Value credited for a traded-in vehicle.")
    annual_rate_percent: float = Field(..., description="Nominal annual rate in percent.")
    term_years: int = Field(..., description="Loan term in whole years.")

    @property
    def financed_amount(self) -> float:
        return self.car_price - self.down_payment - self.trade_in_value


class SavingsInputs(BaseModel):
    """Savings growth with a fixed monthly contribution."""

    initial_investment: float = Field(0.0, description="Balance at month 0.")
    monthly_contribution: float = Field(0.0, description="Deposit added at the end of every month.")
    annual_rate_percent: float = Field(..., description="Nominal annual return in percent, compounded monthly.")
    years: int = Field(..., description="Projection length in whole years.")


class DateDuration(BaseModel):
    """An amount of days, weeks or months."""

    value: int = Field(..., ge=0, description="Whole number of units.")
    unit: DurationUnit = Field("days", description='One of "days", "weeks", "months".')

    model_config = ConfigDict(frozen=True)


class ProbationInputs(BaseModel):
    """Employment start and probation length for the probation calculator."""

    start_date: date = Field(..., description="First day of employment.")
    probation: DateDuration = Field(..., description="Probation length in calendar days, weeks or months.")


class NoticeInputs(BaseModel):
    """Resignation details for the notice and last-working-day calculators."""

    resignation_date: date = Field(..., description="Date the resignation was handed in.")
    notice: DateDuration = Field(..., description='Notice length. "days" means working days for the last-day calculator.')
    holidays: str = Field("", description="Comma-separated ISO dates of public holidays (YYYY-MM-DD).")


# =========================
# Computed outputs
# =========================


class AmortizationRow(BaseModel):
    """One month of an amortization schedule (full float precision, never rounded)."""

    month: int = Field(..., ge=1, description="1-based month index.")
    principal: float = Field(..., description="Principal repaid this month.")
    interest: float = Field(..., description="Interest charged this month on the opening balance.")
    balance: float = Field(..., ge=0, description="Remaining balance after this month's payment, floored at 0.")

    model_config = ConfigDict(frozen=True)


class AmortizationResult(BaseModel):
    """Fixed monthly payment plus the month-by-month breakdown."""

    monthly_payment: float = Field(..., description="Constant monthly payment; 0.0 for degenerate inputs.")
    rows: list[AmortizationRow] = Field(default_factory=list, description="One row per month, ordered by month.")

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.monthly_payment == 0.0 or not self.rows

    @property
    def total_paid(self) -> float:
        return self.monthly_payment * len(self.rows)

    @property
    def total_interest(self) -> float:
        return sum(r.interest for r in self.rows)


class SavingsPoint(BaseModel):
    """Balance at the end of a given year (year 0 = initial investment)."""

    year: int = Field(..., ge=0)
    value: float

    model_config = ConfigDict(frozen=True)


class SavingsResult(BaseModel):
    """Projected future value and the yearly growth curve."""

    future_value: float = Field(..., description="Balance at the end of the projection.")
    total_contributions: float = Field(..., description="Initial investment plus every monthly deposit.")
    points: list[SavingsPoint] = Field(default_factory=list, description="Year 0..N balances for charting.")

    model_config = ConfigDict(frozen=True)

    @property
    def total_growth(self) -> float:
        return self.future_value - self.total_contributions


class LastWorkingDayResult(BaseModel):
    """Outcome of the business-day aware notice calculation."""

    notice_period_end_date: date = Field(..., description="Nominal end of the notice period.")
    last_working_day: date = Field(..., description="Latest working day on or before the notice end.")
    holidays_observed: int = Field(..., ge=0, description="Holidays after the resignation date, up to the last working day.")

    model_config = ConfigDict(frozen=True)


class Anniversary(BaseModel):
    """A single work anniversary, relative to the reference date."""

    year: int = Field(..., ge=1, description="Anniversary number (1 = first anniversary).")
    anniversary_date: date
    days_until: int | None = Field(None, description="Days from the reference date; set for future anniversaries.")
    days_ago: int | None = Field(None, description="Days since the anniversary; set for past anniversaries.")

    model_config = ConfigDict(frozen=True)


class AnniversaryProjection(BaseModel):
    """Years of service with the surrounding past and upcoming anniversaries."""

    hire_date: date
    today: date
    total_years_of_service: int = Field(..., ge=0)
    next_anniversary: Anniversary
    past: list[Anniversary] = Field(default_factory=list, description="Up to 5, oldest first.")
    upcoming: list[Anniversary] = Field(default_factory=list, description="Exactly 5, chronological.")

    model_config = ConfigDict(frozen=True)


class TimeZoneDifference(BaseModel):
    """UTC offset difference between two IANA zones at one instant."""

    from_zone: str
    to_zone: str
    difference_minutes: int = Field(..., description="offset(to_zone) - offset(from_zone), in minutes.")
    description: str

    model_config = ConfigDict(frozen=True)

    @property
    def ahead_zone(self) -> str | None:
        if self.difference_minutes == 0:
            return None
        return self.to_zone if self.difference_minutes > 0 else self.from_zone


# =========================
# Presentation settings
# =========================


class FormatSettings(BaseModel):
    """Currency and date formatting injected into the report renderer."""

    currency_symbol: str = Field("$", description="Prefix used for money amounts.")
    decimals: int = Field(2, ge=0, le=6, description="Fraction digits shown for money amounts.")
    date_format: str = Field("%Y-%m-%d", description="strftime pattern for dates.")

    model_config = ConfigDict(frozen=True)

    @field_validator("date_format")
    @classmethod
    def _has_directive(cls, v: str) -> str:
        if "%" not in v:
            raise ValueError("date_format must contain at least one strftime directive")
        return v
