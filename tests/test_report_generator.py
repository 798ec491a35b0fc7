# tests/test_report_generator.py
from datetime import date, datetime, timezone

from calcsuite.core.convert import time_zone_difference
from calcsuite.core.dates import anniversaries, last_working_day
from calcsuite.core.finance import amortize, auto_loan_payment, project_savings
from calcsuite.reports.generator import (
    _fmt_currency,
    render_anniversaries,
    render_auto_loan,
    render_last_working_day,
    render_length,
    render_loan,
    render_period_end,
    render_savings,
    render_tz_difference,
    write_report,
)
from calcsuite.schemas.models import DateDuration, FormatSettings
from tests.utils import MONDAY_2024, make_auto_loan_inputs, make_loan_inputs, make_savings_inputs

EURO = FormatSettings(currency_symbol="€", decimals=2, date_format="%d.%m.%Y")


def test_fmt_currency_defaults_and_negative():
    assert _fmt_currency(1001.3932) == "$1,001.39"
    assert _fmt_currency(-2000) == "-$2,000.00"
    assert _fmt_currency(1234.5, FormatSettings(currency_symbol="€", decimals=0)) == "€1,234"


def test_loan_card_contains_key_sections(baseline_schedule):
    md = render_loan(make_loan_inputs(), baseline_schedule)

    assert "# Loan Calculator" in md
    assert "## Your Estimated Payment" in md
    assert "## Amortization Schedule" in md
    assert "**$1,001.90** /month" in md
    assert "- **Interest Rate:** 7.50%" in md

    # One table row per month
    assert md.count("| 1 |") >= 1
    assert "| 60 |" in md
    assert md.rstrip().endswith("| $0.00 |")


def test_loan_card_uses_injected_format(baseline_schedule):
    md = render_loan(make_loan_inputs(), baseline_schedule, EURO)
    assert "€50,000.00" in md
    assert "$" not in md


def test_loan_card_degenerate_inputs_show_notice():
    inputs = make_loan_inputs(principal=0)
    md = render_loan(inputs, amortize(inputs.principal, inputs.annual_rate_percent, inputs.term_years))
    assert "## Amortization Schedule" not in md
    assert "_Enter a positive amount" in md


def test_auto_loan_card():
    inputs = make_auto_loan_inputs()
    payment = auto_loan_payment(
        inputs.car_price, inputs.down_payment, inputs.trade_in_value, inputs.annual_rate_percent, inputs.term_years
    )
    md = render_auto_loan(inputs, payment)
    assert "# Auto Loan Calculator" in md
    assert "- **Amount Financed:** $20,000.00" in md
    assert "**$391.32** /month" in md


def test_auto_loan_card_nothing_financed():
    inputs = make_auto_loan_inputs(down_payment=40_000.0)
    md = render_auto_loan(inputs, 0.0)
    assert "- **Amount Financed:** $0.00" in md
    assert "**$0.00** /month" in md


def test_savings_card_has_yearly_table():
    inputs = make_savings_inputs()
    result = project_savings(
        inputs.initial_investment, inputs.monthly_contribution, inputs.annual_rate_percent, inputs.years
    )
    md = render_savings(inputs, result)
    assert "## Future Value of Savings" in md
    assert "## Savings Growth Over Time" in md
    assert "| 0 | $1,000.00 |" in md
    assert "| 10 |" in md
    assert "- **Total Contributions:** $25,000.00" in md


def test_period_end_card_shows_weekday():
    md = render_period_end(
        "Probation Period Calculator",
        "Probation Ends",
        date(2024, 1, 15),
        DateDuration(value=3, unit="months"),
        date(2024, 4, 14),
        EURO,
    )
    assert "# Probation Period Calculator" in md
    assert "- **Start:** 15.01.2024" in md
    assert "- **Duration:** 3 months" in md
    assert "**14.04.2024** (Sunday)" in md


def test_duration_singular():
    md = render_period_end("Notice", "Ends", MONDAY_2024, DateDuration(value=1, unit="weeks"), date(2024, 1, 7))
    assert "- **Duration:** 1 week" in md


def test_last_working_day_card_notes_divergence():
    duration = DateDuration(value=2, unit="weeks")
    result = last_working_day(MONDAY_2024, duration.value, duration.unit)
    md = render_last_working_day(MONDAY_2024, duration, result)
    assert "**2024-01-12** (Friday)" in md
    assert "- **Notice Period Ends:** 2024-01-14" in md
    assert "moved earlier" in md


def test_last_working_day_card_working_days():
    duration = DateDuration(value=5, unit="days")
    result = last_working_day(MONDAY_2024, duration.value, duration.unit, "2024-01-03")
    md = render_last_working_day(MONDAY_2024, duration, result)
    assert "- **Notice:** 5 days (working days)" in md
    assert "- **Holidays Observed:** 1" in md
    assert "moved earlier" not in md


def test_anniversary_card_tables():
    md = render_anniversaries(anniversaries(date(2019, 6, 1), date(2024, 6, 15)))
    assert "- **Years of Service:** 5" in md
    assert "**Year 6** on 2025-06-01, in 351 days" in md
    assert "## Past Anniversaries" in md
    assert "| 5 | 2024-06-01 | 14 |" in md
    assert "## Upcoming Anniversaries" in md
    assert "| 10 | 2029-06-01 |" in md


def test_anniversary_card_without_past():
    md = render_anniversaries(anniversaries(date(2023, 3, 10), date(2024, 1, 1)))
    assert "## Past Anniversaries" not in md
    assert "## Upcoming Anniversaries" in md


def test_converter_cards():
    assert "10 mile = **16.0934 kilometer**" in render_length(10, "mile", "kilometer", 16.0934)
    diff = time_zone_difference("UTC", "Asia/Tokyo", at=datetime(2024, 1, 15, tzinfo=timezone.utc))
    md = render_tz_difference(diff)
    assert "# Time Zone Difference" in md
    assert "Asia/Tokyo is ahead by 9 hours." in md


def test_write_report_creates_md_file(tmp_path, baseline_schedule):
    out_file = tmp_path / "loan.md"
    write_report(str(out_file), render_loan(make_loan_inputs(), baseline_schedule))

    assert out_file.exists()
    content = out_file.read_text(encoding="utf-8")
    assert "# Loan Calculator" in content
    assert len(content) > 200
