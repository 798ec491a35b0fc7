# calcsuite/reports/generator.py
from __future__ import annotations

from datetime import date

from calcsuite.schemas.models import (
    AmortizationResult,
    AnniversaryProjection,
    AutoLoanInputs,
    DateDuration,
    FormatSettings,
    LastWorkingDayResult,
    LoanInputs,
    SavingsInputs,
    SavingsResult,
    TimeZoneDifference,
)

DEFAULT_FORMAT = FormatSettings()


def _fmt_currency(x: float, fmt: FormatSettings = DEFAULT_FORMAT) -> str:
    """
    Format a float as currency using the injected settings.

    Example (defaults):
        1001.3932 -> $1,001.39
        -2000 -> -$2,000.00
    """
    sign = "-" if x < 0 else ""
    return f"{sign}{fmt.currency_symbol}{abs(x):,.{fmt.decimals}f}"


def _fmt_pct(x: float) -> str:
    """
    Format a percent figure (already in percent units) with two decimals.

    Example:
        7.5 -> 7.50%
    """
    return f"{x:.2f}%"


def _fmt_date(d: date, fmt: FormatSettings = DEFAULT_FORMAT) -> str:
    return d.strftime(fmt.date_format)


def _fmt_duration(d: DateDuration) -> str:
    unit = d.unit[:-1] if d.value == 1 else d.unit
    return f"{d.value} {unit}"


def _section(title: str) -> str:
    """
    Render a level-2 heading for Markdown sections.
    """
    return f"\n## {title}\n"


def _join(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


# -----------------------
# Finance cards
# -----------------------


def render_loan(inputs: LoanInputs, result: AmortizationResult, fmt: FormatSettings = DEFAULT_FORMAT) -> str:
    """
    Loan card: payment summary followed by the full amortization table.

    A zero payment means the inputs were degenerate; only a notice is rendered.
    """
    lines = [
        "# Loan Calculator",
        "",
        f"- **Loan Amount:** {_fmt_currency(inputs.principal, fmt)}",
        f"- **Interest Rate:** {_fmt_pct(inputs.annual_rate_percent)}",
        f"- **Term:** {inputs.term_years} years",
    ]
    if result.is_empty:
        lines += ["", "_Enter a positive amount, a non-negative rate and a positive term to see a schedule._"]
        return _join(lines)

    lines += [
        _section("Your Estimated Payment"),
        f"**{_fmt_currency(result.monthly_payment, fmt)}** /month",
        "",
        f"- **Total Paid:** {_fmt_currency(result.total_paid, fmt)}",
        f"- **Total Interest:** {_fmt_currency(result.total_interest, fmt)}",
        _section("Amortization Schedule"),
        "| Month | Principal | Interest | Remaining Balance |",
        "| ---: | ---: | ---: | ---: |",
    ]
    for row in result.rows:
        lines.append(
            f"| {row.month} "
            f"| {_fmt_currency(row.principal, fmt)} "
            f"| {_fmt_currency(row.interest, fmt)} "
            f"| {_fmt_currency(row.balance, fmt)} |"
        )
    return _join(lines)


def render_auto_loan(inputs: AutoLoanInputs, payment: float, fmt: FormatSettings = DEFAULT_FORMAT) -> str:
    lines = [
        "# Auto Loan Calculator",
        "",
        f"- **Car Price:** {_fmt_currency(inputs.car_price, fmt)}",
        f"- **Down Payment:** {_fmt_currency(inputs.down_payment, fmt)}",
        f"- **Trade-in Value:** {_fmt_currency(inputs.trade_in_value, fmt)}",
        f"- **Amount Financed:** {_fmt_currency(max(inputs.financed_amount, 0.0), fmt)}",
        f"- **Interest Rate:** {_fmt_pct(inputs.annual_rate_percent)}",
        f"- **Term:** {inputs.term_years} years",
        _section("Your Estimated Payment"),
        f"**{_fmt_currency(payment, fmt)}** /month",
    ]
    return _join(lines)


def render_savings(inputs: SavingsInputs, result: SavingsResult, fmt: FormatSettings = DEFAULT_FORMAT) -> str:
    """
    Savings card: future value, contribution/growth split and the yearly curve.
    """
    lines = [
        "# Savings Calculator",
        "",
        f"- **Initial Investment:** {_fmt_currency(inputs.initial_investment, fmt)}",
        f"- **Monthly Contribution:** {_fmt_currency(inputs.monthly_contribution, fmt)}",
        f"- **Annual Return:** {_fmt_pct(inputs.annual_rate_percent)}",
        f"- **Years:** {inputs.years}",
        _section("Future Value of Savings"),
        f"**{_fmt_currency(result.future_value, fmt)}**",
        "",
        f"- **Total Contributions:** {_fmt_currency(result.total_contributions, fmt)}",
        f"- **Total Growth:** {_fmt_currency(result.total_growth, fmt)}",
        _section("Savings Growth Over Time"),
        "| Year | Balance |",
        "| ---: | ---: |",
    ]
    for p in result.points:
        lines.append(f"| {p.year} | {_fmt_currency(p.value, fmt)} |")
    return _join(lines)


# -----------------------
# Employment date cards
# -----------------------


def render_period_end(
    title: str,
    label: str,
    start: date,
    duration: DateDuration,
    end: date,
    fmt: FormatSettings = DEFAULT_FORMAT,
) -> str:
    """Generic card for the probation and notice end-date calculators."""
    lines = [
        f"# {title}",
        "",
        f"- **Start:** {_fmt_date(start, fmt)}",
        f"- **Duration:** {_fmt_duration(duration)}",
        _section(label),
        f"**{_fmt_date(end, fmt)}** ({end.strftime('%A')})",
    ]
    return _join(lines)


def render_last_working_day(
    resignation_date: date,
    duration: DateDuration,
    result: LastWorkingDayResult,
    fmt: FormatSettings = DEFAULT_FORMAT,
) -> str:
    lines = [
        "# Last Working Day Calculator",
        "",
        f"- **Resignation Date:** {_fmt_date(resignation_date, fmt)}",
        f"- **Notice:** {_fmt_duration(duration)}" + (" (working days)" if duration.unit == "days" else ""),
        _section("Your Last Working Day"),
        f"**{_fmt_date(result.last_working_day, fmt)}** ({result.last_working_day.strftime('%A')})",
        "",
        f"- **Notice Period Ends:** {_fmt_date(result.notice_period_end_date, fmt)}",
        f"- **Holidays Observed:** {result.holidays_observed}",
    ]
    if result.last_working_day != result.notice_period_end_date:
        lines.append("- _The notice period ends on a non-working day; the last working day is moved earlier._")
    return _join(lines)


def render_anniversaries(projection: AnniversaryProjection, fmt: FormatSettings = DEFAULT_FORMAT) -> str:
    """
    Anniversary card: years of service, the next anniversary, and the
    past/upcoming tables.
    """
    nxt = projection.next_anniversary
    lines = [
        "# Employment Anniversary Calculator",
        "",
        f"- **Hire Date:** {_fmt_date(projection.hire_date, fmt)}",
        f"- **As Of:** {_fmt_date(projection.today, fmt)}",
        f"- **Years of Service:** {projection.total_years_of_service}",
        _section("Next Anniversary"),
        f"**Year {nxt.year}** on {_fmt_date(nxt.anniversary_date, fmt)}, in {nxt.days_until} days",
    ]
    if projection.past:
        lines += [_section("Past Anniversaries"), "| Year | Date | Days Ago |", "| ---: | ---: | ---: |"]
        for a in projection.past:
            lines.append(f"| {a.year} | {_fmt_date(a.anniversary_date, fmt)} | {a.days_ago} |")
    lines += [_section("Upcoming Anniversaries"), "| Year | Date | Days Until |", "| ---: | ---: | ---: |"]
    for a in projection.upcoming:
        lines.append(f"| {a.year} | {_fmt_date(a.anniversary_date, fmt)} | {a.days_until} |")
    return _join(lines)


# -----------------------
# Converters
# -----------------------


def render_length(value: float, from_unit: str, to_unit: str, result: float) -> str:
    return _join(["# Length Converter", "", f"{value:g} {from_unit} = **{result:.6g} {to_unit}**"])


def render_tz_difference(diff: TimeZoneDifference) -> str:
    return _join(["# Time Zone Difference", "", diff.description])


def write_report(path: str, markdown: str) -> None:
    """
    Convenience helper to write a rendered card to disk.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(markdown)
