# main.py
"""
Entry Point — calcsuite

Purpose
-------
Run one calculator and emit a Markdown card:
  1) Load config (defaults, --config JSON, CALCSUITE_* env overrides).
  2) Resolve calculator inputs: CLI flags first, then the config payload.
  3) Compute with the pure engine functions.
  4) Render Markdown to stdout or --out.

Usage
-----
    python main.py loan --principal 50000 --rate 7.5 --years 5
    python main.py auto-loan --price 35000 --down 5000 --trade-in 10000 --rate 6.5 --years 5
    python main.py savings --initial 1000 --monthly 200 --rate 5 --years 10
    python main.py probation --start 2024-01-15 --duration 3 --unit months
    python main.py notice --resignation 2024-01-01 --duration 4 --unit weeks
    python main.py last-day --resignation 2024-01-01 --duration 5 --unit days --holidays 2024-01-03
    python main.py anniversary --hire 2019-06-01 [--today 2024-06-15]
    python main.py convert-length 10 mile kilometer
    python main.py tz-diff America/New_York Europe/London
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from datetime import date
from typing import Any

from pydantic import ValidationError

from calcsuite.core.convert import available_time_zones, convert_length, time_zone_difference
from calcsuite.core.dates import (
    anniversaries,
    last_working_day,
    notice_period_end_date,
    probation_end_date,
    to_date,
)
from calcsuite.core.errors import CalculatorError
from calcsuite.core.finance import amortize, auto_loan_payment, project_savings
from calcsuite.inputs.inputs import AppConfig, ConfigLoader
from calcsuite.reports.generator import (
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
from calcsuite.schemas.models import (
    DURATION_UNITS,
    AutoLoanInputs,
    DateDuration,
    LoanInputs,
    NoticeInputs,
    ProbationInputs,
    SavingsInputs,
)

logger = logging.getLogger("calcsuite")


def _date_arg(val: str) -> date:
    try:
        return to_date(val)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _require(value: Any, fallback: Any, flag: str) -> Any:
    if value is not None:
        return value
    if fallback is not None:
        return fallback
    raise CalculatorError(f"missing required input {flag} (pass it or set it in --config)")


# -----------------------
# Command handlers
# -----------------------


def _cmd_loan(args: argparse.Namespace, cfg: AppConfig) -> str:
    base = cfg.loan
    inputs = LoanInputs(
        principal=_require(args.principal, base and base.principal, "--principal"),
        annual_rate_percent=_require(args.rate, base and base.annual_rate_percent, "--rate"),
        term_years=_require(args.years, base and base.term_years, "--years"),
    )
    result = amortize(inputs.principal, inputs.annual_rate_percent, inputs.term_years)
    return render_loan(inputs, result, cfg.format)


def _cmd_auto_loan(args: argparse.Namespace, cfg: AppConfig) -> str:
    base = cfg.auto_loan
    inputs = AutoLoanInputs(
        car_price=_require(args.price, base and base.car_price, "--price"),
        down_payment=_require(args.down, base.down_payment if base else 0.0, "--down"),
        trade_in_value=_require(args.trade_in, base.trade_in_value if base else 0.0, "--trade-in"),
        annual_rate_percent=_require(args.rate, base and base.annual_rate_percent, "--rate"),
        term_years=_require(args.years, base and base.term_years, "--years"),
    )
    payment = auto_loan_payment(
        inputs.car_price,
        inputs.down_payment,
        inputs.trade_in_value,
        inputs.annual_rate_percent,
        inputs.term_years,
    )
    return render_auto_loan(inputs, payment, cfg.format)


def _cmd_savings(args: argparse.Namespace, cfg: AppConfig) -> str:
    base = cfg.savings
    inputs = SavingsInputs(
        initial_investment=_require(args.initial, base.initial_investment if base else 0.0, "--initial"),
        monthly_contribution=_require(args.monthly, base.monthly_contribution if base else 0.0, "--monthly"),
        annual_rate_percent=_require(args.rate, base and base.annual_rate_percent, "--rate"),
        years=_require(args.years, base and base.years, "--years"),
    )
    result = project_savings(
        inputs.initial_investment,
        inputs.monthly_contribution,
        inputs.annual_rate_percent,
        inputs.years,
    )
    return render_savings(inputs, result, cfg.format)


def _notice_inputs(args: argparse.Namespace, cfg: AppConfig, *, with_holidays: bool = False) -> NoticeInputs:
    base = cfg.notice
    start = _require(args.resignation, base and base.resignation_date, "--resignation")
    value = _require(args.duration, base and base.notice.value, "--duration")
    unit = args.unit or (base.notice.unit if base else "days")
    holidays = ""
    if with_holidays:
        holidays = args.holidays if args.holidays is not None else (base.holidays if base and base.holidays else cfg.holidays)
    return NoticeInputs(resignation_date=start, notice=DateDuration(value=value, unit=unit), holidays=holidays)


def _cmd_probation(args: argparse.Namespace, cfg: AppConfig) -> str:
    base = cfg.probation
    inputs = ProbationInputs(
        start_date=_require(args.start, base and base.start_date, "--start"),
        probation=DateDuration(
            value=_require(args.duration, base and base.probation.value, "--duration"),
            unit=args.unit or (base.probation.unit if base else "days"),
        ),
    )
    end = probation_end_date(inputs.start_date, inputs.probation.value, inputs.probation.unit)
    return render_period_end(
        "Probation Period Calculator", "Probation Ends", inputs.start_date, inputs.probation, end, cfg.format
    )


def _cmd_notice(args: argparse.Namespace, cfg: AppConfig) -> str:
    n = _notice_inputs(args, cfg)
    end = notice_period_end_date(n.resignation_date, n.notice.value, n.notice.unit)
    return render_period_end("Notice Period Calculator", "Notice Period Ends", n.resignation_date, n.notice, end, cfg.format)


def _cmd_last_day(args: argparse.Namespace, cfg: AppConfig) -> str:
    n = _notice_inputs(args, cfg, with_holidays=True)
    result = last_working_day(
        n.resignation_date,
        n.notice.value,
        n.notice.unit,
        n.holidays,
        strict_holidays=cfg.run.strict_holidays,
    )
    return render_last_working_day(n.resignation_date, n.notice, result, cfg.format)


def _cmd_anniversary(args: argparse.Namespace, cfg: AppConfig) -> str:
    hire = _require(args.hire, cfg.hire_date, "--hire")
    projection = anniversaries(hire, args.today, timezone=cfg.run.timezone)
    return render_anniversaries(projection, cfg.format)


def _cmd_convert_length(args: argparse.Namespace, cfg: AppConfig) -> str:
    result = convert_length(args.value, args.from_unit, args.to_unit)
    return render_length(args.value, args.from_unit, args.to_unit, result)


def _cmd_tz_diff(args: argparse.Namespace, cfg: AppConfig) -> str:
    diff = time_zone_difference(args.from_zone, args.to_zone, zones=available_time_zones())
    return render_tz_difference(diff)


# -----------------------
# Argument parsing
# -----------------------


def _add_period_args(p: argparse.ArgumentParser, start_flag: str, start_help: str) -> None:
    p.add_argument(f"--{start_flag}", type=_date_arg, default=None, help=start_help)
    p.add_argument("--duration", type=int, default=None, help="Number of units.")
    p.add_argument("--unit", type=str, default=None, choices=DURATION_UNITS, help="Duration unit (default: days).")


def build_parser() -> argparse.ArgumentParser:
    """Top-level parser with one subcommand per calculator."""
    p = argparse.ArgumentParser(description="calcsuite — personal-finance and employment-date calculators")
    p.add_argument("--config", type=str, default=None, help="Path to JSON config.")
    p.add_argument("--out", type=str, default=None, help="Output Markdown path (overrides config).")
    p.add_argument("--currency", type=str, default=None, help="Currency symbol (overrides config).")
    p.add_argument("--timezone", type=str, default=None, help="IANA zone used for 'today' (overrides config).")
    p.add_argument(
        "--lenient-holidays",
        action="store_true",
        help="Skip malformed holiday entries instead of failing.",
    )
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    s = sub.add_parser("loan", help="Monthly payment and amortization schedule.")
    s.add_argument("--principal", type=float, default=None)
    s.add_argument("--rate", type=float, default=None, help="Annual rate in percent (7.5 = 7.5%%).")
    s.add_argument("--years", type=int, default=None)
    s.set_defaults(handler=_cmd_loan)

    s = sub.add_parser("auto-loan", help="Monthly payment on a vehicle loan.")
    s.add_argument("--price", type=float, default=None)
    s.add_argument("--down", type=float, default=None)
    s.add_argument("--trade-in", type=float, default=None)
    s.add_argument("--rate", type=float, default=None)
    s.add_argument("--years", type=int, default=None)
    s.set_defaults(handler=_cmd_auto_loan)

    s = sub.add_parser("savings", help="Savings growth with monthly contributions.")
    s.add_argument("--initial", type=float, default=None)
    s.add_argument("--monthly", type=float, default=None)
    s.add_argument("--rate", type=float, default=None)
    s.add_argument("--years", type=int, default=None)
    s.set_defaults(handler=_cmd_savings)

    s = sub.add_parser("probation", help="Probation end date.")
    _add_period_args(s, "start", "Employment start date.")
    s.set_defaults(handler=_cmd_probation)

    s = sub.add_parser("notice", help="Notice period end date (calendar).")
    _add_period_args(s, "resignation", "Resignation date.")
    s.set_defaults(handler=_cmd_notice)

    s = sub.add_parser("last-day", help="Last working day, skipping weekends and holidays.")
    _add_period_args(s, "resignation", "Resignation date.")
    s.add_argument("--holidays", type=str, default=None, help="Comma-separated ISO dates (YYYY-MM-DD).")
    s.set_defaults(handler=_cmd_last_day)

    s = sub.add_parser("anniversary", help="Years of service and work anniversaries.")
    s.add_argument("--hire", type=_date_arg, default=None)
    s.add_argument("--today", type=_date_arg, default=None, help="Reference date (default: today in --timezone).")
    s.set_defaults(handler=_cmd_anniversary)

    s = sub.add_parser("convert-length", help="Length unit conversion.")
    s.add_argument("value", type=float)
    s.add_argument("from_unit", type=str)
    s.add_argument("to_unit", type=str)
    s.set_defaults(handler=_cmd_convert_length)

    s = sub.add_parser("tz-diff", help="Current offset difference between two time zones.")
    s.add_argument("from_zone", type=str)
    s.add_argument("to_zone", type=str)
    s.set_defaults(handler=_cmd_tz_diff)

    return p


def main(argv: list[str] | None = None) -> int:
    """Run one calculator; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    handler: Callable[[argparse.Namespace, AppConfig], str] = args.handler
    logger.debug("command=%s config=%s", args.command, args.config)
    try:
        loader = ConfigLoader()
        cfg = loader.load(args.config)
        cfg = loader.with_overrides(
            cfg,
            out=args.out,
            timezone=args.timezone,
            currency_symbol=args.currency,
            strict_holidays=False if args.lenient_holidays else None,
        )
        md = handler(args, cfg)
    except (CalculatorError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if cfg.run.out:
        write_report(cfg.run.out, md)
        print(f"Report written to {cfg.run.out}")
    else:
        sys.stdout.write(md)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
