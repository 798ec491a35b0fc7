# calcsuite/core/finance/amortization.py

from __future__ import annotations

import logging

from calcsuite.schemas.models import AmortizationResult, AmortizationRow

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
_EPS = 1e-6  # for floating cleanup


def _monthly_rate(annual_rate_percent: float) -> float:
    """Convert a percent APR (7.5) into a monthly fraction (0.00625)."""
    return annual_rate_percent / 100.0 / MONTHS_PER_YEAR


def _is_degenerate(principal: float, annual_rate_percent: float, term_years: int) -> bool:
    return principal <= 0 or annual_rate_percent < 0 or term_years <= 0


def monthly_payment(principal: float, annual_rate_percent: float, term_years: int) -> float:
    """
    Constant monthly payment for a fully-amortizing fixed-rate loan.

    Formula (standard annuity):
        PMT = P * r / (1 - (1 + r)^-n)

    Where:
        P = principal
        r = monthly rate = annual_rate_percent / 100 / 12
        n = term_years * 12

    Returns 0.0 for degenerate inputs (principal <= 0, rate < 0, term <= 0)
    instead of raising; callers check for a zero payment before displaying.
    A zero rate reduces to straight-line division P / n.
    """
    if _is_degenerate(principal, annual_rate_percent, term_years):
        return 0.0

    r = _monthly_rate(annual_rate_percent)
    n = term_years * MONTHS_PER_YEAR
    discount = 1.0 - (1.0 + r) ** (-n) if r > 0 else 0.0
    if discount == 0.0:
        # zero rate, or a rate too small to move 1 + r in float arithmetic
        return principal / n
    return principal * r / discount


def amortize(principal: float, annual_rate_percent: float, term_years: int) -> AmortizationResult:
    """
    Build the monthly amortization schedule for a fixed-rate loan.

    Each month:
        interest  = opening balance * r
        principal = payment - interest
        balance   = max(0, balance - principal)

    Values keep full float precision; rounding is a presentation concern.
    The floor at zero absorbs drift on the final row.
    """
    if _is_degenerate(principal, annual_rate_percent, term_years):
        logger.debug(
            "degenerate loan inputs principal=%s rate=%s term=%s; returning empty schedule",
            principal,
            annual_rate_percent,
            term_years,
        )
        return AmortizationResult(monthly_payment=0.0, rows=[])

    r = _monthly_rate(annual_rate_percent)
    n = term_years * MONTHS_PER_YEAR
    payment = monthly_payment(principal, annual_rate_percent, term_years)

    rows: list[AmortizationRow] = []
    bal = float(principal)
    for month in range(1, n + 1):
        interest = bal * r
        principal_paid = payment - interest
        bal = max(0.0, bal - principal_paid)
        # Clean tiny residual drift
        if bal < _EPS:
            bal = 0.0
        rows.append(AmortizationRow(month=month, principal=principal_paid, interest=interest, balance=bal))

    logger.debug("amortized %s over %d months at %.6f/month: payment=%.6f", principal, n, r, payment)
    return AmortizationResult(monthly_payment=payment, rows=rows)


def auto_loan_payment(
    car_price: float,
    down_payment: float,
    trade_in_value: float,
    annual_rate_percent: float,
    term_years: int,
) -> float:
    """Monthly payment on the amount left after the down payment and trade-in (0.0 if nothing is financed)."""
    financed = car_price - down_payment - trade_in_value
    if financed <= 0:
        return 0.0
    return monthly_payment(financed, annual_rate_percent, term_years)
