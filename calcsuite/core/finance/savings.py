# calcsuite/core/finance/savings.py

from __future__ import annotations

import logging

from calcsuite.schemas.models import SavingsPoint, SavingsResult

from .amortization import MONTHS_PER_YEAR

logger = logging.getLogger(__name__)


def project_savings(
    initial_investment: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: int,
) -> SavingsResult:
    """
    Grow a balance month by month with a deposit at the end of each month.

    Each month:
        balance = balance * (1 + r) + monthly_contribution,  r = rate / 100 / 12

    One growth point is emitted for year 0 (the initial investment) and for
    the end of every following year. Degenerate inputs (non-positive years,
    negative amounts or rate) yield a single year-0 point.
    """
    start = max(float(initial_investment), 0.0)
    if years <= 0 or initial_investment < 0 or monthly_contribution < 0 or annual_rate_percent < 0:
        logger.debug(
            "degenerate savings inputs initial=%s monthly=%s rate=%s years=%s",
            initial_investment,
            monthly_contribution,
            annual_rate_percent,
            years,
        )
        return SavingsResult(future_value=start, total_contributions=start, points=[SavingsPoint(year=0, value=start)])

    r = annual_rate_percent / 100.0 / MONTHS_PER_YEAR
    bal = start
    points = [SavingsPoint(year=0, value=bal)]
    for year in range(1, years + 1):
        for _ in range(MONTHS_PER_YEAR):
            bal = bal * (1 + r) + monthly_contribution
        points.append(SavingsPoint(year=year, value=bal))

    contributions = start + monthly_contribution * MONTHS_PER_YEAR * years
    return SavingsResult(future_value=bal, total_contributions=contributions, points=points)
