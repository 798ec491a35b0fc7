# calcsuite/core/finance/__init__.py

from .amortization import (
    amortize,
    auto_loan_payment,
    monthly_payment,
)
from .savings import project_savings

__all__ = [
    "amortize",
    "auto_loan_payment",
    "monthly_payment",
    "project_savings",
]
