# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_loan_inputs, make_notice_inputs
"""

from .utils import make_loan_inputs, make_notice_inputs, make_savings_inputs

__all__ = ["make_loan_inputs", "make_notice_inputs", "make_savings_inputs"]
