# calcsuite/__init__.py
"""Personal-finance and employment-date calculators."""

__version__ = "0.1.0"
