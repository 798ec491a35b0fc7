# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from calcsuite.core.finance import amortize
from tests.utils import (
    DEFAULT_CONFIG,
    DEFAULT_PRINCIPAL,
    DEFAULT_RATE_PCT,
    DEFAULT_TERM_YEARS,
    write_config,
)


# -------- Environment isolation --------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Strip CALCSUITE_* overrides so the developer's shell never leaks into tests."""
    for key in ("OUT", "TIMEZONE", "STRICT_HOLIDAYS", "CURRENCY", "HOLIDAYS"):
        monkeypatch.delenv(f"CALCSUITE_{key}", raising=False)
    yield


# -------- Finance fixtures --------
@pytest.fixture
def baseline_schedule():
    """Canonical 50k @ 7.5% over 5 years."""
    return amortize(DEFAULT_PRINCIPAL, DEFAULT_RATE_PCT, DEFAULT_TERM_YEARS)


@pytest.fixture
def schedule_factory():
    """Factory to amortize arbitrary loans with the baseline as default."""

    def _factory(principal=DEFAULT_PRINCIPAL, rate=DEFAULT_RATE_PCT, years=DEFAULT_TERM_YEARS):
        return amortize(principal, rate, years)

    return _factory


# -------- Config fixtures --------
@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Default config JSON written into the test's tmp path."""
    return write_config(tmp_path, DEFAULT_CONFIG)


@pytest.fixture
def config_factory(tmp_path: Path):
    """
    Callable factory to write a config JSON with top-level overrides.

    Usage:
        path = config_factory(holidays="2024-01-02")
    """

    def _factory(filename: str = "calcsuite.json", **overrides):
        payload = {**DEFAULT_CONFIG, **overrides}
        return write_config(tmp_path, payload, filename=filename)

    return _factory
