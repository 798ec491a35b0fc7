# calcsuite/inputs/inputs.py
"""
Config loader for calcsuite.

Goals
-----
- File-first configuration validated with Pydantic.
- Presentation settings (currency, date format) and the reference time zone
  are injected values, never module globals.
- Optional calculator payloads so a whole scenario can live in one JSON file.
- Minimal environment-variable overrides for CI/CLI convenience.

JSON shape
----------
    {
      "format": {"currency_symbol": "$", "decimals": 2, "date_format": "%Y-%m-%d"},
      "run": {"out": null, "timezone": "UTC", "strict_holidays": true},
      "holidays": "2024-12-25, 2024-12-26",
      "loan": {"principal": 50000, "annual_rate_percent": 7.5, "term_years": 5},
      "probation": {"start_date": "2024-01-15", "probation": {"value": 3, "unit": "months"}},
      "notice": {"resignation_date": "2024-01-01", "notice": {"value": 5, "unit": "days"}}
    }

``holidays`` may also be a JSON list of date strings; it is joined into the
comma-separated form.

Environment overrides (optional)
--------------------------------
- CALCSUITE_OUT              -> run.out
- CALCSUITE_TIMEZONE         -> run.timezone
- CALCSUITE_STRICT_HOLIDAYS  -> run.strict_holidays (0/1)
- CALCSUITE_CURRENCY         -> format.currency_symbol
- CALCSUITE_HOLIDAYS         -> holidays

Public API
----------
- class ConfigLoader:
    - load(path: str | Path | None) -> AppConfig
    - load_json(text: str) -> AppConfig
    - with_overrides(cfg, **kwargs) -> AppConfig (non-destructive copies)
- function load_config(path: str | Path | None) -> AppConfig  (convenience)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, cast
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, ValidationError, field_validator

from calcsuite.core.errors import InputsError
from calcsuite.schemas.models import (
    AutoLoanInputs,
    FormatSettings,
    LoanInputs,
    NoticeInputs,
    ProbationInputs,
    SavingsInputs,
)

logger = logging.getLogger(__name__)

# ----------------------------
# Pydantic models for structured config
# ----------------------------


class RunOptions(BaseModel):
    """Runtime (non-numeric) options controlling a run."""

    out: str | None = Field(None, description="Path to write the Markdown output; stdout when None.")
    timezone: str = Field("UTC", description="IANA zone used to resolve 'today'.")
    strict_holidays: bool = Field(True, description="Reject malformed holiday entries instead of skipping them.")

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone: {v!r}") from e
        return v


class AppConfig(BaseModel):
    """
    Full config payload.

    Attributes:
        format:    Currency/date formatting for rendered output.
        run:       Runtime options for the current execution.
        holidays:  Default comma-separated holiday list for the last-working-day calculator.
        loan, auto_loan, savings, probation, notice, hire_date:
                   Optional calculator inputs; CLI flags take precedence.
    """

    format: FormatSettings = FormatSettings()
    run: RunOptions = RunOptions()
    holidays: str = ""
    loan: LoanInputs | None = None
    auto_loan: AutoLoanInputs | None = None
    savings: SavingsInputs | None = None
    probation: ProbationInputs | None = None
    notice: NoticeInputs | None = None
    hire_date: date | None = None


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class ConfigLoader:
    """
    File-first config loader with light env overrides.

    Default search (when path=None):
        1) ./calcsuite.json
        2) ./config.json
    If neither exists, built-in defaults are used.
    """

    env_prefix: str = "CALCSUITE_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> AppConfig:
        """
        Load config from a JSON file (path). If path is None, try defaults.

        Raises:
            InputsError: missing explicit file, unreadable JSON, or validation failure.
        """
        p = self._resolve_path(path)
        raw: dict[str, Any] = self._read_json_file(p) if p is not None else {}
        cfg = self._parse_root(self._normalize(raw))
        return self._apply_env_overrides(cfg)

    def load_json(self, text: str) -> AppConfig:
        """Load config from a JSON string."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise InputsError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise InputsError("Config root must be a JSON object.")
        cfg = self._parse_root(self._normalize(raw))
        return self._apply_env_overrides(cfg)

    def with_overrides(
        self,
        cfg: AppConfig,
        *,
        out: str | None = None,
        timezone: str | None = None,
        currency_symbol: str | None = None,
        holidays: str | None = None,
        strict_holidays: bool | None = None,
    ) -> AppConfig:
        """
        Return a *new* AppConfig with provided non-null overrides applied.
        Does not mutate the original instance.
        """
        run_updates: dict[str, Any] = {}
        if out is not None:
            run_updates["out"] = out
        if timezone is not None:
            run_updates["timezone"] = timezone
        if strict_holidays is not None:
            run_updates["strict_holidays"] = strict_holidays

        updates: dict[str, Any] = {}
        if run_updates:
            updates["run"] = self._revalidate_run(cfg.run, run_updates)
        if currency_symbol is not None:
            updates["format"] = cfg.format.model_copy(update={"currency_symbol": currency_symbol})
        if holidays is not None:
            updates["holidays"] = holidays

        if not updates:
            return cfg
        return cfg.model_copy(update=updates)

    # ---------- Internals ----------

    def _resolve_path(self, path: str | Path | None) -> Path | None:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise InputsError(f"Config file not found: {p}")
            return p

        for candidate in (Path("calcsuite.json"), Path("config.json")):
            if candidate.exists():
                logger.debug("using default config %s", candidate)
                return candidate
        return None

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise InputsError(f"Unsupported config format for {p.name}; only .json is supported.")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise InputsError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(data, dict):
            raise InputsError(f"Config root in {p} must be a JSON object.")
        return cast(dict[str, Any], data)

    def _normalize(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Accept a JSON list for ``holidays`` and join it into the comma form."""
        holidays = raw.get("holidays")
        if isinstance(holidays, list):
            raw = {**raw, "holidays": ",".join(str(h) for h in holidays)}
        return raw

    def _parse_root(self, data: dict[str, Any]) -> AppConfig:
        try:
            return AppConfig.model_validate(data)
        except ValidationError as e:
            raise InputsError(f"Config validation failed:\n{e}") from e

    def _revalidate_run(self, current: RunOptions, updates: dict[str, Any]) -> RunOptions:
        # model_copy skips validation; round-trip so bad overrides are rejected
        try:
            return RunOptions.model_validate({**current.model_dump(), **updates})
        except ValidationError as e:
            raise InputsError(f"Invalid run options:\n{e}") from e

    def _apply_env_overrides(self, cfg: AppConfig) -> AppConfig:
        """
        Apply light, optional overrides from environment variables.
        Bad values are ignored and the validated config is kept.
        """
        prefix = self.env_prefix
        kwargs: dict[str, Any] = {}

        out = os.getenv(f"{prefix}OUT")
        if out:
            kwargs["out"] = out

        tz = os.getenv(f"{prefix}TIMEZONE")
        if tz:
            try:
                ZoneInfo(tz.strip())
                kwargs["timezone"] = tz.strip()
            except (ZoneInfoNotFoundError, ValueError):
                logger.warning("ignoring %sTIMEZONE=%r: unknown zone", prefix, tz)

        strict = os.getenv(f"{prefix}STRICT_HOLIDAYS")
        if strict:
            normalized = strict.strip().lower()
            if normalized in ("1", "true", "yes"):
                kwargs["strict_holidays"] = True
            elif normalized in ("0", "false", "no"):
                kwargs["strict_holidays"] = False

        currency = os.getenv(f"{prefix}CURRENCY")
        if currency:
            kwargs["currency_symbol"] = currency

        holidays = os.getenv(f"{prefix}HOLIDAYS")
        if holidays is not None and holidays.strip():
            kwargs["holidays"] = holidays

        if not kwargs:
            return cfg
        return self.with_overrides(cfg, **kwargs)


# ----------------------------
# Convenience function
# ----------------------------


def load_config(path: str | Path | None = None) -> AppConfig:
    """Convenience wrapper for one-shot callers."""
    return ConfigLoader().load(path)
