# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Configuration Manager
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Dataclass-based configuration with env var and YAML support.

The defaults reproduce the audit layout the evaluation has always used
(``./data/audit`` in, ``./eval_results`` out), so a plain run needs no
configuration at all.

Usage::

    config = EvalConfig()
    config = EvalConfig.from_env()
    config = EvalConfig.from_yaml("factuality.yaml")
"""

from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass

import yaml

from .exceptions import ConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EvalConfig:
    """Central configuration for a factuality evaluation run.

    Parameters
    ----------
    data_dir : str — directory holding ``factuality_<task>.csv`` inputs.
    output_dir : str — directory receiving ``<task>_factuality.csv`` results.
    valid_flag : str — ``result_valid_flag`` value that marks a scorable row.
    na_rep : str — text written for undefined rates.
    write_row_flags : bool — also write per-row ``<task>_flags.csv`` tables.
    metrics_enabled : bool — collect run metrics.
    log_level : str — logging level.
    log_json : bool — structured JSON logging.
    """

    # Storage
    data_dir: str = "./data/audit"
    output_dir: str = "./eval_results"
    na_rep: str = "NA"
    write_row_flags: bool = False

    # Scoring
    valid_flag: str = "valid"

    # Observability
    metrics_enabled: bool = True
    log_level: str = "INFO"
    log_json: bool = False

    # Profile name (informational)
    profile: str = "default"

    def __post_init__(self) -> None:
        if not self.data_dir:
            raise ConfigError("data_dir must not be empty")
        if not self.output_dir:
            raise ConfigError("output_dir must not be empty")
        if not self.valid_flag:
            raise ConfigError("valid_flag must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {list(_LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, prefix: str = "FACTEVAL_") -> EvalConfig:
        """Load configuration from environment variables.

        Reads ``FACTEVAL_<FIELD>`` env vars.
        Example: ``FACTEVAL_DATA_DIR=/srv/audit``
        """
        kwargs: dict = {}
        field_map = {f.name.upper(): f for f in cls.__dataclass_fields__.values()}

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            field_name = key[len(prefix) :]
            if field_name in field_map:
                fld = field_map[field_name]
                try:
                    kwargs[fld.name] = _coerce(value, fld.type)  # type: ignore[arg-type]
                except (ValueError, TypeError) as exc:
                    raise ConfigError(
                        f"Invalid value for env var {key}={value!r}: {exc}"
                    ) from exc

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str) -> EvalConfig:
        """Load configuration from a YAML file; unknown keys are ignored."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping at top level")
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def configure_logging(self) -> None:
        """Apply log_level and log_json settings to the FactualityEval logger hierarchy."""
        root = logging.getLogger("FactualityEval")
        root.setLevel(getattr(logging, self.log_level.upper(), logging.INFO))

        if self.log_json:
            handler = logging.StreamHandler()
            handler.setFormatter(_JsonFormatter())
            root.handlers = [handler]
        elif not root.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
            root.handlers = [handler]

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return {fld: getattr(self, fld) for fld in self.__dataclass_fields__}


class _JsonFormatter(logging.Formatter):
    """Structured JSON log formatter for production use."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        task = getattr(record, "task", None)
        if task:
            entry["task"] = task
        return json.dumps(entry)


def _coerce(value: str, type_hint: str) -> object:
    """Coerce a string env var to the target type."""
    if type_hint == "bool":
        low = value.lower()
        if low in ("true", "1", "yes"):
            return True
        if low in ("false", "0", "no"):
            return False
        raise ValueError(
            f"invalid bool value: {value!r} (expected true/false/1/0/yes/no)"
        )
    if type_hint == "int":
        return int(value)
    if type_hint == "float":
        return float(value)
    return value
