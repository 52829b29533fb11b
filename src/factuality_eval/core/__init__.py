# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Core Package (Scoring Engine)
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Scoring engine for LLM factuality against a bibliographic ground truth.

Quick start::

    from factuality_eval.core import EvalConfig, FactualityPipeline

    result = FactualityPipeline(EvalConfig()).run()
    print(result.outcomes["epoch"].result)
"""

from .aggregate import (
    MissingPolicy,
    RateSpec,
    aggregate_rates,
    apply_policy,
    group_rates,
    pivot_rates,
    rate,
)
from .columns import coerce_flags, is_present, to_tristate
from .config import EvalConfig
from .exceptions import (
    CoercionError,
    ConfigError,
    FactualityEvalError,
    LoadError,
    WriteError,
)
from .intervals import IN, OUT, OVER, UNDEFINED, Window, classify_interval
from .io import load_task_table, write_table
from .pipeline import FactualityPipeline, RunResult, TaskOutcome
from .tasks import (
    TASKS,
    TaskDefinition,
    derive_author_flags,
    derive_epoch_flags,
    derive_field_flags,
    derive_seniority_flags,
)
from .validity import filter_valid
from .years import extract_year_range, first_year

__all__ = [
    "EvalConfig",
    "FactualityPipeline",
    "RunResult",
    "TaskOutcome",
    "TASKS",
    "TaskDefinition",
    "derive_author_flags",
    "derive_field_flags",
    "derive_epoch_flags",
    "derive_seniority_flags",
    "filter_valid",
    "extract_year_range",
    "first_year",
    "Window",
    "classify_interval",
    "IN",
    "OVER",
    "OUT",
    "UNDEFINED",
    "MissingPolicy",
    "RateSpec",
    "rate",
    "apply_policy",
    "aggregate_rates",
    "group_rates",
    "pivot_rates",
    "to_tristate",
    "coerce_flags",
    "is_present",
    "load_task_table",
    "write_table",
    "FactualityEvalError",
    "LoadError",
    "CoercionError",
    "ConfigError",
    "WriteError",
]
