# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Package Initialisation
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Factuality Eval: score LLM answers against a bibliographic ground truth.

Four question types are scored independently: author existence, field
correctness of a cited publication, epoch agreement, and seniority
agreement::

    from factuality_eval import EvalConfig, FactualityPipeline
"""

__version__ = "1.0.0"

from .core import (
    EvalConfig,
    FactualityEvalError,
    FactualityPipeline,
    MissingPolicy,
    RateSpec,
    RunResult,
    aggregate_rates,
    classify_interval,
    extract_year_range,
    filter_valid,
    rate,
)

__all__ = [
    "EvalConfig",
    "FactualityPipeline",
    "RunResult",
    "FactualityEvalError",
    "MissingPolicy",
    "RateSpec",
    "rate",
    "aggregate_rates",
    "classify_interval",
    "extract_year_range",
    "filter_valid",
]
