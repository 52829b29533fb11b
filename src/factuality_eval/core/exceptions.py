# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Exception Hierarchy
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Structured exception hierarchy for Factuality Eval.

All library-specific exceptions descend from ``FactualityEvalError`` so
callers can catch the entire family with a single except clause.
"""

from __future__ import annotations


class FactualityEvalError(Exception):
    """Base exception for all Factuality Eval errors."""


class LoadError(FactualityEvalError):
    """Raised when an input table or one of its required columns is missing."""

    def __init__(self, task: str, detail: str):
        self.task = task
        self.detail = detail
        super().__init__(f"Cannot load '{task}' table: {detail}")


class CoercionError(FactualityEvalError, ValueError):
    """Raised when a flag cell cannot be read as a boolean."""

    def __init__(self, column: str, row: object, value: object):
        self.column = column
        self.row = row
        self.value = value
        super().__init__(
            f"Column '{column}' row {row!r}: cannot read {value!r} as a boolean"
        )


class ConfigError(FactualityEvalError, ValueError):
    """Raised for invalid configuration values."""


class WriteError(FactualityEvalError):
    """Raised when a result table cannot be written."""
