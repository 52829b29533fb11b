# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Tri-state Flag Columns
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Strict conversion of raw flag columns into pandas ``"boolean"`` series.

Flags arrive from CSV as text. Each cell becomes ``True``, ``False`` or
``pd.NA``. Numeric text equal to 0 or 1 (``"1.0"``) counts as a flag; anything else raises :class:`CoercionError` so that a malformed
value never leaks into a rate denominator.

Usage::

    from factuality_eval.core.columns import coerce_flags

    frame = coerce_flags(frame, ["is_in_aps"])
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np
import pandas as pd

from .exceptions import CoercionError

TRUE_STRINGS = frozenset({"TRUE", "True", "true", "T", "1"})
FALSE_STRINGS = frozenset({"FALSE", "False", "false", "F", "0"})
MISSING_STRINGS = frozenset({"", "NA"})


def _coerce_cell(value: object, column: str, row: object) -> object:
    if value is None or value is pd.NA:
        return pd.NA
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)):
        if value in (0, 1):
            return bool(value)
        raise CoercionError(column, row, value)
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return pd.NA
        if value in (0.0, 1.0):
            return bool(value)
        raise CoercionError(column, row, value)
    if isinstance(value, str):
        text = value.strip()
        if text in MISSING_STRINGS:
            return pd.NA
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
        try:
            number = float(text)
        except ValueError:
            raise CoercionError(column, row, value) from None
        if number in (0.0, 1.0):
            return bool(number)
    raise CoercionError(column, row, value)


def to_tristate(values: pd.Series, column: str | None = None) -> pd.Series:
    """Convert *values* to a nullable boolean series, preserving the index."""
    name = column or str(values.name)
    cells = [_coerce_cell(v, name, label) for label, v in values.items()]
    return pd.Series(cells, index=values.index, dtype="boolean", name=values.name)


def coerce_flags(frame: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    """Return a copy of *frame* with each of *columns* coerced to tri-state."""
    return frame.assign(**{c: to_tristate(frame[c], c) for c in columns})


def is_present(values: pd.Series) -> pd.Series:
    """Boolean series that is True where an identifier was resolved."""
    return values.notna().astype("boolean")
