# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Text Year-Range Extractor
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Pull four-digit year mentions out of free text.

A year token is a run of exactly four digits not touching another digit,
so ``"1950s"`` yields 1950 while ``"12345"`` yields nothing. No
plausibility bounds are applied (``"9999"`` is a year).

Usage::

    extract_year_range("he worked there from 1950 to 1955")  # (1950, 1955)
    first_year("1960s")                                      # 1960
"""

from __future__ import annotations

import re

import pandas as pd

YEAR_TOKEN = re.compile(r"(?<!\d)\d{4}(?!\d)")


def _as_text(value: object) -> str:
    """Treat absent values as empty text."""
    if value is None or value is pd.NA:
        return ""
    if isinstance(value, float) and value != value:
        return ""
    return str(value)


def find_years(text: object) -> list[int]:
    """All year tokens in *text*, in order of appearance."""
    return [int(tok) for tok in YEAR_TOKEN.findall(_as_text(text))]


def first_year(text: object) -> int | None:
    """The first year token in *text*, or None."""
    match = YEAR_TOKEN.search(_as_text(text))
    return int(match.group()) if match else None


def extract_year_range(text: object) -> tuple[int | None, int | None]:
    """Return ``(min_year, max_year)`` over all year tokens, or ``(None, None)``."""
    years = find_years(text)
    if not years:
        return None, None
    return min(years), max(years)


def year_ranges(texts: pd.Series) -> pd.DataFrame:
    """Apply :func:`extract_year_range` row by row.

    Returns a frame aligned to ``texts.index`` with nullable ``Int64``
    columns ``llm_start`` and ``llm_end``.
    """
    pairs = [extract_year_range(t) for t in texts]
    return pd.DataFrame(
        {
            "llm_start": pd.array([p[0] for p in pairs], dtype="Int64"),
            "llm_end": pd.array([p[1] for p in pairs], dtype="Int64"),
        },
        index=texts.index,
    )
