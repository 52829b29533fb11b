# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Interval Classifier
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Relationship between an observed year window and a requested one.

Categories, checked in this order:

- ``Undefined`` — either window has an undefined endpoint.
- ``In``   — observed window lies fully inside the requested window.
- ``Out``  — no overlap at all.
- ``Over`` — anything else. This includes an observed window that fully
  *contains* the requested one: a superset is ``Over``, not ``In``.

Closed intervals: touching endpoints overlap, so they are never ``Out``.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

IN = "In"
OVER = "Over"
OUT = "Out"
UNDEFINED = "Undefined"

CATEGORIES = (IN, OVER, OUT, UNDEFINED)


def _endpoint(value: object) -> int | None:
    if value is None or value is pd.NA:
        return None
    if isinstance(value, float) and value != value:
        return None
    return int(value)  # type: ignore[call-overload]


@dataclass(frozen=True)
class Window:
    """Closed integer year interval ``[start, end]``."""

    start: int | None
    end: int | None

    @classmethod
    def of(cls, value: Window | tuple | None) -> Window:
        if value is None:
            return cls(None, None)
        if isinstance(value, Window):
            return value
        start, end = value
        return cls(_endpoint(start), _endpoint(end))

    @property
    def defined(self) -> bool:
        return self.start is not None and self.end is not None


def classify_interval(
    observed: Window | tuple | None,
    requested: Window | tuple | None,
) -> str:
    """Classify *observed* against *requested*; see module docstring."""
    a = Window.of(observed)
    b = Window.of(requested)
    if not (a.defined and b.defined):
        return UNDEFINED
    a1, a2, b1, b2 = a.start, a.end, b.start, b.end
    if a1 >= b1 and a2 <= b2:  # type: ignore[operator]
        return IN
    if a2 < b1 or a1 > b2:  # type: ignore[operator]
        return OUT
    return OVER


def classify_windows(
    frame: pd.DataFrame,
    observed: tuple[str, str] = ("llm_start", "llm_end"),
    requested: tuple[str, str] = ("req_start", "req_end"),
) -> pd.Series:
    """Row-wise :func:`classify_interval` over four window columns."""
    o1, o2 = observed
    r1, r2 = requested
    labels = [
        classify_interval((a1, a2), (b1, b2))
        for a1, a2, b1, b2 in zip(frame[o1], frame[o2], frame[r1], frame[r2])
    ]
    return pd.Series(labels, index=frame.index, dtype="string")
