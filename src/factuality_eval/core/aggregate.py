# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Rate Aggregator
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Reduce tri-state flag columns to pass rates.

A rate is ``count(True) / count(True or False)``. How missing entries are
treated is chosen per metric through a :class:`RateSpec`:

- ``MissingPolicy.EXCLUDE`` — missing counts in neither numerator nor
  denominator.
- ``MissingPolicy.AS_FALSE`` — missing counts as a failure.

A rate with nothing to count is undefined: ``None`` from :func:`rate`,
NaN inside result frames. It is never reported as 0.0.

Usage::

    specs = [RateSpec("adf_ok", "strict_pass"), RateSpec("doi_ok", "doi_resolved")]
    table = aggregate_rates(flags, specs)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd


class MissingPolicy:
    """Names for how a rate treats missing entries."""

    EXCLUDE = "exclude"
    AS_FALSE = "as_false"

    ALL = (EXCLUDE, AS_FALSE)


MISSING_GROUP_LABEL = "NA"


@dataclass(frozen=True)
class RateSpec:
    """One output rate: result column *name* computed from flag *column*."""

    name: str
    column: str
    missing: str = MissingPolicy.EXCLUDE

    def __post_init__(self) -> None:
        if self.missing not in MissingPolicy.ALL:
            raise ValueError(
                f"Unknown missing policy '{self.missing}'. "
                f"Choose from: {list(MissingPolicy.ALL)}"
            )


def _as_tristate(values: pd.Series | Iterable[object]) -> pd.Series:
    if isinstance(values, pd.Series):
        return values.astype("boolean")
    return pd.Series(list(values), dtype="object").astype("boolean")


def apply_policy(values: pd.Series | Iterable[object], missing: str) -> pd.Series:
    """Return *values* as a tri-state series with *missing* applied per row."""
    if missing not in MissingPolicy.ALL:
        raise ValueError(f"Unknown missing policy '{missing}'")
    series = _as_tristate(values)
    if missing == MissingPolicy.AS_FALSE:
        return series.fillna(False)
    return series


def rate(
    values: pd.Series | Iterable[object],
    missing: str = MissingPolicy.EXCLUDE,
) -> float | None:
    """Fraction of counted entries that are True, or None if none are counted."""
    counted = apply_policy(values, missing).dropna()
    if counted.empty:
        return None
    return int(counted.sum()) / len(counted)


def _cell(value: float | None) -> float:
    return np.nan if value is None else value


def group_rates(
    frame: pd.DataFrame,
    spec: RateSpec,
    by: str,
) -> dict[str, float | None]:
    """Rate of *spec* per distinct value of *by*, keys sorted.

    Rows with a missing group key form their own ``"NA"`` group.
    """
    keys = frame[by].astype("string").fillna(MISSING_GROUP_LABEL)
    return {
        str(key): rate(group[spec.column], spec.missing)
        for key, group in frame.groupby(keys, sort=True)
    }


def pivot_rates(rates: Mapping[str, float | None]) -> pd.DataFrame:
    """Reshape a ``{group: rate}`` mapping to one row, one column per group.

    No groups gives an empty frame rather than a row without columns.
    """
    if not rates:
        return pd.DataFrame()
    return pd.DataFrame([{k: _cell(v) for k, v in rates.items()}])


def aggregate_rates(
    frame: pd.DataFrame,
    specs: Sequence[RateSpec],
    group_by: str | None = None,
) -> pd.DataFrame:
    """Compute every spec over *frame* and return a one-row result table.

    With *group_by*, exactly one spec is allowed and the result is the wide
    per-group layout from :func:`pivot_rates`.
    """
    if group_by is not None:
        if len(specs) != 1:
            raise ValueError(
                f"Grouped aggregation takes exactly one rate, got {len(specs)}"
            )
        return pivot_rates(group_rates(frame, specs[0], group_by))

    row = {s.name: _cell(rate(frame[s.column], s.missing)) for s in specs}
    return pd.DataFrame([row], columns=[s.name for s in specs])
