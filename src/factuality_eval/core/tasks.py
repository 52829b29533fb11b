# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Per-Task Flag Derivation
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Per-row outcome flags for the four question types.

Each unit takes validity-filtered records whose flag columns are already
tri-state (see :mod:`factuality_eval.core.columns`) and returns a new frame
with derived columns appended. Missing-value handling belongs to each task
and differs between them:

============  ==============================================================
Task          Missing ground truth
============  ==============================================================
author        ``author_match`` keeps missing; excluded from the rate.
field         ``strict_pass`` missing counts as a fail.
epoch         ``epoch_match`` keeps missing; excluded from the rate. Rows
              without a usable window are ``Undefined`` and False in every
              one-hot category column.
seniority     per-frame matches keep missing; ``matched_either`` treats
              missing as False before the OR.
============  ==============================================================
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pandas as pd

from .aggregate import MissingPolicy, RateSpec, apply_policy
from .columns import is_present
from .intervals import IN, OUT, OVER, classify_windows
from .years import first_year, year_ranges

DECADE_SPAN = 9

# Missing-value policies, one per derived flag that substitutes anything.
FIELD_STRICT_MISSING = MissingPolicy.AS_FALSE
SENIORITY_EITHER_MISSING = MissingPolicy.AS_FALSE


def derive_author_flags(records: pd.DataFrame) -> pd.DataFrame:
    """``author_match``: the suggested name is a real APS author."""
    return records.assign(author_match=records["is_in_aps"])


def derive_field_flags(records: pd.DataFrame) -> pd.DataFrame:
    """Author resolved (A), DOI resolved (D) and the strict A.D.F. pass."""
    return records.assign(
        author_resolved=is_present(records["id_author_oa"]),
        doi_resolved=is_present(records["id_publication_aps"]),
        strict_pass=apply_policy(
            records["fact_doi_author_field"], FIELD_STRICT_MISSING
        ),
    )


def requested_windows(task_param: pd.Series) -> pd.DataFrame:
    """Requested decade ``[year, year + 9]`` from the first year in each param."""
    start = pd.array([first_year(t) for t in task_param], dtype="Int64")
    return pd.DataFrame(
        {"req_start": start, "req_end": start + DECADE_SPAN},
        index=task_param.index,
    )


def derive_epoch_flags(records: pd.DataFrame) -> pd.DataFrame:
    """Compare the years mentioned in the answer with the requested decade."""
    windows = pd.concat(
        [requested_windows(records["task_param"]), year_ranges(records["years"])],
        axis=1,
    )
    category = classify_windows(windows)
    return records.assign(
        req_start=windows["req_start"],
        req_end=windows["req_end"],
        llm_start=windows["llm_start"],
        llm_end=windows["llm_end"],
        txt_category=category,
        in_txt=category.eq(IN).astype("boolean"),
        out_txt=category.eq(OUT).astype("boolean"),
        over_txt=category.eq(OVER).astype("boolean"),
        epoch_match=records["fact_epoch_requested"],
        author_resolved=is_present(records["id_author_oa"]),
    )


def derive_seniority_flags(records: pd.DataFrame) -> pd.DataFrame:
    """Ground-truth match per frame ("then", "now") plus text alignment."""
    then = records["fact_seniority_active_requested"]
    now = records["fact_seniority_now_requested"]
    either = apply_policy(then, SENIORITY_EITHER_MISSING) | apply_policy(
        now, SENIORITY_EITHER_MISSING
    )
    return records.assign(
        author_resolved=is_present(records["id_author_oa"]),
        match_then=then,
        match_now=now,
        matched_either=either,
        then_txt=records["fact_seniority_active"],
        now_txt=records["fact_seniority_now"],
    )


@dataclass(frozen=True)
class TaskDefinition:
    """Everything the pipeline needs to score one question type."""

    name: str
    required_columns: tuple[str, ...]
    flag_columns: tuple[str, ...]
    derive: Callable[[pd.DataFrame], pd.DataFrame]
    rates: tuple[RateSpec, ...]
    group_by: str | None = None

    @property
    def source_table(self) -> str:
        return f"factuality_{self.name}"

    @property
    def result_table(self) -> str:
        return f"{self.name}_factuality"


AUTHOR = TaskDefinition(
    name="author",
    required_columns=("result_valid_flag", "task_name", "is_in_aps"),
    flag_columns=("is_in_aps",),
    derive=derive_author_flags,
    rates=(RateSpec("author_frac", "author_match"),),
    group_by="task_name",
)

FIELD = TaskDefinition(
    name="field",
    required_columns=(
        "result_valid_flag",
        "id_author_oa",
        "id_publication_aps",
        "fact_doi_author_field",
    ),
    flag_columns=("fact_doi_author_field",),
    derive=derive_field_flags,
    rates=(
        RateSpec("author_ok", "author_resolved"),
        RateSpec("doi_ok", "doi_resolved"),
        RateSpec("adf_ok", "strict_pass", FIELD_STRICT_MISSING),
    ),
)

EPOCH = TaskDefinition(
    name="epoch",
    required_columns=(
        "result_valid_flag",
        "task_param",
        "years",
        "id_author_oa",
        "fact_epoch_requested",
    ),
    flag_columns=("fact_epoch_requested",),
    derive=derive_epoch_flags,
    rates=(
        RateSpec("author_exists", "author_resolved"),
        RateSpec("match", "epoch_match"),
        RateSpec("In_txt", "in_txt"),
        RateSpec("Out_txt", "out_txt"),
        RateSpec("Over_txt", "over_txt"),
    ),
)

SENIORITY = TaskDefinition(
    name="seniority",
    required_columns=(
        "result_valid_flag",
        "id_author_oa",
        "fact_seniority_active_requested",
        "fact_seniority_now_requested",
        "fact_seniority_active",
        "fact_seniority_now",
    ),
    flag_columns=(
        "fact_seniority_active_requested",
        "fact_seniority_now_requested",
        "fact_seniority_active",
        "fact_seniority_now",
    ),
    derive=derive_seniority_flags,
    rates=(
        RateSpec("author_exists", "author_resolved"),
        RateSpec("match_then", "match_then"),
        RateSpec("match_now", "match_now"),
        RateSpec("then_txt_alignment", "then_txt"),
        RateSpec("now_txt_alignment", "now_txt"),
    ),
)

TASKS: dict[str, TaskDefinition] = {
    t.name: t for t in (AUTHOR, FIELD, EPOCH, SENIORITY)
}


def task_param_counts(records: pd.DataFrame) -> dict[str, int]:
    """How often each ``task_param`` value occurs (missing counted as ``"NA"``)."""
    if "task_param" not in records.columns:
        return {}
    counts = records["task_param"].astype("string").fillna("NA").value_counts()
    return {str(k): int(v) for k, v in counts.sort_index().items()}
