# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Validity Filter
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────

from __future__ import annotations

import pandas as pd

from .exceptions import LoadError

VALID_FLAG_COLUMN = "result_valid_flag"
DEFAULT_VALID_FLAG = "valid"


def filter_valid(
    frame: pd.DataFrame,
    flag: str = DEFAULT_VALID_FLAG,
    task: str = "records",
) -> pd.DataFrame:
    """Keep only rows explicitly marked usable for scoring.

    Row order and index labels are preserved so derived per-row flags stay
    attached to the record they came from. Filtering twice is a no-op.
    """
    if VALID_FLAG_COLUMN not in frame.columns:
        raise LoadError(task, f"missing required column '{VALID_FLAG_COLUMN}'")
    mask = frame[VALID_FLAG_COLUMN].eq(flag).fillna(False).astype(bool)
    return frame.loc[mask].copy()
