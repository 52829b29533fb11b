# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Table Loader & Writer
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""CSV adapters around the scoring core."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .columns import MISSING_STRINGS
from .exceptions import LoadError, WriteError
from .tasks import TaskDefinition

logger = logging.getLogger("FactualityEval.IO")


def load_task_table(task: TaskDefinition, data_dir: str | Path) -> pd.DataFrame:
    """Read ``<data_dir>/factuality_<task>.csv`` with every column as text.

    Only empty cells and ``NA`` are missing; other spellings such as ``N/A``
    stay text and are judged by the flag coercion.

    Raises :class:`LoadError` if the file or a required column is missing.
    """
    path = Path(data_dir) / f"{task.source_table}.csv"
    if not path.is_file():
        raise LoadError(task.name, f"file not found: {path}")

    try:
        frame = pd.read_csv(
            path,
            dtype=str,
            keep_default_na=False,
            na_values=sorted(MISSING_STRINGS),
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise LoadError(task.name, f"unreadable CSV {path}: {exc}") from exc

    missing = [c for c in task.required_columns if c not in frame.columns]
    if missing:
        raise LoadError(task.name, f"missing required columns {missing} in {path}")

    logger.info("Loaded %d rows from %s", len(frame), path)
    return frame


def write_table(
    frame: pd.DataFrame,
    output_dir: str | Path,
    name: str,
    na_rep: str = "NA",
) -> Path:
    """Write *frame* to ``<output_dir>/<name>.csv`` and return the path."""
    out_dir = Path(output_dir)
    path = out_dir / f"{name}.csv"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        frame.to_csv(path, index=False, na_rep=na_rep)
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}") from exc
    logger.info("Wrote %s (%d rows)", path, len(frame))
    return path
