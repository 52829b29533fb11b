# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Shared Test Fixtures
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────

import pandas as pd
import pytest

from factuality_eval.core.config import EvalConfig
from factuality_eval.core.metrics import MetricsCollector


def _frame(columns, rows):
    return pd.DataFrame(rows, columns=columns, dtype=object)


@pytest.fixture
def author_records():
    """A: [T, F, T], B: [T], plus one invalid row."""
    return _frame(
        ["task_name", "result_valid_flag", "is_in_aps"],
        [
            ["A", "valid", "TRUE"],
            ["A", "valid", "FALSE"],
            ["A", "valid", "TRUE"],
            ["B", "valid", "TRUE"],
            ["A", "invalid", "FALSE"],
        ],
    )


@pytest.fixture
def field_records():
    return _frame(
        ["result_valid_flag", "id_author_oa", "id_publication_aps", "fact_doi_author_field"],
        [
            ["valid", "A1", "P1", "TRUE"],
            ["valid", "A2", None, None],
            ["valid", None, None, "FALSE"],
            ["invalid", "A4", "P4", "TRUE"],
        ],
    )


@pytest.fixture
def epoch_records():
    """One row per category: In, Out, Over, Undefined, plus one invalid row."""
    return _frame(
        ["result_valid_flag", "task_param", "years", "id_author_oa", "fact_epoch_requested"],
        [
            ["valid", "1950s", "he worked there from 1950 to 1955", "A1", "TRUE"],
            ["valid", "1950s", "between 1960 and 1965", None, "FALSE"],
            ["valid", "1950", "active 1955-1965", "A3", None],
            ["valid", "1950s", "no years here", "A4", "TRUE"],
            ["invalid", "1950s", "1950", "A5", "TRUE"],
        ],
    )


@pytest.fixture
def seniority_records():
    return _frame(
        [
            "result_valid_flag",
            "task_param",
            "id_author_oa",
            "fact_seniority_active_requested",
            "fact_seniority_now_requested",
            "fact_seniority_active",
            "fact_seniority_now",
        ],
        [
            ["valid", "senior", "A1", None, "TRUE", "TRUE", "FALSE"],
            ["valid", "junior", None, None, None, None, None],
            ["valid", "senior", "A3", "FALSE", "FALSE", "FALSE", "TRUE"],
            ["invalid", "junior", "A4", "TRUE", "TRUE", "TRUE", "TRUE"],
        ],
    )


@pytest.fixture
def tables(author_records, field_records, epoch_records, seniority_records):
    """All four task tables keyed by task name."""
    return {
        "author": author_records,
        "field": field_records,
        "epoch": epoch_records,
        "seniority": seniority_records,
    }


@pytest.fixture
def audit_dir(tmp_path, tables):
    """Directory holding factuality_<task>.csv for every task."""
    data_dir = tmp_path / "audit"
    data_dir.mkdir()
    for name, frame in tables.items():
        frame.to_csv(data_dir / f"factuality_{name}.csv", index=False)
    return data_dir


@pytest.fixture
def config(audit_dir, tmp_path):
    """EvalConfig pointing at the fixture audit directory."""
    return EvalConfig(data_dir=str(audit_dir), output_dir=str(tmp_path / "results"))


@pytest.fixture
def collector():
    """Fresh MetricsCollector for each test."""
    return MetricsCollector()
