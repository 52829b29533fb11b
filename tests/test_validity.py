# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Validity Filter Tests
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────

import pandas as pd
import pytest

from factuality_eval.core.exceptions import LoadError
from factuality_eval.core.validity import filter_valid


@pytest.fixture
def records():
    return pd.DataFrame(
        {
            "result_valid_flag": ["valid", "invalid", None, "valid", "VALID"],
            "value": [1, 2, 3, 4, 5],
        },
        index=[10, 11, 12, 13, 14],
    )


class TestFilterValid:
    def test_keeps_only_valid_rows(self, records):
        out = filter_valid(records)
        assert out["value"].tolist() == [1, 4]

    def test_preserves_row_identity(self, records):
        out = filter_valid(records)
        assert list(out.index) == [10, 13]

    def test_idempotent(self, records):
        once = filter_valid(records)
        twice = filter_valid(once)
        pd.testing.assert_frame_equal(once, twice)

    def test_exact_match_only(self, records):
        # "VALID" and missing flags never count as valid
        out = filter_valid(records)
        assert 14 not in out.index
        assert 12 not in out.index

    def test_custom_flag(self, records):
        out = filter_valid(records, flag="invalid")
        assert list(out.index) == [11]

    def test_does_not_mutate_input(self, records):
        before = records.copy()
        filter_valid(records)
        pd.testing.assert_frame_equal(records, before)

    def test_empty_frame(self):
        out = filter_valid(pd.DataFrame({"result_valid_flag": []}))
        assert out.empty

    def test_missing_flag_column_raises(self):
        with pytest.raises(LoadError, match="result_valid_flag"):
            filter_valid(pd.DataFrame({"value": [1]}), task="author")
