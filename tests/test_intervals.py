# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Interval Classifier Tests
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────

import pandas as pd
import pytest

from factuality_eval.core.intervals import (
    CATEGORIES,
    IN,
    OUT,
    OVER,
    UNDEFINED,
    Window,
    classify_interval,
    classify_windows,
)

DECADE = (1950, 1959)


class TestClassifyInterval:
    def test_identical_is_in(self):
        assert classify_interval((1950, 1959), DECADE) == IN

    def test_strictly_inside_is_in(self):
        assert classify_interval((1952, 1955), DECADE) == IN

    def test_disjoint_after_is_out(self):
        assert classify_interval((1960, 1969), DECADE) == OUT

    def test_disjoint_before_is_out(self):
        assert classify_interval((1930, 1949), DECADE) == OUT

    def test_partial_overlap_is_over(self):
        assert classify_interval((1955, 1965), DECADE) == OVER

    def test_superset_is_over_not_in(self):
        # Known quirk: a window containing the whole decade is not "In".
        assert classify_interval((1945, 1965), DECADE) == OVER

    @pytest.mark.parametrize("observed", [(1940, 1950), (1959, 1970)])
    def test_touching_boundary_is_never_out(self, observed):
        assert classify_interval(observed, DECADE) == OVER

    def test_single_year_inside(self):
        assert classify_interval((1959, 1959), DECADE) == IN

    @pytest.mark.parametrize(
        "observed,requested",
        [
            (None, DECADE),
            ((None, None), DECADE),
            ((1950, None), DECADE),
            ((1950, 1955), (None, None)),
            ((pd.NA, 1955), DECADE),
            ((float("nan"), 1955), DECADE),
        ],
    )
    def test_any_undefined_endpoint_is_undefined(self, observed, requested):
        assert classify_interval(observed, requested) == UNDEFINED

    def test_accepts_window_objects(self):
        assert classify_interval(Window(1950, 1955), Window(1950, 1959)) == IN


class TestWindow:
    def test_defined(self):
        assert Window(1950, 1959).defined
        assert not Window(1950, None).defined

    def test_of_tuple_converts_nullable_ints(self):
        w = Window.of((pd.array([1950], dtype="Int64")[0], pd.NA))
        assert w.start == 1950
        assert w.end is None


class TestClassifyWindows:
    def test_row_wise(self):
        frame = pd.DataFrame(
            {
                "llm_start": pd.array([1950, 1960, 1955, None], dtype="Int64"),
                "llm_end": pd.array([1955, 1965, 1965, None], dtype="Int64"),
                "req_start": pd.array([1950, 1950, 1950, 1950], dtype="Int64"),
                "req_end": pd.array([1959, 1959, 1959, 1959], dtype="Int64"),
            },
            index=[3, 5, 7, 9],
        )
        labels = classify_windows(frame)
        assert list(labels.index) == [3, 5, 7, 9]
        assert list(labels) == [IN, OUT, OVER, UNDEFINED]
        assert set(labels) == set(CATEGORIES)
