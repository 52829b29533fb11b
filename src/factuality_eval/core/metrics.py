# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Run Metrics
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
Prometheus-style counters and timings for an evaluation run.

Usage::

    from factuality_eval.core.metrics import metrics

    metrics.inc("rows_loaded_total", 120, label="epoch")
    with metrics.timer("task_duration_seconds"):
        ...
    print(metrics.prometheus_format())
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class _Counter:
    """Monotonically increasing counter."""

    value: float = 0.0
    labels: dict[str, float] = field(default_factory=dict)

    def inc(self, amount: float = 1.0, label: str = "") -> None:
        if label:
            self.labels[label] = self.labels.get(label, 0.0) + amount
        else:
            self.value += amount

    def total(self) -> float:
        return self.value + sum(self.labels.values())


TASK_DURATION_BUCKETS = (0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0)


@dataclass
class _Histogram:
    """Histogram with configurable bucket boundaries."""

    buckets: tuple[float, ...] = TASK_DURATION_BUCKETS
    _values: list[float] = field(default_factory=list)

    def observe(self, value: float) -> None:
        self._values.append(value)

    @property
    def count(self) -> int:
        return len(self._values)

    @property
    def total(self) -> float:
        return sum(self._values) if self._values else 0.0

    def bucket_counts(self) -> dict[str, int]:
        """Return cumulative bucket counts."""
        result = {}
        for b in self.buckets:
            result[f"le_{b}"] = sum(1 for v in self._values if v <= b)
        result["le_+Inf"] = len(self._values)
        return result


class MetricsCollector:
    """Run-scoped metrics with Prometheus-compatible output."""

    _METRIC_HELP: dict[str, str] = {
        "rows_loaded_total": "Rows read from each input table",
        "rows_valid_total": "Rows kept by the validity filter",
        "rows_rejected_total": "Rows dropped by the validity filter",
        "year_parse_misses_total": "Text cells without a four-digit year",
        "tasks_completed_total": "Tasks scored and written",
        "task_duration_seconds": "Wall time to score one task",
    }

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._counters: dict[str, _Counter] = {
            "rows_loaded_total": _Counter(),
            "rows_valid_total": _Counter(),
            "rows_rejected_total": _Counter(),
            "year_parse_misses_total": _Counter(),
            "tasks_completed_total": _Counter(),
        }
        self._histograms: dict[str, _Histogram] = {
            "task_duration_seconds": _Histogram(),
        }

    def inc(self, name: str, amount: float = 1.0, label: str = "") -> None:
        """Increment a counter."""
        if not self.enabled:
            return
        if name not in self._counters:
            self._counters[name] = _Counter()
        self._counters[name].inc(amount, label)

    def observe(self, name: str, value: float) -> None:
        """Record a histogram observation."""
        if not self.enabled:
            return
        if name not in self._histograms:
            self._histograms[name] = _Histogram()
        self._histograms[name].observe(value)

    def timer(self, histogram_name: str) -> _Timer:
        """Context manager that records elapsed time to a histogram."""
        return _Timer(self, histogram_name)

    def get_metrics(self) -> dict:
        """Return all metrics as a plain dict."""
        result: dict = {"counters": {}, "histograms": {}}
        for name, c in self._counters.items():
            result["counters"][name] = {
                "total": c.total(),
                "labels": dict(c.labels),
            }
        for name, h in self._histograms.items():
            result["histograms"][name] = {"count": h.count, "total": h.total}
        return result

    def prometheus_format(self) -> str:
        """Render metrics in Prometheus text exposition format."""
        lines: list[str] = []
        for name, c in self._counters.items():
            fqn = f"factuality_eval_{name}"
            desc = self._METRIC_HELP.get(name, name)
            lines.append(f"# HELP {fqn} {desc}")
            lines.append(f"# TYPE {fqn} counter")
            if c.labels:
                for label, val in c.labels.items():
                    lines.append(f'{fqn}{{source="{label}"}} {val}')
            else:
                lines.append(f"{fqn} {c.value}")
        for name, h in self._histograms.items():
            fqn = f"factuality_eval_{name}"
            desc = self._METRIC_HELP.get(name, name)
            lines.append(f"# HELP {fqn} {desc}")
            lines.append(f"# TYPE {fqn} histogram")
            for bucket_name, count in h.bucket_counts().items():
                le = bucket_name.replace("le_", "")
                lines.append(f'{fqn}_bucket{{le="{le}"}} {count}')
            lines.append(f"{fqn}_count {h.count}")
            lines.append(f"{fqn}_sum {h.total}")
        return "\n".join(lines) + "\n"

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        for c in self._counters.values():
            c.value = 0.0
            c.labels.clear()
        for h in self._histograms.values():
            h._values.clear()


class _Timer:
    """Context manager for timing operations."""

    def __init__(self, collector: MetricsCollector, name: str) -> None:
        self._collector = collector
        self._name = name
        self._start = 0.0

    def __enter__(self) -> _Timer:
        self._start = time.monotonic()
        return self

    def __exit__(self, *args: object) -> None:
        elapsed = time.monotonic() - self._start
        self._collector.observe(self._name, elapsed)


# Module-level singleton
metrics = MetricsCollector()
