# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Evaluation Pipeline
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
End-to-end scoring of the four factuality tasks.

Per task: validity filter → tri-state coercion → flag derivation → rate
aggregation. :meth:`FactualityPipeline.run` loads every input table before
scoring anything, so a load error never leaves partial output behind.

Usage::

    from factuality_eval.core.pipeline import FactualityPipeline

    result = FactualityPipeline(EvalConfig(data_dir="data/audit")).run()
    print(result.outcomes["field"].result)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from .aggregate import aggregate_rates
from .columns import coerce_flags
from .config import EvalConfig
from .exceptions import LoadError
from .io import load_task_table, write_table
from .metrics import MetricsCollector, metrics
from .tasks import TASKS, TaskDefinition, task_param_counts
from .validity import filter_valid

logger = logging.getLogger("FactualityEval.Pipeline")


@dataclass
class TaskOutcome:
    """Scored result of one task."""

    task: str
    result: pd.DataFrame  # one-row rate table
    flags: pd.DataFrame  # valid rows with derived per-row flags
    rows_loaded: int = 0
    rows_valid: int = 0
    parse_misses: dict[str, int] = field(default_factory=dict)


@dataclass
class RunResult:
    """Outcome of a full run across all tasks."""

    outcomes: dict[str, TaskOutcome] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)
    duration_seconds: float = 0.0


class FactualityPipeline:
    """Score model answers for every configured task.

    Parameters
    ----------
    config : EvalConfig | None — run settings (defaults when None).
    collector : MetricsCollector | None — metrics sink. When None the module
        singleton is used, or a private disabled collector if the config
        turns metrics off; the singleton itself is never switched off.
    """

    def __init__(
        self,
        config: EvalConfig | None = None,
        collector: MetricsCollector | None = None,
    ) -> None:
        self.config = config or EvalConfig()
        if collector is None:
            collector = (
                metrics
                if self.config.metrics_enabled
                else MetricsCollector(enabled=False)
            )
        else:
            collector.enabled = self.config.metrics_enabled
        self.metrics = collector

    def score_task(self, task: TaskDefinition, records: pd.DataFrame) -> TaskOutcome:
        """Score one task over an in-memory record set."""
        missing = [c for c in task.required_columns if c not in records.columns]
        if missing:
            raise LoadError(task.name, f"missing required columns {missing}")

        with self.metrics.timer("task_duration_seconds"):
            valid = filter_valid(records, self.config.valid_flag, task=task.name)
            flags = task.derive(coerce_flags(valid, task.flag_columns))
            result = aggregate_rates(flags, task.rates, group_by=task.group_by)

        outcome = TaskOutcome(
            task=task.name,
            result=result,
            flags=flags,
            rows_loaded=len(records),
            rows_valid=len(valid),
            parse_misses=_parse_misses(flags),
        )
        self._record(outcome)
        return outcome

    def evaluate(self, tables: Mapping[str, pd.DataFrame]) -> dict[str, TaskOutcome]:
        """Score every known task present in *tables*, keyed by task name."""
        unknown = sorted(set(tables) - set(TASKS))
        if unknown:
            raise ValueError(f"Unknown tasks {unknown}. Choose from: {list(TASKS)}")
        return {
            name: self.score_task(task, tables[name])
            for name, task in TASKS.items()
            if name in tables
        }

    def load(self) -> dict[str, pd.DataFrame]:
        """Load every input table from ``config.data_dir``."""
        tables = {
            name: load_task_table(task, self.config.data_dir)
            for name, task in TASKS.items()
        }
        counts = task_param_counts(tables["seniority"])
        if counts:
            logger.info("Seniority requests by task_param: %s", counts)
        return tables

    def run(self) -> RunResult:
        """Load, score and write all four result tables."""
        start = time.monotonic()
        outcomes = self.evaluate(self.load())

        written: list[Path] = []
        for name, outcome in outcomes.items():
            task = TASKS[name]
            written.append(
                write_table(
                    outcome.result,
                    self.config.output_dir,
                    task.result_table,
                    na_rep=self.config.na_rep,
                )
            )
            if self.config.write_row_flags:
                written.append(
                    write_table(
                        outcome.flags,
                        self.config.output_dir,
                        f"{name}_flags",
                        na_rep=self.config.na_rep,
                    )
                )
            self.metrics.inc("tasks_completed_total", label=name)

        duration = time.monotonic() - start
        logger.info("Scored %d tasks in %.2fs", len(outcomes), duration)
        return RunResult(outcomes=outcomes, written=written, duration_seconds=duration)

    def _record(self, outcome: TaskOutcome) -> None:
        rejected = outcome.rows_loaded - outcome.rows_valid
        self.metrics.inc("rows_loaded_total", outcome.rows_loaded, label=outcome.task)
        self.metrics.inc("rows_valid_total", outcome.rows_valid, label=outcome.task)
        self.metrics.inc("rows_rejected_total", rejected, label=outcome.task)
        for column, count in outcome.parse_misses.items():
            self.metrics.inc(
                "year_parse_misses_total", count, label=f"{outcome.task}.{column}"
            )
        logger.info(
            "Task %s: %d rows, %d valid, %d filtered out",
            outcome.task,
            outcome.rows_loaded,
            outcome.rows_valid,
            rejected,
            extra={"task": outcome.task},
        )
        if any(outcome.parse_misses.values()):
            logger.info(
                "Task %s: rows without a four-digit year %s",
                outcome.task,
                outcome.parse_misses,
                extra={"task": outcome.task},
            )


def _parse_misses(flags: pd.DataFrame) -> dict[str, int]:
    """Count undefined windows by the text column they were parsed from."""
    sources = {"task_param": "req_start", "years": "llm_start"}
    return {
        text: int(flags[window].isna().sum())
        for text, window in sources.items()
        if window in flags.columns
    }
