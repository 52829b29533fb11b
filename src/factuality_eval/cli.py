# ─────────────────────────────────────────────────────────────────────
# Factuality Eval — Command Line Interface
# (C) 1998-2026 Miroslav Sotek. All rights reserved.
# License: GNU AGPL v3 | Commercial licensing available
# ─────────────────────────────────────────────────────────────────────
"""
CLI entry point for Factuality Eval.

Usage::

    factuality-eval version
    factuality-eval run
    factuality-eval run --data-dir data/audit --output-dir eval_results
    factuality-eval run --config factuality.yaml --row-flags --metrics
    factuality-eval config --config factuality.yaml
"""

from __future__ import annotations

import dataclasses
import json
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point — dispatches to subcommands."""
    args = argv if argv is not None else sys.argv[1:]

    if not args or args[0] in ("-h", "--help", "help"):
        _print_help()
        return

    cmd = args[0]
    rest = args[1:]

    commands = {
        "version": _cmd_version,
        "run": _cmd_run,
        "config": _cmd_config,
    }

    if cmd not in commands:
        print(f"Unknown command: {cmd}")
        _print_help()
        sys.exit(1)

    commands[cmd](rest)


def _print_help() -> None:
    print(
        "Factuality Eval CLI\n"
        "\n"
        "Usage: factuality-eval <command> [options]\n"
        "\n"
        "Commands:\n"
        "  version               Show version info\n"
        "  run [options]         Score all four tasks and write result tables\n"
        "      --data-dir D      Input directory (factuality_<task>.csv)\n"
        "      --output-dir O    Output directory (<task>_factuality.csv)\n"
        "      --config FILE     YAML configuration file\n"
        "      --row-flags       Also write per-row <task>_flags.csv\n"
        "      --metrics         Print run metrics when done\n"
        "  config [--config F]   Show the effective configuration\n"
    )


def _option(args: list[str], name: str) -> str | None:
    if name not in args:
        return None
    idx = args.index(name)
    if idx + 1 >= len(args):
        print(f"Error: {name} requires a value")
        sys.exit(1)
    return args[idx + 1]


def _load_config(args: list[str]):
    from factuality_eval.core.config import EvalConfig
    from factuality_eval.core.exceptions import ConfigError

    path = _option(args, "--config")
    try:
        config = EvalConfig.from_yaml(path) if path else EvalConfig.from_env()
        overrides: dict = {}
        data_dir = _option(args, "--data-dir")
        if data_dir:
            overrides["data_dir"] = data_dir
        output_dir = _option(args, "--output-dir")
        if output_dir:
            overrides["output_dir"] = output_dir
        if "--row-flags" in args:
            overrides["write_row_flags"] = True
        return dataclasses.replace(config, **overrides)
    except FileNotFoundError:
        print(f"Error: config file not found: {path}")
        sys.exit(1)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _cmd_version(args: list[str]) -> None:
    import factuality_eval

    print(f"factuality-eval {factuality_eval.__version__}")


def _cmd_run(args: list[str]) -> None:
    from factuality_eval.core.exceptions import FactualityEvalError
    from factuality_eval.core.pipeline import FactualityPipeline

    config = _load_config(args)
    config.configure_logging()
    pipeline = FactualityPipeline(config)

    try:
        result = pipeline.run()
    except FactualityEvalError as e:
        print(f"Error: {e}")
        sys.exit(1)

    for name, outcome in result.outcomes.items():
        print(f"[{name}] {outcome.rows_valid}/{outcome.rows_loaded} valid rows")
        print(outcome.result.to_string(index=False, na_rep=config.na_rep))
    print(f"Duration: {result.duration_seconds:.2f}s")
    for path in result.written:
        print(f"Wrote {path}")

    if "--metrics" in args:
        print(pipeline.metrics.prometheus_format())


def _cmd_config(args: list[str]) -> None:
    config = _load_config(args)
    print(json.dumps(config.to_dict(), indent=2))


if __name__ == "__main__":
    main()
