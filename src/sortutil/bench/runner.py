"""
Analysis runner: pushes fixed inputs through a caller-supplied sort function
and reports correctness plus call statistics.

Usage (from repo root):
    python -m sortutil.bench.runner configs/analyze.yaml

Config keys:
    sort: "package.module:function"   # required; sorts a SortInterface in place
    inputs: {name: "letters", ...}    # optional; defaults to DEFAULT_INPUTS
    generated:                        # optional; extra inputs from make_dataset
        seed: 0
        sizes: [8, 32]
        dataset: {dist: "random", params: {range: [0, 99]}}
    failed_first: true                # report order
    per_position: false
    log: false                        # log every call to stdout
    log_threshold: 26                 # inline rendering limit for the log
    output_csv: path/to/report.csv    # optional

Design notes:
- Each input is a fresh sequence; nothing is shared between runs.
- A sort function that raises is recorded as status="error"; the remaining
  inputs still run.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, TextIO, Union

import numpy as np
import pandas as pd
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sortutil.bench.measure import measure_sort_call
from sortutil.datasets import Letters, make_dataset
from sortutil.instrument import DEFAULT_INLINE_THRESHOLD, LogConfig
from sortutil.interface import SortInterface

__all__ = ["DEFAULT_INPUTS", "analyze", "print_report", "run_analysis", "main"]

logger = logging.getLogger(__name__)

_console = Console()

DEFAULT_INPUTS: Dict[str, str] = {
    "empty": "",
    "single": "a",
    "sorted": "abcdefghijklmnopqrstuvwxyz",
    "reversed": "zyxwvutsrqponmlkjihgfedcba",
    "repeated": "aaaaaaaa",
    "pairs": "bbaaddccffee",
    "interleaved": "acegikmbdfhjl",
    "organ_pipe": "abcdefgfedcba",
    "sawtooth": "abcabcabcabc",
    "rotated": "hijklmabcdefg",
}

REPORT_COLUMNS = [
    "name", "n", "ok", "status", "sorted", "permutation",
    "length", "less", "swap", "elapsed_ns", "input", "output", "error",
]


# ------------------------- core ------------------------- #

def analyze(
    sort_fn: Callable[[SortInterface], Any],
    inputs: Optional[Mapping[str, Union[str, SortInterface]]] = None,
    *,
    failed_first: bool = True,
    per_position: bool = False,
    log_sink: Optional[TextIO] = None,
    log_config: Optional[LogConfig] = None,
) -> pd.DataFrame:
    """
    Run `sort_fn` over every input and return one report row per input.

    String inputs are turned into `Letters`; anything else is used as given
    (and mutated). Rows are ordered failed-first by default, otherwise
    sorted-first; input order is kept within each group.
    """
    if inputs is None:
        inputs = DEFAULT_INPUTS

    rows: List[Dict[str, Any]] = []
    for name, raw in inputs.items():
        data = Letters.of(raw) if isinstance(raw, str) else raw
        if log_sink is not None:
            log_sink.write(f"--- {name} ---\n")
        res = measure_sort_call(
            sort_fn,
            data,
            log_sink=log_sink,
            log_config=log_config,
            per_position=per_position,
        )
        res["name"] = name
        res["ok"] = res["status"] == "ok" and res["sorted"] and res["permutation"]
        if not res["ok"]:
            logger.warning("input %r failed: %s", name, res["error"] or res["output"])
        positions = res.pop("positions")
        if positions is not None:
            for kind, summary in positions.items():
                for stat_name, value in summary.items():
                    res[f"{kind}_{stat_name}"] = value
        rows.append(res)

    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=REPORT_COLUMNS)
    extra = [c for c in df.columns if c not in REPORT_COLUMNS]
    df = df[REPORT_COLUMNS + extra]
    # False < True, so an ascending sort on `ok` puts failures first.
    df = df.sort_values(
        "ok",
        key=lambda ok: ok if failed_first else ~ok,
        kind="mergesort",
        ignore_index=True,
    )
    logger.info("analyzed %d inputs, %d failed", len(df), int((~df["ok"]).sum()))
    return df


def print_report(report: pd.DataFrame, console: Optional[Console] = None) -> None:
    console = console or _console
    table = Table(title="Sort Analysis")
    table.add_column("Input", style="bold")
    table.add_column("n", justify="right")
    table.add_column("Result")
    for col in ("length", "less", "swap"):
        table.add_column(col.capitalize(), justify="right")
    table.add_column("Output")

    for row in report.itertuples(index=False):
        if row.ok:
            verdict = "[green]sorted[/]"
        elif row.status == "error":
            verdict = "[red]error[/]"
        elif not row.permutation:
            verdict = "[red]corrupted[/]"
        else:
            verdict = "[red]unsorted[/]"
        table.add_row(
            str(row.name), str(row.n), verdict,
            str(row.length), str(row.less), str(row.swap),
            escape(row.error if row.status == "error" else str(row.output)),
        )
    console.print()
    console.print(table)
    console.print()


# ------------------------- config ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a mapping: {path}")
    return cfg


def _resolve_sort(target: Any) -> Callable[[SortInterface], Any]:
    if not isinstance(target, str) or ":" not in target:
        raise ValueError(f"'sort' must be a 'module:function' string; got {target!r}")
    mod_name, _, attr = target.partition(":")
    try:
        mod = importlib.import_module(mod_name)
    except Exception as e:
        raise ImportError(f"Could not import sort module {mod_name!r}: {e!r}") from e
    fn = getattr(mod, attr, None)
    if not callable(fn):
        raise AttributeError(f"{target!r} does not name a callable")
    return fn


def _build_inputs(cfg: Dict[str, Any]) -> Dict[str, Union[str, SortInterface]]:
    inputs: Dict[str, Union[str, SortInterface]] = {}
    literal = cfg.get("inputs")
    if literal is None:
        inputs.update(DEFAULT_INPUTS)
    elif isinstance(literal, dict) and all(isinstance(v, str) for v in literal.values()):
        inputs.update({str(k): v for k, v in literal.items()})
    else:
        raise ValueError("'inputs' must map names to letter strings")

    gen = cfg.get("generated")
    if gen is not None:
        if not isinstance(gen, dict) or "dataset" not in gen or "sizes" not in gen:
            raise ValueError("'generated' needs 'dataset' and 'sizes'")
        rng = np.random.default_rng(int(gen.get("seed", 0)))
        dist = gen["dataset"].get("dist", "?")
        for n in gen["sizes"]:
            inputs[f"{dist}_{int(n)}"] = make_dataset(int(n), dict(gen["dataset"]), rng)
    return inputs


def run_analysis(config_path: Path, console: Optional[Console] = None) -> pd.DataFrame:
    cfg = _load_yaml(config_path)
    if "sort" not in cfg:
        raise ValueError("Missing required config key: 'sort'")

    sort_fn = _resolve_sort(cfg["sort"])
    inputs = _build_inputs(cfg)
    log_config = LogConfig(inline_threshold=int(cfg.get("log_threshold", DEFAULT_INLINE_THRESHOLD)))

    report = analyze(
        sort_fn,
        inputs,
        failed_first=bool(cfg.get("failed_first", True)),
        per_position=bool(cfg.get("per_position", False)),
        log_sink=sys.stdout if cfg.get("log", False) else None,
        log_config=log_config,
    )
    print_report(report, console)

    out = cfg.get("output_csv")
    if out:
        out_path = Path(out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        report.to_csv(out_path, index=False)
        logger.info("wrote report to %s", out_path)
    return report


# ------------------------- CLI ------------------------- #

def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Analyze a sort function over fixed inputs.")
    p.add_argument("config", type=str, help="Path to YAML analysis config")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args()


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        report = run_analysis(config_path)
    except Exception as e:
        _console.print(f"[bold red]Analysis failed:[/bold red] {e!r}")
        raise
    if not report["ok"].all():
        raise SystemExit(1)


if __name__ == "__main__":
    main()
