from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Mapping

from tqdm import tqdm

from strategies.registry import available_strategies

from .aggregate import AggregateResult, rank_results
from .experiment_config import EvaluationConfig, DEFAULT_TRIALS
from .plots import save_average_scores
from .profiles import available_profiles, DEFAULT_PROFILE
from .runner import run_experiment

logger = logging.getLogger(__name__)


def _make_progress(total: int, desc: str = "Simulating games"):
    bar_format = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}, {rate_fmt}]"
    return tqdm(total=total, desc=desc, unit="game", dynamic_ncols=True, bar_format=bar_format)


def format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000:.2f}ms"
    return f"{seconds:.2f}s"


def format_results_table(results: Mapping[str, AggregateResult]) -> str:
    lines = [
        f"{'Strategy':<30} {'Avg Points':<10} {'Min':>4} {'Gravies':>8} {'Max':>4} {'Time':>10}",
        "-" * 72,
    ]
    for name, r in rank_results(results):
        lines.append(
            f"{name:<30} {r.average:>10.2f} {r.minimum:>4} {r.zero_count:>8} {r.maximum:>4} "
            f"{format_duration(r.elapsed):>10}"
        )
    return "\n".join(lines)


def _write_json(path: str, obj) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)


def _parse_name_list(s: str) -> List[str]:
    names = [x.strip() for x in s.split(",") if x.strip()]
    if not names:
        raise argparse.ArgumentTypeError(f"Invalid strategy list: {s!r}")
    return names


def cmd_run(args: argparse.Namespace) -> int:
    strategies = args.strategies if args.strategies is not None else available_strategies()
    cfg = EvaluationConfig(
        name=args.name,
        trial_count=int(args.trials),
        strategies=strategies,
        composition_profile=args.profile,
        seed_offset=int(args.seed_offset),
        out_dir=args.out,
    )
    try:
        cfg.validate()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Simulating {cfg.trial_count} games for each strategy...")
    progress = None
    if not args.no_progress:
        progress = _make_progress(cfg.trial_count * len(cfg.strategies))
    try:
        results = run_experiment(cfg, progress=progress)
    finally:
        if progress is not None:
            progress.close()

    print()
    print(format_results_table(results))

    if cfg.out_dir:
        os.makedirs(cfg.out_dir, exist_ok=True)
        _write_json(os.path.join(cfg.out_dir, "config.json"), json.loads(cfg.to_json()))
        summary = {
            "name": cfg.name,
            "trial_count": cfg.trial_count,
            "composition_profile": cfg.composition_profile,
            "seed_offset": cfg.seed_offset,
            "results": [dict(strategy=name, **r.to_dict()) for name, r in rank_results(results)],
        }
        _write_json(os.path.join(cfg.out_dir, "summary.json"), summary)
        if not args.no_plot:
            saved = save_average_scores(results, cfg.out_dir, title=f"Average points: {cfg.name}")
            if not saved:
                logger.warning("matplotlib not available; skipping plot")
        print(f"Outputs saved to: {cfg.out_dir}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    print("Strategies:")
    for name in available_strategies():
        print(f"  {name}")
    print("Composition profiles:")
    for name in available_profiles():
        print(f"  {name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dice-eval", description="Monte Carlo comparison of dice removal strategies")
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_run = sub.add_parser("run", help="Simulate games for each strategy and print a ranked table")
    p_run.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="Games per strategy")
    p_run.add_argument("--strategies", type=_parse_name_list, default=None,
                       help="Comma-separated strategy names (default: all registered)")
    p_run.add_argument("--profile", default=DEFAULT_PROFILE, help="Dice composition profile")
    p_run.add_argument("--seed-offset", type=int, default=0, help="Seed of the first trial")
    p_run.add_argument("--name", default="strategy_eval", help="Experiment name")
    p_run.add_argument("--out", default=None, help="Directory for config.json/summary.json (optional)")
    p_run.add_argument("--no-plot", action="store_true", help="Do not generate plot")
    p_run.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    p_run.set_defaults(func=cmd_run)

    p_list = sub.add_parser("list", help="List registered strategies and composition profiles")
    p_list.set_defaults(func=cmd_list)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
