from __future__ import annotations

import logging
import random
import time
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from sim.dice_game import DEFAULT_COMPOSITION, StrategyContractError, simulate_game
from strategies.base import StrategyLike
from strategies.registry import default_strategies

from .aggregate import AggregateResult, ScoreAccumulator
from .experiment_config import EvaluationConfig
from .profiles import get_composition

logger = logging.getLogger(__name__)

StrategySet = Union[Mapping[str, StrategyLike], Iterable[Tuple[str, StrategyLike]]]


def _progress_update(progress: Optional[object], done: int, total: int) -> None:
    """
    `progress` can be either an object with an `update(int)` method
    (e.g. a tqdm instance) or a callable taking (done, total).
    """
    if progress is None:
        return
    upd = getattr(progress, "update", None)
    if callable(upd):
        upd(1)
    elif callable(progress):
        progress(done, total)


def run_batch(
    strategy: StrategyLike,
    trial_count: int,
    composition: Optional[Sequence[int]] = None,
    rng_factory: Optional[Callable[[int], object]] = None,
    seed_offset: int = 0,
    progress: Optional[object] = None,
) -> AggregateResult:
    """
    Play `trial_count` independent games with `strategy` and summarize them.
    Trial i draws its rolls from rng_factory(seed_offset + i), which defaults
    to random.Random, so a given trial always produces the same score.
    """
    if not isinstance(trial_count, int) or trial_count <= 0:
        raise ValueError("trial_count must be a positive integer")
    if rng_factory is None:
        rng_factory = random.Random
    if composition is None:
        composition = DEFAULT_COMPOSITION

    acc = ScoreAccumulator()
    t0 = time.time()
    for i in range(trial_count):
        seed = seed_offset + i
        try:
            score = simulate_game(strategy, rng=rng_factory(seed), composition=composition)
        except StrategyContractError:
            logger.error("Aborting batch: contract violation in trial %d (seed %d)", i, seed)
            raise
        logger.debug("trial %d seed %d score %d", i, seed, score)
        acc.add(score)
        _progress_update(progress, i + 1, trial_count)
    return acc.result(elapsed=time.time() - t0)


def _named_pairs(strategies: StrategySet) -> Sequence[Tuple[str, StrategyLike]]:
    items = list(strategies.items()) if isinstance(strategies, Mapping) else list(strategies)
    seen = set()
    for name, _strategy in items:
        if name in seen:
            raise ValueError(f"Duplicate strategy name: {name}")
        seen.add(name)
    return items


def evaluate(
    strategies: StrategySet,
    trial_count: int,
    composition: Optional[Sequence[int]] = None,
    rng_factory: Optional[Callable[[int], object]] = None,
    seed_offset: int = 0,
    progress: Optional[object] = None,
) -> Dict[str, AggregateResult]:
    """
    Run one batch per strategy, in order, and return name -> AggregateResult.
    A contract violation in any batch aborts the whole evaluation.
    """
    pairs = _named_pairs(strategies)
    results: Dict[str, AggregateResult] = {}
    for name, strategy in pairs:
        logger.info("Simulating %d games for %s", trial_count, name)
        result = run_batch(
            strategy,
            trial_count,
            composition=composition,
            rng_factory=rng_factory,
            seed_offset=seed_offset,
            progress=progress,
        )
        logger.info(
            "%s: avg %.2f min %d max %d gravies %d in %.2fs",
            name, result.average, result.minimum, result.maximum, result.zero_count, result.elapsed,
        )
        results[name] = result
    return results


def run_experiment(cfg: EvaluationConfig, progress: Optional[object] = None) -> Dict[str, AggregateResult]:
    """Validate `cfg`, build its strategies and composition, and evaluate them."""
    cfg.validate()
    return evaluate(
        default_strategies(cfg.strategies),
        cfg.trial_count,
        composition=get_composition(cfg.composition_profile),
        seed_offset=cfg.seed_offset,
        progress=progress,
    )
