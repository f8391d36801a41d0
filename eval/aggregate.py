from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict
from typing import Dict, List, Mapping, Tuple

import numpy as np


def wilson_ci(k: int, n: int, z: float = 1.959963984540054) -> Tuple[float, float]:
    if n == 0:
        return float("nan"), float("nan")
    p = k / n
    denom = 1 + z * z / n
    center = (p + z * z / (2 * n)) / denom
    half = z * ((p * (1 - p) / n + z * z / (4 * n * n)) ** 0.5) / denom
    return center - half, center + half


@dataclass(frozen=True)
class AggregateResult:
    """Summary of one strategy batch. Lower scores are better."""
    trials: int
    average: float
    minimum: int
    maximum: int
    zero_count: int
    elapsed: float
    std_dev: float = 0.0
    median: int = 0
    p90: int = 0

    @property
    def gravies(self) -> int:
        return self.zero_count

    @property
    def gravy_rate(self) -> float:
        return self.zero_count / self.trials if self.trials else float("nan")

    @property
    def gravy_ci(self) -> Tuple[float, float]:
        return wilson_ci(self.zero_count, self.trials)

    def to_dict(self) -> Dict:
        data = asdict(self)
        lo, hi = self.gravy_ci
        data.update({"gravy_rate": self.gravy_rate, "gravy_ci_low": lo, "gravy_ci_high": hi})
        return data


class ScoreAccumulator:
    """
    Folds per-trial scores into running aggregates. Scores are bounded
    integers, so a histogram is kept instead of the raw list.
    """

    def __init__(self) -> None:
        self.trials = 0
        self.total = 0
        self.minimum: int | None = None
        self.maximum: int | None = None
        self.zero_count = 0
        self.histogram: Counter = Counter()

    def add(self, score: int) -> None:
        self.trials += 1
        self.total += score
        if self.minimum is None or score < self.minimum:
            self.minimum = score
        if self.maximum is None or score > self.maximum:
            self.maximum = score
        if score == 0:
            self.zero_count += 1
        self.histogram[score] += 1

    def result(self, elapsed: float = 0.0) -> AggregateResult:
        if self.trials == 0:
            raise ValueError("cannot summarize an empty batch")
        values = np.array(sorted(self.histogram), dtype=float)
        counts = np.array([self.histogram[int(v)] for v in values], dtype=float)
        average = self.total / self.trials
        variance = float(np.average((values - average) ** 2, weights=counts))
        cdf = np.cumsum(counts) / self.trials
        median = int(values[np.searchsorted(cdf, 0.5)])
        p90 = int(values[min(np.searchsorted(cdf, 0.9), len(values) - 1)])
        return AggregateResult(
            trials=self.trials,
            average=average,
            minimum=int(self.minimum),
            maximum=int(self.maximum),
            zero_count=self.zero_count,
            elapsed=elapsed,
            std_dev=variance ** 0.5,
            median=median,
            p90=p90,
        )


def rank_results(results: Mapping[str, AggregateResult]) -> List[Tuple[str, AggregateResult]]:
    """Results ordered by average score, best first."""
    return sorted(results.items(), key=lambda item: item[1].average)
