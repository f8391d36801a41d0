from __future__ import annotations

import os
from typing import Mapping

import numpy as np

from .aggregate import AggregateResult, rank_results


def save_average_scores(results: Mapping[str, AggregateResult], out_dir: str, title: str | None = None) -> bool:
    """
    Save a bar chart of average score per strategy (best first) with one
    standard deviation error bars.
    Returns True if a file was saved, or False if matplotlib is unavailable.
    """
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError:
        return False

    ranked = rank_results(results)
    names = [name for name, _r in ranked]
    xs = np.arange(len(ranked))
    averages = np.array([r.average for _n, r in ranked])
    errors = np.array([r.std_dev for _n, r in ranked])

    fig, ax = plt.subplots(figsize=(max(6, len(names) * 1.2), 4))
    ax.bar(xs, averages, yerr=errors, capsize=4)
    ax.set_xticks(xs)
    ax.set_xticklabels(names, rotation=30, ha="right")
    ax.set_ylabel("Average points (lower is better)")
    if title:
        ax.set_title(title)
    ax.grid(True, axis="y", alpha=0.3)

    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, "average_scores.png")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return True
