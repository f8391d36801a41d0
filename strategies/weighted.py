"""
Strategies that clear zero-point dice first and otherwise rank the remaining
dice by a per-die score.
"""

from strategies.base import RemovalStrategy
from strategies.selection import (
    expected_shortfall,
    find_zero_point_dice,
    prio_score,
    relative_value_score,
)

DEFAULT_PRIO_WEIGHT = 2


class PrioritizeMaxValueStrategy(RemovalStrategy):
    """
    Pick the die maximizing faces - weight * points, preferring more faces on
    a tie. High-sided dice showing a low shortfall are taken early.
    """

    name = 'PrioritizeMaxValue'

    def __init__(self, name=None, weight=DEFAULT_PRIO_WEIGHT):
        super().__init__(name)
        self.weight = weight

    def select(self, view):
        zero_indices = find_zero_point_dice(view)
        if zero_indices:
            return zero_indices

        best_index = 0
        best_faces = None
        best_score = None
        for i, (faces, points) in enumerate(view):
            score = prio_score(faces, points, self.weight)
            if best_score is None or score > best_score or (score == best_score and faces > best_faces):
                best_score = score
                best_faces = faces
                best_index = i
        return [best_index]


class MinimizeRegretStrategy(RemovalStrategy):
    """Take the die whose removal gives up the least against a re-roll."""

    name = 'MinimizeRegret'

    def select(self, view):
        zero_indices = find_zero_point_dice(view)
        if zero_indices:
            return zero_indices

        best_index = 0
        best_regret = None
        for i, (faces, points) in enumerate(view):
            regret = points - expected_shortfall(faces)
            if best_regret is None or regret < best_regret:
                best_regret = regret
                best_index = i
        return [best_index]


class HybridStrategy(RemovalStrategy):
    """Points weighted by how far the roll fell short relative to the die size."""

    name = 'Hybrid'

    def select(self, view):
        zero_indices = find_zero_point_dice(view)
        if zero_indices:
            return zero_indices

        best_index = 0
        best_score = None
        for i, (faces, points) in enumerate(view):
            score = relative_value_score(faces, points)
            if best_score is None or score < best_score:
                best_score = score
                best_index = i
        return [best_index]
