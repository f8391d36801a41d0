"""
Shared selection helpers for removal strategies.

A pool view is an ordered sequence of (faces, points) pairs. Every helper
returns positions into that sequence.
"""

from typing import List, Sequence, Tuple

from sim.dice_game import DEFAULT_FACES

PoolView = Sequence[Tuple[int, int]]


def find_zero_point_dice(view: PoolView) -> List[int]:
    """Positions of all dice that rolled their maximum face."""
    return [i for i, (_faces, points) in enumerate(view) if points == 0]


def find_big_zero_dice(view: PoolView, default_faces: int = DEFAULT_FACES) -> List[int]:
    """Positions of zero-point dice whose face count is not the default."""
    return [i for i, (faces, points) in enumerate(view) if points == 0 and faces != default_faces]


def count_big_dice(view: PoolView, default_faces: int = DEFAULT_FACES) -> int:
    return sum(1 for faces, _points in view if faces != default_faces)


def find_min_points_die(view: PoolView) -> int:
    """Lowest points; the first one wins a tie."""
    min_index = 0
    min_points = None
    for i, (_faces, points) in enumerate(view):
        if min_points is None or points < min_points:
            min_points = points
            min_index = i
    return min_index


def find_big_min_die(view: PoolView) -> int:
    """Lowest points; ties go to the die with more faces, then to the first."""
    return min(range(len(view)), key=lambda i: (view[i][1], -view[i][0]))


def prio_score(faces: int, points: int, weight: int) -> int:
    return faces - weight * points


def expected_shortfall(faces: int) -> float:
    """Expected points of a fresh roll of a die with `faces` faces."""
    return faces - (faces + 1) / 2


def relative_value_score(faces: int, points: int) -> float:
    rolled_value = faces - points
    return points * (1 + (1 - rolled_value / faces))
