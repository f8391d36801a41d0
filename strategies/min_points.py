from strategies.base import RemovalStrategy
from strategies.selection import find_min_points_die, find_zero_point_dice


class MinPointsStrategy(RemovalStrategy):
    """Remove the single lowest-points die."""

    name = 'MinPoints'

    def select(self, view):
        return [find_min_points_die(view)]


class ZeroOrMinStrategy(RemovalStrategy):
    """Remove every zero-point die, or the lowest-points die if there are none."""

    name = 'ZeroOrMin'

    def select(self, view):
        zero_indices = find_zero_point_dice(view)
        if zero_indices:
            return zero_indices
        return [find_min_points_die(view)]


class SameValueStrategy(RemovalStrategy):
    """Remove every die sharing the lowest points value, whatever its faces."""

    name = 'SameValue'

    def select(self, view):
        target = view[find_min_points_die(view)][1]
        return [i for i, (_faces, points) in enumerate(view) if points == target]
