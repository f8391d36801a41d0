from sim.dice_game import DEFAULT_FACES
from strategies.base import RemovalStrategy
from strategies.selection import (
    count_big_dice,
    find_big_min_die,
    find_big_zero_dice,
    find_zero_point_dice,
)


class ZeroOrBigMinStrategy(RemovalStrategy):
    """Remove every zero-point die, else the lowest-points die with ties to bigger dice."""

    name = 'ZeroOrBigMin'

    def select(self, view):
        zero_indices = find_zero_point_dice(view)
        if zero_indices:
            return zero_indices
        return [find_big_min_die(view)]


class BigZeroOrMinStrategy(RemovalStrategy):
    """
    Distinguished (non-default face) dice showing zero are cleared first.

    - If every remaining distinguished die is at zero, all zero-point dice
      of any size go together.
    - Otherwise only the distinguished zeros are taken.
    - With no distinguished zeros, a single default zero is taken while
      distinguished dice remain, or all zeros once none remain.
    - Failing all that, the lowest-points die with ties to bigger dice.
    """

    name = 'BigZeroOrMin'

    def __init__(self, name=None, default_faces=DEFAULT_FACES):
        super().__init__(name)
        self.default_faces = default_faces

    def select(self, view):
        big_dice_count = count_big_dice(view, self.default_faces)

        big_zeros = find_big_zero_dice(view, self.default_faces)
        if big_zeros:
            if len(big_zeros) == big_dice_count:
                return find_zero_point_dice(view)
            return big_zeros

        all_zeros = find_zero_point_dice(view)
        if all_zeros:
            if big_dice_count == 0:
                return all_zeros
            return [all_zeros[0]]

        return [find_big_min_die(view)]
