import operator
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Set, Tuple

if TYPE_CHECKING:
    from strategies.base import StrategyLike


DEFAULT_FACES = 6
DEFAULT_DICE_COUNT = 12
DISTINGUISHED_FACES = (8, 10, 12)
DEFAULT_COMPOSITION = (DEFAULT_FACES,) * DEFAULT_DICE_COUNT + DISTINGUISHED_FACES


class StrategyContractError(RuntimeError):
    """Raised when a strategy selection would leave the pool unchanged."""


def valid_positions(indices: Iterable, size: int) -> Set[int]:
    """Distinct in-range positions from `indices`. Any integer-like value counts."""
    valid = set()
    for i in indices:
        try:
            i = operator.index(i)
        except TypeError:
            continue
        if 0 <= i < size:
            valid.add(i)
    return valid


def max_score(composition: Sequence[int] = DEFAULT_COMPOSITION) -> int:
    """Worst possible game score: every die removed at its full shortfall."""
    return sum(faces - 1 for faces in composition)


class Die:
    def __init__(self, faces=DEFAULT_FACES, points=None):
        if not isinstance(faces, int) or faces < 2:
            raise ValueError(f"faces must be an integer >= 2, got {faces!r}")
        self.faces = faces
        # unrolled dice carry an out-of-range sentinel; strategies never see it
        self.points = faces if points is None else points

    def roll(self, rng):
        self.points = rng.randrange(self.faces)

    @property
    def rolled_value(self):
        return self.faces - self.points

    def with_points(self, points):
        if not 0 <= points < self.faces:
            raise ValueError(f"points must be in [0, {self.faces - 1}], got {points}")
        self.points = points
        return self

    def __repr__(self):
        return f"Die(faces={self.faces}, points={self.points})"


class DicePool:
    """The live dice of one game. Only ever shrinks."""

    def __init__(self, dice: Optional[Iterable[Die]] = None):
        self.dice: List[Die] = list(dice) if dice is not None else []

    @classmethod
    def from_composition(cls, composition: Iterable[int]) -> "DicePool":
        return cls(Die(faces) for faces in composition)

    @classmethod
    def default(cls) -> "DicePool":
        return cls.from_composition(DEFAULT_COMPOSITION)

    def roll_all(self, rng) -> None:
        for die in self.dice:
            die.roll(rng)

    def view(self) -> Tuple[Tuple[int, int], ...]:
        return tuple((die.faces, die.points) for die in self.dice)

    def remove(self, indices: Iterable[int]) -> int:
        """
        Remove the dice at `indices` and return the sum of their points.
        Indices are resolved against the pool as it was before the call;
        duplicates, negatives and out-of-range positions are ignored.
        """
        n = len(self.dice)
        valid = valid_positions(indices, n)
        points = 0
        for i in sorted(valid, reverse=True):
            points += self.dice.pop(i).points
        return points

    def is_empty(self) -> bool:
        return not self.dice

    def __len__(self):
        return len(self.dice)

    def __iter__(self):
        return iter(self.dice)

    def __str__(self):
        points = " ".join(str(d.points) for d in self.dice)
        faces = " ".join(str(d.faces) for d in self.dice)
        return f"{points}\n{faces}"


@dataclass
class RoundRecord:
    round_num: int
    rolled: Tuple[Tuple[int, int], ...]
    removed: List[int]
    points: int
    total: int


def strategy_name(strategy) -> str:
    return getattr(strategy, "name", None) or getattr(strategy, "__name__", None) or repr(strategy)


def simulate_game(strategy: "StrategyLike", seed=None, rng=None, composition=None, history=None) -> int:
    """
    Play one game to completion and return its score.

    Every round rolls all live dice, asks `strategy` for positions to remove
    and adds the removed dice's points to the total. `strategy` is either an
    object with a `select(view)` method or a plain callable taking the view.
    If `history` is a list, a RoundRecord is appended for each round.
    """
    if rng is None:
        rng = random.Random(seed)
    pool = DicePool.from_composition(composition if composition is not None else DEFAULT_COMPOSITION)
    select = getattr(strategy, "select", strategy)

    total_points = 0
    round_num = 0
    while not pool.is_empty():
        pool.roll_all(rng)
        view = pool.view()
        selected = select(view)
        selected = list(selected) if selected is not None else []
        positions = valid_positions(selected, len(pool))
        if not positions:
            raise StrategyContractError(
                f"strategy {strategy_name(strategy)!r} selected no removable dice "
                f"(selection={selected}, pool={list(view)})"
            )
        points = pool.remove(positions)
        total_points += points
        if history is not None:
            history.append(RoundRecord(
                round_num=round_num,
                rolled=view,
                removed=sorted(positions),
                points=points,
                total=total_points,
            ))
        round_num += 1

    return total_points
