from typing import Callable, List, Protocol, Union

from strategies.selection import PoolView


class Strategy(Protocol):
    name: str

    def select(self, view: PoolView) -> List[int]: ...


# plain functions taking a view are accepted wherever a strategy is
StrategyLike = Union[Strategy, Callable[[PoolView], List[int]]]


class RemovalStrategy:
    """
    Base for catalog strategies. Subclasses implement `select`; instances are
    also plain callables so they can be used wherever a function is expected.
    Strategies keep no state between calls.
    """

    name = 'strategy'

    def __init__(self, name=None):
        if name is not None:
            self.name = name

    def select(self, view: PoolView) -> List[int]:
        raise NotImplementedError

    def __call__(self, view: PoolView) -> List[int]:
        return self.select(view)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
