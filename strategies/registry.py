from functools import partial
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from strategies.base import StrategyLike

from strategies.big_dice import BigZeroOrMinStrategy, ZeroOrBigMinStrategy
from strategies.min_points import MinPointsStrategy, SameValueStrategy, ZeroOrMinStrategy
from strategies.weighted import HybridStrategy, MinimizeRegretStrategy, PrioritizeMaxValueStrategy

# Registration order is the order batches run and results are reported in.
STRATEGIES: Dict[str, Callable] = {
    'MinPoints': MinPointsStrategy,
    'ZeroOrMin': ZeroOrMinStrategy,
    'SameValue': SameValueStrategy,
    'PrioritizeMaxValue': PrioritizeMaxValueStrategy,
    'PrioritizeMaxValue(k=4)': partial(PrioritizeMaxValueStrategy, name='PrioritizeMaxValue(k=4)', weight=4),
    'MinimizeRegret': MinimizeRegretStrategy,
    'Hybrid': HybridStrategy,
    'ZeroOrBigMin': ZeroOrBigMinStrategy,
    'BigZeroOrMin': BigZeroOrMinStrategy,
}


def available_strategies() -> List[str]:
    return list(STRATEGIES)


def register_strategy(name: str, factory: Callable) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("strategy name must be a non-empty string")
    if name in STRATEGIES:
        raise ValueError(f"Strategy already registered: {name}")
    if not callable(factory):
        raise ValueError(f"factory for {name} must be callable")
    STRATEGIES[name] = factory


def make_strategy(strategy_name: str, /, **kwargs):
    """Build the registered strategy. `kwargs` go to its factory, including `name`."""
    factory = STRATEGIES.get(strategy_name)
    if factory is None:
        raise ValueError(f"Unknown strategy: {strategy_name}")
    return factory(**kwargs)


def default_strategies(names: Optional[Iterable[str]] = None) -> List[Tuple[str, StrategyLike]]:
    """(name, strategy) pairs for `names`, or for the whole registry."""
    selected = list(names) if names is not None else available_strategies()
    return [(name, make_strategy(name)) for name in selected]
