import pytest
import random
from sim.dice_game import DicePool, Die
from strategies.registry import available_strategies, make_strategy
from tests.fixtures.sample_pools import PoolViews


@pytest.fixture
def deterministic_seed():
    """Provides fixed random seed for reproducible tests"""
    return 42


@pytest.fixture
def seeded_rng(deterministic_seed):
    return random.Random(deterministic_seed)


@pytest.fixture
def default_pool():
    """Provides a fresh, unrolled default pool"""
    return DicePool.default()


@pytest.fixture
def four_dice_pool():
    """Provides one die of each size with pinned points [3, 1, 5, 2]"""
    return DicePool([
        Die(6).with_points(3),
        Die(8).with_points(1),
        Die(10).with_points(5),
        Die(12).with_points(2),
    ])


@pytest.fixture
def mixed_view():
    return PoolViews.mixed_no_zero()


@pytest.fixture(params=available_strategies())
def any_strategy(request):
    """Parametrized over every registered strategy"""
    return make_strategy(request.param)


@pytest.fixture
def all_strategies():
    return {name: make_strategy(name) for name in available_strategies()}
