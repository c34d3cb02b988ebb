import pytest

from tickfactory.content import build_miner
from tickfactory.content.resources import COPPER, IRON
from tickfactory.simulation import Bundle, Clock, Miner, Recipe, ResourceKind
from tickfactory.simulation.territory import _open_territory


@pytest.fixture
def clock() -> Clock:
    return Clock(log=False)


@pytest.fixture
def ore() -> ResourceKind:
    return ResourceKind("A")


@pytest.fixture
def ingot() -> ResourceKind:
    return ResourceKind("B")


@pytest.fixture
def smelting(ore, ingot) -> Recipe:
    """Two A into one B every ten ticks."""
    return Recipe.declare("smelting", 10, inputs=[(2, ore)], outputs=[(1, ingot)])


@pytest.fixture
def supply():
    """
    Hand-mine bundles of any kind.

    Mining happens on a clock of its own, so the clock under test is untouched.
    """
    source = Clock(log=False)

    def mine(kind: ResourceKind, amount: int) -> Bundle:
        return _open_territory(kind, source, max_miners=0).hand_mine(source, amount)

    return mine


@pytest.fixture
def make_miner(supply):
    def build() -> Miner:
        return build_miner(supply(IRON, 10), supply(COPPER, 5))

    return build
