import sys
from itertools import cycle
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import ClockworkConfig
from clockwork import TreeBuilder, Store


class ScriptedRandom:
    """Deterministic RandomSource: every call returns the next scripted value."""

    def __init__(self, integers=(1000,), dice=(10, 4), signs=(1,)):
        self._integers = cycle(integers)
        self._dice = cycle(dice)
        self._signs = cycle(signs)
        self.calls = []

    def integer(self, low, high):
        value = next(self._integers)
        self.calls.append(('integer', low, high))
        return value

    def die(self, sides):
        value = next(self._dice)
        self.calls.append(('die', sides))
        return value

    def pick(self, options):
        sign = next(self._signs)
        self.calls.append(('pick', tuple(options)))
        return sign


@pytest.fixture
def scripted_random_factory():
    return ScriptedRandom


@pytest.fixture
def scripted_random(scripted_random_factory):
    return scripted_random_factory()


@pytest.fixture
def builder(scripted_random):
    return TreeBuilder(ClockworkConfig(), scripted_random)


@pytest.fixture
def seeded_builder():
    return TreeBuilder(ClockworkConfig(random_seed=1234))


@pytest.fixture
def store(seeded_builder):
    return Store(seeded_builder)
