"""
Shared fixtures for the zerocoin tests.
"""

import itertools
import random
from typing import Iterable

import pytest

from zerocoin.config import get_settings
from zerocoin.params import AccumulatorParams, GroupParams, ZerocoinParams, generate_toy_params


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: full-size parameter derivation")


class FixedRandomSource:
    """Replays a fixed sequence of draws, cycling when it runs out."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        self._cycle = itertools.cycle(self.values)
        self.calls = []

    def randbelow(self, upper: int) -> int:
        value = next(self._cycle)
        assert 0 <= value < upper, f"fixed draw {value} outside [0, {upper})"
        self.calls.append(upper)
        return value


class SeededRandomSource:
    """Reproducible pseudo-random draws; never use outside tests."""

    def __init__(self, seed: int):
        self._random = random.Random(seed)

    def randbelow(self, upper: int) -> int:
        return self._random.randrange(upper)


@pytest.fixture
def fixed_random():
    return FixedRandomSource


@pytest.fixture
def seeded_random():
    return SeededRandomSource


@pytest.fixture
def toy_params() -> ZerocoinParams:
    """Toy parameters: coin group p=2039, q=1019; accumulator N=209."""
    return generate_toy_params()


@pytest.fixture
def small_group() -> GroupParams:
    """The order-11 subgroup of Z*_23 generated by 2 and 3."""
    return GroupParams(modulus=23, g=2, h=3, order=11).validated()


@pytest.fixture
def tiny_accumulator_params(small_group) -> ZerocoinParams:
    """Accumulator N=35, base 2, coin values in (1, 34)."""
    accumulator = AccumulatorParams(
        modulus=35, base=2, min_coin_value=1, max_coin_value=34, confidence=10
    )
    return ZerocoinParams(small_group, accumulator, security_level=10).validated()


@pytest.fixture
def clean_settings():
    """Drop cached settings before and after a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
