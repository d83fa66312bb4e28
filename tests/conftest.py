"""
Pytest fixtures for Memorize tests.
"""

import random

import pytest

from src.memorize.adapters.session_store_memory import InMemorySessionStore
from src.memorize.domain import MemoryGame
from src.memorize.services import config_loader


class ManualClock:
    """Clock whose time only moves when advance() is called."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def two_pair_game(clock, rng) -> MemoryGame[str]:
    """[A, A, B, B] in shuffled order, bonus limit 6 seconds."""
    return MemoryGame(2, lambda i: ["A", "B"][i], bonus_time_limit=6.0, clock=clock, rng=rng)


@pytest.fixture(autouse=True)
def reset_runtime_config():
    """Each test starts without runtime config."""
    config_loader.set_runtime_config(None)
    yield
    config_loader.set_runtime_config(None)


