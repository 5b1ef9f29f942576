"""
Shared fixtures for Neon Pong tests
"""

import pytest

from neon_pong.utils.config import GameConfig


class SequenceRandom:
    """Random source replaying fixed values, cycling when exhausted"""

    def __init__(self, *values: float):
        self.values = list(values) or [0.5]
        self.index = 0

    def random(self) -> float:
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value


@pytest.fixture
def config() -> GameConfig:
    """Fresh default configuration"""
    return GameConfig()


@pytest.fixture
def make_rng():
    """Factory for deterministic random sources"""
    return SequenceRandom


@pytest.fixture
def rng() -> SequenceRandom:
    """Random source always returning 0.5"""
    return SequenceRandom(0.5)
