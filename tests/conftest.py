"""Shared fixtures for the Antdefense test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from antdefense.colony.colony import AntColony
from antdefense.simulation.config import GameConfig
from antdefense.world.hive import Hive


class FixedRng:
    """Stand-in generator returning scripted values, for exact rolls."""

    def __init__(self, rolls: list[float] | None = None, picks: list[int] | None = None):
        self.rolls = list(rolls or [])
        self.picks = list(picks or [])

    def random(self) -> float:
        return self.rolls.pop(0)

    def integers(self, high: int) -> int:
        pick = self.picks.pop(0)
        assert 0 <= pick < high
        return pick


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def fixed_rng() -> type[FixedRng]:
    """Factory for generators with scripted rolls and entrance picks."""
    return FixedRng


@pytest.fixture
def colony() -> AntColony:
    """One tunnel of 8 dry places with plenty of food."""
    return AntColony(food=20, num_tunnels=1, tunnel_length=8)


@pytest.fixture
def wide_colony() -> AntColony:
    """Three tunnels of 4 places, every second place flooded."""
    return AntColony(food=20, num_tunnels=3, tunnel_length=4, moat_frequency=2)


@pytest.fixture
def hive() -> Hive:
    """A hive of 3-armor, 2-damage bees with nothing scheduled."""
    return Hive(bee_armor=3, bee_damage=2)


@pytest.fixture
def default_config() -> GameConfig:
    """Default game config (no YAML file needed)."""
    return GameConfig()
