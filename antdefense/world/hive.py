"""Hive — the off-grid place bee waves launch from.

Bees are created up front when a wave is scheduled and wait inside the
hive until their turn comes, then each one flies to a random tunnel
entrance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

from antdefense.colony.insect import Bee
from antdefense.world.place import Place

if TYPE_CHECKING:
    from numpy.random import Generator

    from antdefense.colony.colony import AntColony


@dataclass(eq=False)
class Hive(Place):
    """A place that holds scheduled bee waves.

    Attributes:
        bee_armor: Armor of every bee this hive creates.
        bee_damage: Sting damage of every bee this hive creates.
        waves: Bees to release, keyed by the turn they attack.
    """

    name: str = "Hive"
    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, list[Bee]] = field(default_factory=dict, repr=False)

    def add_wave(self, attack_turn: int, num_bees: int) -> Hive:
        """Create a wave of bees and park them in the hive.

        Args:
            attack_turn: Turn on which the wave leaves the hive.
            num_bees: Number of bees in the wave.

        Returns:
            This hive, so calls can be chained.
        """
        wave = self.waves.setdefault(attack_turn, [])
        for _ in range(num_bees):
            bee = Bee(armor=self.bee_armor, damage=self.bee_damage)
            self.add_bee(bee)
            wave.append(bee)
        return self

    def invade(self, colony: AntColony, current_turn: int, rng: Generator) -> list[Bee]:
        """Release the wave scheduled for ``current_turn``, if any.

        Each bee lands on a colony entrance chosen uniformly at random.

        Args:
            colony: The colony whose tunnels are invaded.
            current_turn: The turn being played.
            rng: Seeded random generator.

        Returns:
            The bees released this turn (empty if none were scheduled).
        """
        wave = self.waves.pop(current_turn, None)
        if not wave:
            return []
        entrances = colony.entrances
        for bee in wave:
            self.remove_bee(bee)
            entrance = entrances[int(rng.integers(len(entrances)))]
            entrance.add_bee(bee)
        logger.info("{} bees leave the hive on turn {}", len(wave), current_turn)
        return wave
