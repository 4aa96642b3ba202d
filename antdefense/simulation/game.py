"""AntGame — the turn loop and the player's command surface.

Each turn runs in a fixed order:

1. Ants act (tunnel by tunnel, step by step)
2. Bees act
3. Places apply their water hazard
4. The hive releases the wave scheduled for this turn

Commands address places by ``"tunnel,step"`` location ids.  Every
expected rejection is returned as a ``Failure`` rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
from loguru import logger
from numpy.random import Generator

from antdefense.colony.ant import Ant, AntType
from antdefense.colony.colony import AntColony, Failure
from antdefense.simulation.config import GameConfig
from antdefense.world.hive import Hive
from antdefense.world.place import Place


class Outcome(Enum):
    """Whether the game is still being decided."""

    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


@dataclass
class AntGame:
    """A single match between a colony and a hive.

    Attributes:
        colony: The defending colony.
        hive: The hive holding scheduled waves.
        rng: Random generator shared by every random draw in the game.
        turn: Number of turns played so far.
    """

    colony: AntColony
    hive: Hive
    rng: Generator
    turn: int = 0

    @classmethod
    def from_config(cls, config: GameConfig) -> AntGame:
        """Build a colony, hive and attack plan from configuration."""
        colony = AntColony(
            food=config.starting_food,
            num_tunnels=config.num_tunnels,
            tunnel_length=config.tunnel_length,
            moat_frequency=config.moat_frequency,
        )
        if config.starting_boosts is not None:
            colony.boosts = dict(config.starting_boosts)
        hive = Hive(bee_armor=config.bee_armor, bee_damage=config.bee_damage)
        for attack_turn, num_bees in sorted(config.waves.items()):
            hive.add_wave(attack_turn, num_bees)
        return cls(colony=colony, hive=hive, rng=np.random.default_rng(config.seed))

    # -- Queries -------------------------------------------------------------

    @property
    def food(self) -> int:
        return self.colony.food

    @property
    def places(self) -> list[list[Place]]:
        return self.colony.places

    @property
    def hive_bee_count(self) -> int:
        return len(self.hive.bees)

    def boost_names(self) -> list[str]:
        return self.colony.boost_names()

    def outcome(self) -> Outcome:
        """Lost once a bee reaches the queen; won once no bees remain."""
        if self.colony.queen_has_bees:
            return Outcome.LOST
        if len(self.colony.all_bees()) + self.hive_bee_count == 0:
            return Outcome.WON
        return Outcome.ONGOING

    # -- Turn loop -----------------------------------------------------------

    def take_turn(self) -> None:
        """Play one full turn and advance the turn counter."""
        logger.debug("-- turn {} --", self.turn)
        self.colony.ants_act(self.rng)
        self.colony.bees_act()
        self.colony.places_act()
        self.hive.invade(self.colony, self.turn, self.rng)
        self.turn += 1

    # -- Commands ------------------------------------------------------------

    def parse_location(self, location: str) -> Place | None:
        """Resolve a ``"tunnel,step"`` id to a grid place; None if illegal."""
        coords = location.split(",")
        if len(coords) != 2:
            return None
        try:
            tunnel, step = (int(c) for c in coords)
        except ValueError:
            return None
        if not (0 <= tunnel < len(self.places) and 0 <= step < len(self.places[tunnel])):
            return None
        return self.places[tunnel][step]

    def deploy_ant(self, ant_type: str, location: str) -> Failure | None:
        """Deploy a new ant of the named type.

        Returns:
            None on success, otherwise the reason it failed.
        """
        kind = AntType.from_name(ant_type)
        if kind is None:
            return Failure.UNKNOWN_ANT_TYPE
        place = self.parse_location(location)
        if place is None:
            return Failure.ILLEGAL_LOCATION
        return self.colony.deploy_ant(Ant.create(kind), place)

    def remove_ant(self, location: str) -> Failure | None:
        place = self.parse_location(location)
        if place is None:
            return Failure.ILLEGAL_LOCATION
        self.colony.remove_ant(place)
        return None

    def boost_ant(self, boost: str, location: str) -> Failure | None:
        place = self.parse_location(location)
        if place is None:
            return Failure.ILLEGAL_LOCATION
        return self.colony.apply_boost(boost, place)
