"""AntColony — the grid of tunnels, food stores and boost inventory.

The colony owns every tunnel place and drives the three per-turn phases
in a fixed order: all ants act, then all bees act, then every place
applies its water hazard.  Wave release is triggered by the game after
these phases.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from antdefense.colony.ant import Ant, Boost
from antdefense.world.place import Place

if TYPE_CHECKING:
    from numpy.random import Generator

    from antdefense.colony.insect import Bee


class Failure(str, Enum):
    """Reasons a player command can be rejected."""

    UNKNOWN_ANT_TYPE = "unknown ant type"
    ILLEGAL_LOCATION = "illegal location"
    NOT_ENOUGH_FOOD = "not enough food"
    TUNNEL_OCCUPIED = "tunnel already occupied"
    NO_SUCH_BOOST = "no such boost"
    NO_ANT = "no Ant at location"


def _default_boosts() -> dict[str, int]:
    return {
        Boost.FLYING_LEAF.value: 1,
        Boost.STICKY_LEAF.value: 1,
        Boost.ICY_LEAF.value: 1,
        Boost.BUG_SPRAY.value: 0,
    }


@dataclass
class AntColony:
    """Top-level state for the defending colony.

    Attributes:
        food: Food available for deploying ants.
        num_tunnels: Number of parallel tunnels.
        tunnel_length: Places per tunnel.
        moat_frequency: Every n-th step (counting from 1) is water;
            0 disables water.
        boosts: Discovered boosts, keyed by name.
        places: Grid indexed as ``places[tunnel][step]``; step 0 is next
            to the queen.
        entrances: The hive-side tail place of each tunnel.
        queen_place: The shared place every tunnel exits into.
    """

    food: int
    num_tunnels: int
    tunnel_length: int
    moat_frequency: int = 0
    boosts: dict[str, int] = field(default_factory=_default_boosts)
    places: list[list[Place]] = field(init=False, repr=False)
    entrances: list[Place] = field(init=False, repr=False)
    queen_place: Place = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Dig the tunnels, linking each step to its neighbours."""
        if self.num_tunnels < 1 or self.tunnel_length < 1:
            msg = (
                f"colony needs at least one tunnel of length one, "
                f"got {self.num_tunnels}x{self.tunnel_length}"
            )
            raise ValueError(msg)

        self.queen_place = Place("Ant Queen")
        self.places = []
        self.entrances = []
        for tunnel in range(self.num_tunnels):
            curr = self.queen_place
            row: list[Place] = []
            for step in range(self.tunnel_length):
                water = self.moat_frequency != 0 and (step + 1) % self.moat_frequency == 0
                kind = "water" if water else "tunnel"
                prev = curr
                curr = Place(
                    name=f"{kind}[{tunnel},{step}]",
                    water=water,
                    exit=prev,
                    coords=(tunnel, step),
                )
                if prev is not self.queen_place:
                    prev.entrance = curr
                row.append(curr)
            self.places.append(row)
            self.entrances.append(curr)

    @property
    def queen_has_bees(self) -> bool:
        return bool(self.queen_place.bees)

    def increase_food(self, amount: int) -> None:
        self.food += amount

    def add_boost(self, boost: str) -> None:
        """Record one more discovered boost of the given name."""
        self.boosts[boost] = self.boosts.get(boost, 0) + 1
        logger.info("Found a {}!", boost)

    def boost_names(self) -> list[str]:
        """Names of boosts that can currently be applied."""
        return [name for name, count in self.boosts.items() if count > 0]

    def deploy_ant(self, ant: Ant, place: Place) -> Failure | None:
        """Place a new ant, paying its food cost.

        Args:
            ant: The ant to deploy.
            place: Grid place to put it on.

        Returns:
            None on success, otherwise the reason it failed.
        """
        if self.food < ant.food_cost:
            return Failure.NOT_ENOUGH_FOOD
        if not place.add_ant(ant):
            return Failure.TUNNEL_OCCUPIED
        self.food -= ant.food_cost
        logger.info("Deployed {}", ant)
        return None

    def remove_ant(self, place: Place) -> Ant | None:
        removed = place.remove_ant()
        if removed is not None:
            logger.info("Removed {} from {}", removed.name, place)
        return removed

    def apply_boost(self, boost: str, place: Place) -> Failure | None:
        """Give a discovered boost to the active ant on a place.

        The inventory count is left untouched: a boost, once found, can
        be handed out again.

        Returns:
            None on success, otherwise the reason it failed.
        """
        if self.boosts.get(boost, 0) < 1:
            return Failure.NO_SUCH_BOOST
        ant = place.active_ant
        if ant is None:
            return Failure.NO_ANT
        ant.set_boost(boost)
        return None

    def all_ants(self) -> list[Ant]:
        """Active ants in grid order (a guard hides the ant under it)."""
        return [
            place.active_ant
            for row in self.places
            for place in row
            if place.active_ant is not None
        ]

    def all_bees(self) -> list[Bee]:
        return [bee for row in self.places for place in row for bee in place.bees]

    def ants_act(self, rng: Generator) -> None:
        """Let every ant act; a guard first makes its guarded ant act."""
        for ant in self.all_ants():
            if ant.is_guard:
                guarded = ant.guarded
                if guarded is not None:
                    guarded.act(self, rng)
            ant.act(self, rng)

    def bees_act(self) -> None:
        for bee in self.all_bees():
            bee.act()

    def places_act(self) -> None:
        for row in self.places:
            for place in row:
                place.act()
