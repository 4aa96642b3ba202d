"""Ant -- the defending units placed in tunnels.

All ant kinds share one class.  The ``kind`` tag selects the per-turn
behaviour in ``Ant.act``:

- **Grower**: rolls for food or a freshly discovered boost.
- **Thrower** / **Scuba**: throw a leaf at the nearest bee up the tunnel;
  a boost changes range or adds a status effect for one throw.  Scuba
  ants additionally survive on water.
- **Eater**: swallows a bee on its own place and spends several turns
  digesting it.  Being hurt early in digestion makes it cough the bee up.
- **Guard**: stacks above another ant, takes the stings aimed at it and
  makes it act from underneath.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from antdefense.colony.insect import BeeStatus, Insect
from antdefense.world.place import Place

if TYPE_CHECKING:
    from numpy.random import Generator

    from antdefense.colony.colony import AntColony
    from antdefense.colony.insect import Bee

# -- Constants ---------------------------------------------------------------

_LEAF_DAMAGE = 1
_LEAF_RANGE = 3
_FLYING_LEAF_RANGE = 5
_BUG_SPRAY_DAMAGE = 10
_DIGEST_TURNS = 3  # counter limit; the bee is gone on the 4th act after swallowing


class AntType(Enum):
    """Every deployable kind of ant."""

    GROWER = "Grower"
    THROWER = "Thrower"
    EATER = "Eater"
    SCUBA = "Scuba"
    GUARD = "Guard"

    @classmethod
    def from_name(cls, name: str) -> AntType | None:
        """Look up a kind by name, ignoring case; None if unknown."""
        for kind in cls:
            if kind.value.lower() == name.strip().lower():
                return kind
        return None


class Boost(str, Enum):
    """Single-use modifiers a grower can discover."""

    FLYING_LEAF = "FlyingLeaf"
    STICKY_LEAF = "StickyLeaf"
    ICY_LEAF = "IcyLeaf"
    BUG_SPRAY = "BugSpray"


# (armor, food cost) per kind
ANT_STATS: dict[AntType, tuple[int, int]] = {
    AntType.GROWER: (1, 1),
    AntType.THROWER: (1, 4),
    AntType.EATER: (2, 4),
    AntType.SCUBA: (1, 5),
    AntType.GUARD: (2, 4),
}

# Upper bounds of the grower's roll, checked in order
_GROWER_ROLLS: list[tuple[float, Boost | None]] = [
    (0.6, None),  # food
    (0.7, Boost.FLYING_LEAF),
    (0.8, Boost.STICKY_LEAF),
    (0.9, Boost.ICY_LEAF),
    (0.95, Boost.BUG_SPRAY),
]


@dataclass(eq=False)
class Ant(Insect):
    """A defending ant.

    Attributes:
        kind: Which behaviour this ant runs each turn.
        food_cost: Food debited from the colony when deployed.
        boost: Name of the boost waiting to be used on the next throw.
        turns_eating: Eater digestion phase (0 = hungry).
        stomach: Eater-only holding place for a swallowed bee.
    """

    kind: AntType = AntType.GROWER
    food_cost: int = 0
    boost: str | None = None
    turns_eating: int = 0
    stomach: Place = field(default_factory=lambda: Place("stomach"), repr=False)

    @classmethod
    def create(cls, kind: AntType) -> Ant:
        """Build a fresh ant with the standard armor and cost for its kind."""
        armor, food_cost = ANT_STATS[kind]
        return cls(armor=armor, kind=kind, food_cost=food_cost)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def is_guard(self) -> bool:
        return self.kind is AntType.GUARD

    @property
    def is_waterproof(self) -> bool:
        return self.kind is AntType.SCUBA

    @property
    def is_full(self) -> bool:
        return bool(self.stomach.bees)

    @property
    def guarded(self) -> Ant | None:
        """For a guard, the ground ant it protects."""
        if not self.is_guard or self.place is None:
            return None
        return self.place.guarded_ant

    def set_boost(self, boost: str) -> None:
        self.boost = boost
        logger.info("{} is given a {}", self, boost)

    def act(self, colony: AntColony, rng: Generator) -> None:
        """Perform this ant's action for the turn.

        Args:
            colony: The colony, for food and boost rewards.
            rng: Seeded random generator.
        """
        match self.kind:
            case AntType.GROWER:
                self._grow(colony, rng)
            case AntType.THROWER | AntType.SCUBA:
                self._throw()
            case AntType.EATER:
                self._eat()
            case AntType.GUARD:
                pass

    def reduce_armor(self, amount: int) -> bool:
        """Take damage; an eater mid-meal may cough its bee back up."""
        if self.kind is not AntType.EATER:
            return super().reduce_armor(amount)

        self.armor -= amount
        logger.debug("{} armor reduced to {}", self, self.armor)
        if self.armor > 0:
            if self.turns_eating == 1:
                self._cough_up()
                self.turns_eating = 3
            return False
        if 0 < self.turns_eating <= 2:
            self._cough_up()
        return self._expire_if_depleted()

    # -- Private behaviour methods --

    def _grow(self, colony: AntColony, rng: Generator) -> None:
        roll = float(rng.random())
        for bound, boost in _GROWER_ROLLS:
            if roll < bound:
                if boost is None:
                    colony.increase_food(1)
                else:
                    colony.add_boost(boost.value)
                return

    def _throw(self) -> None:
        """Throw a leaf, or empty a bug spray onto this place."""
        place = self.place
        if place is None:
            return
        if self.boost == Boost.BUG_SPRAY:
            logger.info("{} sprays bug repellant everywhere!", self)
            self.boost = None
            target = place.closest_bee(0)
            while target is not None:
                target.reduce_armor(_BUG_SPRAY_DAMAGE)
                target = place.closest_bee(0)
            self.reduce_armor(_BUG_SPRAY_DAMAGE)
            return

        reach = _FLYING_LEAF_RANGE if self.boost == Boost.FLYING_LEAF else _LEAF_RANGE
        target = place.closest_bee(reach)
        if target is not None:
            logger.info("{} throws a leaf at {}", self, target)
            target.reduce_armor(_LEAF_DAMAGE)
            if self.boost == Boost.STICKY_LEAF:
                target.status = BeeStatus.STUCK
                logger.info("{} is stuck!", target)
            elif self.boost == Boost.ICY_LEAF:
                target.status = BeeStatus.COLD
                logger.info("{} is cold!", target)
        self.boost = None

    def _eat(self) -> None:
        if self.place is None:
            return
        if self.turns_eating == 0:
            target = self.place.closest_bee(0)
            if target is not None:
                logger.info("{} eats {}!", self, target)
                self.place.remove_bee(target)
                self.stomach.add_bee(target)
                self.turns_eating = 1
        elif self.turns_eating > _DIGEST_TURNS:
            # stomach is empty if the meal was coughed up
            for eaten in list(self.stomach.bees):
                logger.info("{} finishes digesting {}", self, eaten)
                self.stomach.remove_bee(eaten)
            self.turns_eating = 0
        else:
            self.turns_eating += 1

    def _cough_up(self) -> None:
        if not self.stomach.bees or self.place is None:
            return
        eaten: Bee = self.stomach.bees[0]
        self.stomach.remove_bee(eaten)
        self.place.add_bee(eaten)
        logger.info("{} coughs up {}!", self, eaten)
