"""Insect base class and the Bee attacker.

Insects keep a back reference to the place they occupy; the place owns
membership.  Running out of armor is a normal lifecycle event: the
insect detaches itself from its place and the caller is told it expired.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from antdefense.colony.ant import Ant
    from antdefense.world.place import Place


class BeeStatus(Enum):
    """One-turn effects a thrown leaf can leave on a bee."""

    STUCK = "stuck"
    COLD = "cold"


@dataclass(eq=False)
class Insect:
    """Common state for ants and bees.

    Attributes:
        armor: Remaining armor; the insect expires at 0 or below.
        place: The place currently holding this insect, if any.
    """

    armor: int
    place: Place | None = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        where = self.place.name if self.place is not None else ""
        return f"{self.name}({where})"

    def reduce_armor(self, amount: int) -> bool:
        """Take damage, removing this insect from play if armor runs out.

        Args:
            amount: Armor to subtract.

        Returns:
            True if the insect expired.
        """
        self.armor -= amount
        return self._expire_if_depleted()

    def _expire_if_depleted(self) -> bool:
        if self.armor > 0:
            return False
        logger.info("{} ran out of armor and expired", self)
        if self.place is not None:
            self.place.remove_insect(self)
        return True


@dataclass(eq=False)
class Bee(Insect):
    """An attacker that advances toward the queen and stings blockers.

    Attributes:
        damage: Armor removed from an ant per sting.
        status: Effect applied by the last leaf hit, cleared every act.
    """

    damage: int = 1
    status: BeeStatus | None = None

    def sting(self, ant: Ant) -> bool:
        """Sting an ant; returns True if the ant expired."""
        logger.info("{} stings {}!", self, ant)
        return ant.reduce_armor(self.damage)

    @property
    def is_blocked(self) -> bool:
        return self.place is not None and self.place.active_ant is not None

    def act(self) -> None:
        """Sting a blocking ant or move one step toward the queen."""
        place = self.place
        if place is not None:
            if self.is_blocked:
                if self.status is not BeeStatus.COLD:
                    self.sting(place.active_ant)  # type: ignore[arg-type]
            elif self.armor > 0 and self.status is not BeeStatus.STUCK:
                place.exit_bee(self)
        self.status = None
