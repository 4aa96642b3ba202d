"""Place — a single step in a tunnel.

Places form singly linked chains: ``exit`` points toward the queen and
``entrance`` points back toward the hive.  A place holds at most one
ground ant, at most one guard stacked above it, and any number of bees.
Off-grid places (the hive, the queen's chamber, an eater's stomach) use
the same class with ``coords`` left as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from antdefense.colony.ant import Ant
    from antdefense.colony.insect import Bee, Insect


@dataclass(eq=False)
class Place:
    """A node in a tunnel.

    Attributes:
        name: Display name, e.g. ``tunnel[0,3]``.
        water: Whether the place floods non-waterproof ants each turn.
        exit: Next place toward the queen (None for the queen itself).
        entrance: Next place toward the hive (None at the tunnel tail).
        coords: ``(tunnel, step)`` grid index, None for off-grid places.
        ant: The ground ant, if any.
        guard: The guard stacked above the ground ant, if any.
        bees: Bees present, in arrival order.
    """

    name: str
    water: bool = False
    exit: Place | None = field(default=None, repr=False)
    entrance: Place | None = field(default=None, repr=False)
    coords: tuple[int, int] | None = None
    ant: Ant | None = field(default=None, repr=False)
    guard: Ant | None = field(default=None, repr=False)
    bees: list[Bee] = field(default_factory=list, repr=False)

    def __str__(self) -> str:
        return self.name

    @property
    def active_ant(self) -> Ant | None:
        """The ant exposed to stings and boosts: the guard if present."""
        if self.guard is not None:
            return self.guard
        return self.ant

    @property
    def guarded_ant(self) -> Ant | None:
        """The ground ant, which a guard on this place protects."""
        return self.ant

    def closest_bee(self, max_distance: int, min_distance: int = 0) -> Bee | None:
        """Return the first bee within range, walking toward the hive.

        Distance 0 is this place; each ``entrance`` hop adds one.

        Args:
            max_distance: Furthest distance (inclusive) to search.
            min_distance: Nearest distance (inclusive) that counts.

        Returns:
            The first bee at the nearest qualifying place, or None.
        """
        place: Place | None = self
        dist = 0
        while place is not None and dist <= max_distance:
            if dist >= min_distance and place.bees:
                return place.bees[0]
            place = place.entrance
            dist += 1
        return None

    def add_ant(self, ant: Ant) -> bool:
        """Put an ant into its slot if the slot is free.

        Returns:
            True if the ant was placed.
        """
        if ant.is_guard:
            if self.guard is not None:
                return False
            self.guard = ant
        else:
            if self.ant is not None:
                return False
            self.ant = ant
        ant.place = self
        return True

    def remove_ant(self) -> Ant | None:
        """Remove the guard if present, otherwise the ground ant."""
        if self.guard is not None:
            removed, self.guard = self.guard, None
        else:
            removed, self.ant = self.ant, None
        if removed is not None:
            removed.place = None
        return removed

    def add_bee(self, bee: Bee) -> None:
        self.bees.append(bee)
        bee.place = self

    def remove_bee(self, bee: Bee) -> None:
        if bee in self.bees:
            self.bees.remove(bee)
            bee.place = None

    def remove_all_bees(self) -> None:
        for bee in self.bees:
            bee.place = None
        self.bees = []

    def exit_bee(self, bee: Bee) -> None:
        """Move a bee one step toward the queen."""
        if self.exit is None:
            msg = f"{self} has no exit"
            raise ValueError(msg)
        self.remove_bee(bee)
        self.exit.add_bee(bee)

    def remove_insect(self, insect: Insect) -> None:
        """Detach an insect from whichever slot or list holds it."""
        if insect is self.guard:
            self.guard = None
            insect.place = None
        elif insect is self.ant:
            self.ant = None
            insect.place = None
        else:
            self.remove_bee(insect)  # type: ignore[arg-type]

    def act(self) -> None:
        """Apply the end-of-turn water hazard.

        Guards always wash away; the ground ant survives only if it is
        waterproof.
        """
        if not self.water:
            return
        if self.guard is not None:
            logger.info("{} is washed away from {}", self.guard, self)
            self.remove_ant()
        if self.ant is not None and not self.ant.is_waterproof:
            logger.info("{} drowns in {}", self.ant, self)
            self.remove_ant()
