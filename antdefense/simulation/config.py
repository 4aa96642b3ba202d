"""Config — load game parameters from YAML files.

Board shape, starting resources and the hive's attack plan live in YAML
and are parsed into a typed dataclass here, so new scenarios need no code
changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class GameConfig:
    """Top-level game configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        starting_food: Food available before the first turn.
        num_tunnels: Number of parallel tunnels.
        tunnel_length: Places per tunnel.
        moat_frequency: Every n-th step is water (0 for none).
        bee_armor: Armor of each bee the hive creates.
        bee_damage: Sting damage of each bee the hive creates.
        waves: Attack plan mapping turn number to bee count.
        starting_boosts: Boost inventory at the start; None keeps the
            colony's default inventory.
    """

    seed: int = 42
    starting_food: int = 2
    num_tunnels: int = 3
    tunnel_length: int = 8
    moat_frequency: int = 0

    # Hive
    bee_armor: int = 3
    bee_damage: int = 1
    waves: dict[int, int] = field(default_factory=lambda: {2: 1, 3: 1, 5: 2, 7: 3})

    starting_boosts: dict[str, int] | None = None

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        defaults = cls()
        waves = data.get("waves")
        boosts = data.get("starting_boosts")
        return cls(
            seed=data.get("seed", defaults.seed),
            starting_food=data.get("starting_food", defaults.starting_food),
            num_tunnels=data.get("num_tunnels", defaults.num_tunnels),
            tunnel_length=data.get("tunnel_length", defaults.tunnel_length),
            moat_frequency=data.get("moat_frequency", defaults.moat_frequency),
            bee_armor=data.get("bee_armor", defaults.bee_armor),
            bee_damage=data.get("bee_damage", defaults.bee_damage),
            waves=(
                {int(turn): int(count) for turn, count in waves.items()}
                if waves is not None
                else defaults.waves
            ),
            starting_boosts=(
                {str(name): int(count) for name, count in boosts.items()}
                if boosts is not None
                else None
            ),
        )
