"""Entry point for ``python -m antdefense``.

Loads the YAML config, builds a game and plays it from plain text
commands read on standard input:

    deploy <type> <tunnel,step>
    remove <tunnel,step>
    boost <name> <tunnel,step>
    turn            (or an empty line)
    quit
"""

from __future__ import annotations

import argparse
import pathlib
import sys
from importlib import resources
from typing import TextIO

from loguru import logger

from antdefense.simulation.config import GameConfig
from antdefense.simulation.game import AntGame, Outcome

_DEFAULT_CONFIG = resources.files("antdefense") / "config" / "default.yaml"


def run_command(game: AntGame, line: str) -> str | None:
    """Apply one command line to the game.

    Returns:
        A message for the player, or None when there is nothing to say.
    """
    parts = line.split()
    if not parts or parts[0] == "turn":
        game.take_turn()
        return None

    match parts:
        case ["deploy", ant_type, location]:
            failure = game.deploy_ant(ant_type, location)
        case ["remove", location]:
            failure = game.remove_ant(location)
        case ["boost", boost, location]:
            failure = game.boost_ant(boost, location)
        case _:
            return f"unknown command: {line.strip()}"
    return failure.value if failure is not None else None


def play(game: AntGame, commands: TextIO, out: TextIO) -> Outcome:
    """Read commands until the game is decided, input ends or ``quit``."""
    while game.outcome() is Outcome.ONGOING:
        out.write(
            f"turn {game.turn} | food {game.food} | hive {game.hive_bee_count}"
            f" | boosts {', '.join(game.boost_names()) or '-'}\n> ",
        )
        out.flush()
        line = commands.readline()
        if not line or line.strip() == "quit":
            break
        message = run_command(game, line)
        if message:
            out.write(message + "\n")
    return game.outcome()


def load_config(path: pathlib.Path | None) -> GameConfig:
    """Load a config file, or the one shipped inside the package."""
    if path is not None:
        return GameConfig.from_yaml(path)
    with resources.as_file(_DEFAULT_CONFIG) as bundled:
        return GameConfig.from_yaml(bundled)


def main() -> None:
    """Parse CLI args, create the game, play it from stdin."""
    parser = argparse.ArgumentParser(
        prog="antdefense",
        description="Antdefense - hold the tunnels against the bees",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: the bundled default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config's RNG seed",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every game event, not just warnings",
    )
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    config = load_config(args.config)
    if args.seed is not None:
        config.seed = args.seed
    game = AntGame.from_config(config)

    outcome = play(game, sys.stdin, sys.stdout)
    sys.stdout.write(f"\nGame over after {game.turn} turns: {outcome.value}\n")


if __name__ == "__main__":
    main()
