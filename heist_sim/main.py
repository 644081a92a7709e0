"""Main entry point for the heist simulator."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from heist_sim.config import ConfigError, GameLogConfig, load_config
from heist_sim.game.simulator import Simulator
from heist_sim.logging import GameLogger
from heist_sim.utils.logger import SimulationDisplay, setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Monte Carlo simulator for the art heist card game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to simulate (overrides config)",
    )
    parser.add_argument(
        "--max-plies",
        type=int,
        help="Ply cap per game before it counts as a stalemate (overrides config)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible run (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-moves",
        action="store_true",
        help="Print every move of every game",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Path of a JSONL file to append game events to",
    )

    args = parser.parse_args(argv)

    # Load config, then apply command-line overrides
    try:
        config = load_config(args.config)
        if args.num_games is not None:
            config.simulation.num_games = args.num_games
        if args.max_plies is not None:
            config.simulation.max_plies = args.max_plies
        if args.seed is not None:
            config.simulation.seed = args.seed
    except (ConfigError, ValidationError) as e:
        parser.error(str(e))
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_moves:
        config.logging.show_moves = True
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))

    setup_logging(config.logging.level)

    display = SimulationDisplay(show_moves=config.logging.show_moves)
    display.print_banner(
        config.simulation.num_games,
        config.simulation.max_plies,
        config.simulation.seed,
    )
    if config.game_log.enabled:
        print(f"Game log: {config.game_log.output_path}")

    try:
        with GameLogger(config.game_log) as game_logger:
            simulator = Simulator(config, game_logger)
            simulator.set_callbacks(
                on_move=display.print_move,
                on_progress=display.print_progress,
                on_game_end=display.print_game_end,
            )

            summary = simulator.run_games()
            display.print_final_results(summary)

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Simulation aborted: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
