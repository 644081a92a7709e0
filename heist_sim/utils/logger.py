"""Logging utilities and simulation display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from heist_sim.game.engine import MoveRecord
    from heist_sim.game.simulator import GameResult, SimulationSummary
    from heist_sim.models.game_state import GameState


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging to stdout.

    Replaces any handlers left by a previous call, so repeated runs in one
    process (tests, notebooks) pick up the new level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


class SimulationDisplay:
    """Display simulation progress to stdout."""

    def __init__(self, show_moves: bool = False):
        """Initialize display.

        Args:
            show_moves: Whether to print every move of every game
        """
        self.show_moves = show_moves

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_banner(self, num_games: int, max_plies: int, seed: int | None) -> None:
        """Print run parameters."""
        self.print_separator()
        print("HEIST SIMULATOR")
        self.print_separator()
        print(f"Games: {num_games}")
        print(f"Ply cap: {max_plies}")
        if seed is not None:
            print(f"Seed: {seed}")
        print()

    def print_progress(self, game_index: int, num_games: int) -> None:
        """Print progress message."""
        print(f"Game {game_index}")

    def print_move(self, ply: int, move: "MoveRecord", state: "GameState") -> None:
        """Print a move (if show_moves is enabled)."""
        if not self.show_moves:
            return
        print(f"  {ply:>2}. {move}")

    def print_game_end(self, result: "GameResult") -> None:
        """Print game end line (if show_moves is enabled)."""
        if not self.show_moves:
            return
        print(
            f"Game {result.game_number}: {result.outcome.value} "
            f"({result.termination.value}, {result.plies} plies)"
        )

    def print_final_results(self, summary: "SimulationSummary") -> None:
        """Print aggregate results."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()
        print(summary)

        if not summary.total_games:
            return
        print(
            f"  Rates: P1 {summary.player_one_win_rate:.2%} | "
            f"P2 {summary.player_two_win_rate:.2%} | "
            f"stalemate {summary.stalemate_rate:.2%}"
        )
        print(f"  Average plies: {summary.average_plies:.2f}")
        for termination, count in sorted(summary.terminations.items()):
            print(f"  Ended by {termination.value}: {count}")
        for tie_break, count in sorted(summary.tie_breaks.items()):
            print(f"  Decided by {tie_break.value}: {count}")
