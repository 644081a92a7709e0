"""Monte Carlo driver: plays many independent games and counts outcomes."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable

from pydantic import BaseModel, Field

from heist_sim.config import Config
from heist_sim.logging import GameLogger
from heist_sim.models.card import new_deck
from heist_sim.models.game_state import GameState
from heist_sim.models.hand import Score
from heist_sim.models.player import Player
from heist_sim.strategy import RandomStrategy, Strategy

from .engine import GameEngine, MoveRecord, Termination
from .winner import TieBreak

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Result category of one game."""

    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"
    STALEMATE = "stalemate"

    @classmethod
    def from_winner(cls, winner: Player | None) -> "Outcome":
        if winner is None:
            return cls.STALEMATE
        return cls.PLAYER_ONE if winner is Player.ONE else cls.PLAYER_TWO


class GameResult(BaseModel):
    """Result of a single simulated game."""

    game_number: int
    outcome: Outcome
    termination: Termination
    plies: int
    player_one_score: Score
    player_two_score: Score
    decided_by: TieBreak | None = None  # None for stalemates

    @property
    def winner(self) -> Player | None:
        if self.outcome is Outcome.PLAYER_ONE:
            return Player.ONE
        if self.outcome is Outcome.PLAYER_TWO:
            return Player.TWO
        return None


class SimulationSummary(BaseModel):
    """Aggregate counts over a batch of games."""

    total_games: int = 0
    player_one_wins: int = 0
    player_two_wins: int = 0
    stalemates: int = 0
    total_plies: int = 0
    terminations: dict[Termination, int] = Field(default_factory=dict)
    tie_breaks: dict[TieBreak, int] = Field(default_factory=dict)

    def record(self, result: GameResult) -> None:
        """Add one game to the totals."""
        self.total_games += 1
        self.total_plies += result.plies
        if result.outcome is Outcome.PLAYER_ONE:
            self.player_one_wins += 1
        elif result.outcome is Outcome.PLAYER_TWO:
            self.player_two_wins += 1
        else:
            self.stalemates += 1

        self.terminations[result.termination] = (
            self.terminations.get(result.termination, 0) + 1
        )
        if result.decided_by is not None:
            self.tie_breaks[result.decided_by] = (
                self.tie_breaks.get(result.decided_by, 0) + 1
            )

    def _rate(self, count: int) -> float:
        return count / self.total_games if self.total_games else 0.0

    @property
    def player_one_win_rate(self) -> float:
        return self._rate(self.player_one_wins)

    @property
    def player_two_win_rate(self) -> float:
        return self._rate(self.player_two_wins)

    @property
    def stalemate_rate(self) -> float:
        return self._rate(self.stalemates)

    @property
    def average_plies(self) -> float:
        return self._rate(self.total_plies)

    def __str__(self) -> str:
        return (
            f"Player 1 wins: {self.player_one_wins}, "
            f"Player 2 wins: {self.player_two_wins}, "
            f"Stalemates: {self.stalemates}"
        )


class Simulator:
    """Runs independent games under a ply cap and aggregates the results."""

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        strategy: Strategy | None = None,
    ):
        """Initialize simulator.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            strategy: Decision maker (random, seeded from config, if not provided)
        """
        self.config = config or Config()
        self.settings = self.config.simulation
        self.game_logger = game_logger

        self.rng = random.Random(self.settings.seed)
        self.engine = GameEngine(strategy or RandomStrategy(self.rng))
        self.engine.set_callbacks(on_move=self._handle_move)

        self._game_number = 0
        self._ply = 0
        self._on_move: Callable[[int, MoveRecord, GameState], None] | None = None
        self._on_progress: Callable[[int, int], None] | None = None
        self._on_game_end: Callable[[GameResult], None] | None = None

    def set_callbacks(
        self,
        on_move: Callable[[int, MoveRecord, GameState], None] | None = None,
        on_progress: Callable[[int, int], None] | None = None,
        on_game_end: Callable[[GameResult], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_move: Called after each ply (ply number, move, state)
            on_progress: Called every `progress_interval` games
                (games started so far, total games)
            on_game_end: Called with each finished game's result
        """
        self._on_move = on_move
        self._on_progress = on_progress
        self._on_game_end = on_game_end

    def new_game(self) -> GameState:
        """Deal a fresh game from a shuffled deck."""
        return GameState.new(new_deck(self.rng))

    def run_game(self, game_number: int = 1) -> GameResult:
        """Play one game until it ends or reaches the ply cap.

        Args:
            game_number: Number of this game within the run

        Returns:
            GameResult for the game.
        """
        state = self.new_game()
        self._game_number = game_number
        self._ply = 0
        logger.debug(f"Game {game_number} dealt: {state}")

        if self.game_logger:
            self.game_logger.log_game_start(game_number, state)

        winner: Player | None = None
        while self._ply < self.settings.max_plies and winner is None:
            self._ply += 1
            winner = self.engine.play_next_move(state)

        last_move = self.engine.last_move
        if winner is not None and last_move and last_move.decision:
            termination = last_move.termination or Termination.PLY_CAP
            decided_by = last_move.decision.decided_by
        else:
            termination = Termination.PLY_CAP
            decided_by = None

        result = GameResult(
            game_number=game_number,
            outcome=Outcome.from_winner(winner),
            termination=termination,
            plies=self._ply,
            player_one_score=state.player_one_hand.calculate_score(),
            player_two_score=state.player_two_hand.calculate_score(),
            decided_by=decided_by,
        )
        logger.debug(
            f"Game {game_number} finished: {result.outcome.value} "
            f"({result.termination.value}) after {result.plies} plies"
        )

        if self.game_logger:
            self.game_logger.log_game_end(result)
        if self._on_game_end:
            self._on_game_end(result)

        return result

    def run_games(self, num_games: int | None = None) -> SimulationSummary:
        """Run many games.

        Args:
            num_games: Number of games (uses config if not specified)

        Returns:
            SimulationSummary over all games.
        """
        if num_games is None:
            num_games = self.settings.num_games
        summary = SimulationSummary()
        interval = self.settings.progress_interval

        logger.info(
            f"Simulating {num_games} games (ply cap {self.settings.max_plies})"
        )
        if self.game_logger:
            self.game_logger.log_session_start(num_games, self.settings.max_plies)

        for i in range(num_games):
            if interval and i % interval == 0 and self._on_progress:
                self._on_progress(i, num_games)
            summary.record(self.run_game(i + 1))

        if self.game_logger:
            self.game_logger.log_session_end(summary)
        logger.info(f"Simulation finished: {summary}")

        return summary

    def _handle_move(self, record: MoveRecord, state: GameState) -> None:
        if self.game_logger:
            self.game_logger.log_move(self._game_number, self._ply, record, state)
        if self._on_move:
            self._on_move(self._ply, record, state)

