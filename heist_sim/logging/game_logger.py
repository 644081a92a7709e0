"""Game logger for detailed game replay."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from heist_sim.config import GameLogConfig
from heist_sim.models.game_state import GameState
from heist_sim.models.player import Player

from .formatters import format_card, format_cards, format_hand

if TYPE_CHECKING:
    from heist_sim.game.engine import MoveRecord
    from heist_sim.game.simulator import GameResult, SimulationSummary


def _format_piles(state: GameState) -> dict[str, str]:
    return {
        "player_one": format_hand(state.player_one_hand),
        "player_two": format_hand(state.player_two_hand),
        "gallery": format_cards(state.gallery),
        "private_collection": format_cards(state.private_collection),
    }


def _player_name(player: Player | None) -> str | None:
    return player.value if player is not None else None


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    Move events are buffered; the file is flushed at each game end and
    session boundary, so a run of a million games is not flush-bound.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None
        self.events_written = 0

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def open(self) -> None:
        """Open the output file for appending (no-op when disabled)."""
        if self._file or not self.config.enabled or not self.config.output_path:
            return
        path = Path(self.config.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")

    def __enter__(self) -> "GameLogger":
        self.open()
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any], flush: bool = False) -> None:
        """Append one event as a JSON line.

        Args:
            event: Event dictionary to write as JSON.
            flush: Flush the file after writing.
        """
        if not self._file:
            return
        self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
        self.events_written += 1
        if flush:
            self._file.flush()

    def log_session_start(self, num_games: int, max_plies: int) -> None:
        """Log session start with run parameters."""
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "num_games": num_games,
            "max_plies": max_plies,
        }, flush=True)

    def log_game_start(self, game_num: int, state: GameState) -> None:
        """Log the dealt hands and piles.

        Args:
            game_num: Game number.
            state: Freshly dealt state.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "first_player": _player_name(state.player_to_play),
            **_format_piles(state),
        })

    def log_move(
        self,
        game_num: int,
        ply: int,
        move: MoveRecord,
        state: GameState,
    ) -> None:
        """Log a single ply.

        Args:
            game_num: Game number.
            ply: Ply number within the game (1-based).
            move: The resolved move.
            state: State after the move.
        """
        record: dict[str, Any] = {
            "type": "move",
            "game": game_num,
            "ply": ply,
            "player": _player_name(move.player),
            "action": move.action.value,
            "given": format_card(move.given),
            "taken": format_card(move.taken),
            **_format_piles(state),
        }
        if move.termination is not None:
            record["termination"] = move.termination.value
        self._write(record)

    def log_game_end(self, result: GameResult) -> None:
        """Log game end with outcome and final scores."""
        self._write({
            "type": "game_end",
            "game": result.game_number,
            "outcome": result.outcome.value,
            "termination": result.termination.value,
            "plies": result.plies,
            "decided_by": result.decided_by.value if result.decided_by else None,
            "scores": {
                "player_one": result.player_one_score.model_dump(),
                "player_two": result.player_two_score.model_dump(),
            },
        }, flush=True)

    def log_session_end(self, summary: SimulationSummary) -> None:
        """Log session end with aggregate counts."""
        self._write({
            "type": "session_end",
            "total_games": summary.total_games,
            "player_one_wins": summary.player_one_wins,
            "player_two_wins": summary.player_two_wins,
            "stalemates": summary.stalemates,
            "terminations": {k.value: v for k, v in summary.terminations.items()},
            "tie_breaks": {k.value: v for k, v in summary.tie_breaks.items()},
        }, flush=True)
