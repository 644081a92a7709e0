"""Game logic."""

from .engine import GameEngine, MoveAction, MoveRecord, Termination, play_next_move
from .simulator import GameResult, Outcome, SimulationSummary, Simulator
from .winner import (
    TIE_BREAKERS,
    ImpossibleTieError,
    TieBreak,
    TieBreaker,
    WinnerDecision,
    calculate_winner,
    compare_scores,
    decide_winner,
)

__all__ = [
    "GameEngine",
    "MoveAction",
    "MoveRecord",
    "Termination",
    "play_next_move",
    "GameResult",
    "Outcome",
    "SimulationSummary",
    "Simulator",
    "TIE_BREAKERS",
    "ImpossibleTieError",
    "TieBreak",
    "TieBreaker",
    "WinnerDecision",
    "calculate_winner",
    "compare_scores",
    "decide_winner",
]
