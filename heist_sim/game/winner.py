"""Winner determination for finished games."""

from dataclasses import dataclass
from enum import Enum

from heist_sim.models.game_state import GameState
from heist_sim.models.hand import Score
from heist_sim.models.player import Player


class TieBreak(str, Enum):
    """Score statistic that decided a game."""

    SCORE = "score"
    MASTERPIECE_COUNT = "masterpiece_count"
    EARLY_WORK_COUNT = "early_work_count"
    MAX_MASTERPIECE_SCORE = "max_masterpiece_score"
    MAX_EARLY_WORK_SCORE = "max_early_work_score"


@dataclass(frozen=True)
class TieBreaker:
    """One step of the winner cascade."""

    stat: TieBreak
    higher_wins: bool = True

    def compare(self, one: Score, two: Score) -> Player | None:
        """Compare one statistic.

        Returns:
            The player favoured by this step, or None if equal.
        """
        a = getattr(one, self.stat.value)
        b = getattr(two, self.stat.value)
        if a == b:
            return None
        if (a > b) == self.higher_wins:
            return Player.ONE
        return Player.TWO


# Applied in order; each step only runs if all previous ones tied.
# Early works are a penalty: fewer wins.
TIE_BREAKERS: tuple[TieBreaker, ...] = (
    TieBreaker(TieBreak.SCORE),
    TieBreaker(TieBreak.MASTERPIECE_COUNT),
    TieBreaker(TieBreak.EARLY_WORK_COUNT, higher_wins=False),
    TieBreaker(TieBreak.MAX_MASTERPIECE_SCORE),
    TieBreaker(TieBreak.MAX_EARLY_WORK_SCORE),
)


class ImpossibleTieError(AssertionError):
    """Raised when two hands are equal on every tie-breaker."""

    def __init__(self, one: Score, two: Score, state: GameState | None = None):
        self.player_one_score = one
        self.player_two_score = two
        self.state = state
        message = f"There should never be a tie: {one!r} vs {two!r}"
        if state is not None:
            message += "\n" + state.dump()
        super().__init__(message)


@dataclass(frozen=True)
class WinnerDecision:
    """Result of the winner cascade."""

    winner: Player
    decided_by: TieBreak
    player_one_score: Score
    player_two_score: Score


def compare_scores(
    one: Score, two: Score, state: GameState | None = None
) -> WinnerDecision:
    """Run the tie-break cascade over two scores.

    Args:
        one: Player One's score.
        two: Player Two's score.
        state: Game state, only used to enrich the error message.

    Returns:
        WinnerDecision naming the winner and the deciding statistic.

    Raises:
        ImpossibleTieError: If every statistic is equal.
    """
    for breaker in TIE_BREAKERS:
        winner = breaker.compare(one, two)
        if winner is not None:
            return WinnerDecision(
                winner=winner,
                decided_by=breaker.stat,
                player_one_score=one,
                player_two_score=two,
            )
    raise ImpossibleTieError(one, two, state)


def decide_winner(state: GameState) -> WinnerDecision:
    """Score both hands of a finished game and pick the winner."""
    return compare_scores(
        state.player_one_hand.calculate_score(),
        state.player_two_hand.calculate_score(),
        state,
    )


def calculate_winner(state: GameState) -> Player:
    """Get the winner of a finished game."""
    return decide_winner(state).winner
