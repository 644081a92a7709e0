"""Move resolution for the heist game."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from heist_sim.models.card import Card
from heist_sim.models.game_state import GameState
from heist_sim.models.player import Player
from heist_sim.strategy import ExchangeSource, RandomStrategy, Strategy

from .winner import WinnerDecision, decide_winner

logger = logging.getLogger(__name__)


class Termination(str, Enum):
    """Why a game ended."""

    PULL_ALARM = "pull_alarm"
    COLLECTION_EXHAUSTED = "collection_exhausted"
    PLY_CAP = "ply_cap"  # Only ever set by the simulator


class MoveAction(str, Enum):
    """What the acting player did on a ply."""

    PULL_ALARM = "pull_alarm"
    GALLERY = "gallery"
    PRIVATE_COLLECTION = "private_collection"


@dataclass
class MoveRecord:
    """Description of one resolved ply."""

    player: Player
    action: MoveAction
    given: Card | None = None  # Card the player gave up
    taken: Card | None = None  # Card the player received
    termination: Termination | None = None
    decision: WinnerDecision | None = None

    @property
    def winner(self) -> Player | None:
        return self.decision.winner if self.decision else None

    def __str__(self) -> str:
        if self.action is MoveAction.PULL_ALARM:
            text = f"{self.player} pulls the alarm"
        else:
            source = "gallery" if self.action is MoveAction.GALLERY else "private collection"
            text = f"{self.player} gives {self.given}, takes {self.taken} from {source}"
        if self.decision:
            text += f" -> {self.decision.winner} wins ({self.decision.decided_by.value})"
        return text


class GameEngine:
    """Advances a game one ply at a time."""

    def __init__(
        self,
        strategy: Strategy | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            strategy: Decision maker for both players
                (a RandomStrategy over `rng` if not provided)
            rng: Random source for the default strategy

        Raises:
            ValueError: If both `strategy` and `rng` are given, since the
                strategy owns its own random source.
        """
        if strategy is not None and rng is not None:
            raise ValueError("Pass either a strategy or an rng, not both")
        self.strategy = strategy or RandomStrategy(rng)
        self.last_move: MoveRecord | None = None
        self._on_move: Callable[[MoveRecord, GameState], None] | None = None

    def set_callbacks(
        self,
        on_move: Callable[[MoveRecord, GameState], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_move: Called after each ply with the move and the state after it
        """
        self._on_move = on_move

    def play_next_move(self, state: GameState) -> Player | None:
        """Resolve one ply for the player to play.

        Args:
            state: Game state, mutated in place.

        Returns:
            The winner if the game ended on this ply, otherwise None.

        Raises:
            InvariantViolationError: If an exchange targets an empty pile.
            ImpossibleTieError: If the game ended in a full tie.
        """
        acting = state.advance_turn()
        hand = state.hand_of(acting)

        # Decision is drawn before checking the hand, always on the
        # pre-exchange cards
        if self.strategy.wants_pull_alarm(hand, state) and hand.has_pull_alarm():
            record = MoveRecord(
                player=acting,
                action=MoveAction.PULL_ALARM,
                termination=Termination.PULL_ALARM,
                decision=decide_winner(state),
            )
            return self._finish_move(record, state)

        index = self.strategy.select_card(hand, state)
        source = self.strategy.select_source(hand, state)

        if source is ExchangeSource.GALLERY:
            given = hand.card(index)
            taken = state.swap_with_gallery(given)
            hand.swap(index, taken)
            record = MoveRecord(
                player=acting, action=MoveAction.GALLERY, given=given, taken=taken
            )
        else:
            taken = state.draw_from_collection()
            given = hand.swap(index, taken)
            state.add_to_gallery(given)
            record = MoveRecord(
                player=acting,
                action=MoveAction.PRIVATE_COLLECTION,
                given=given,
                taken=taken,
            )
            if state.is_collection_empty():
                record.termination = Termination.COLLECTION_EXHAUSTED
                record.decision = decide_winner(state)

        return self._finish_move(record, state)

    def _finish_move(self, record: MoveRecord, state: GameState) -> Player | None:
        self.last_move = record
        logger.debug(f"{record} | {state}")
        if self._on_move:
            self._on_move(record, state)
        return record.winner


def play_next_move(state: GameState, strategy: Strategy | None = None) -> Player | None:
    """Resolve one ply with a throwaway engine.

    Args:
        state: Game state, mutated in place.
        strategy: Decision maker (uniform random if not provided).

    Returns:
        The winner if the game ended on this ply, otherwise None.
    """
    return GameEngine(strategy).play_next_move(state)
