"""Base strategy class.

Defines the decisions a player makes during a move.
"""

from abc import ABC, abstractmethod
from enum import Enum

from heist_sim.models.game_state import GameState
from heist_sim.models.hand import Hand


class ExchangeSource(str, Enum):
    """Where a player takes a new card from."""

    GALLERY = "gallery"
    PRIVATE_COLLECTION = "private_collection"


class Strategy(ABC):
    """Abstract base class for move decisions.

    The engine asks for each decision in a fixed order:
    pull alarm, card to give up, exchange source.
    """

    @abstractmethod
    def wants_pull_alarm(self, hand: Hand, state: GameState) -> bool:
        """Decide whether to try ending the game now.

        Only honoured if the hand holds a pull-alarm card.
        """
        pass

    @abstractmethod
    def select_card(self, hand: Hand, state: GameState) -> int:
        """Select the hand position (0 or 1) of the card to give up."""
        pass

    @abstractmethod
    def select_source(self, hand: Hand, state: GameState) -> ExchangeSource:
        """Select where the replacement card comes from."""
        pass
