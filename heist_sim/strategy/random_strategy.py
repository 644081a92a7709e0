"""Uniform-random strategy."""

import random

from heist_sim.models.game_state import GameState
from heist_sim.models.hand import Hand

from .base import ExchangeSource, Strategy

# Chance that a player tries to pull the alarm on a given move
PULL_ALARM_PROBABILITY = 0.1

# Chance of exchanging with the gallery rather than the private collection
GALLERY_PROBABILITY = 0.5


class RandomStrategy(Strategy):
    """Makes every decision with an independent random draw.

    Each decision consumes exactly one `rng.random()` value, so a seeded
    generator reproduces a game exactly.
    """

    def __init__(self, rng: random.Random | None = None):
        """Initialize strategy.

        Args:
            rng: Random source (creates an unseeded one if not provided)
        """
        self.rng = rng or random.Random()

    def wants_pull_alarm(self, hand: Hand, state: GameState) -> bool:
        return self.rng.random() < PULL_ALARM_PROBABILITY

    def select_card(self, hand: Hand, state: GameState) -> int:
        return 0 if self.rng.random() < 0.5 else 1

    def select_source(self, hand: Hand, state: GameState) -> ExchangeSource:
        if self.rng.random() < GALLERY_PROBABILITY:
            return ExchangeSource.GALLERY
        return ExchangeSource.PRIVATE_COLLECTION
