"""Game models."""

from .card import Artist, Card, CardTraits, create_full_deck, new_deck
from .game_state import GameState, InvariantViolationError
from .hand import Hand, Score, calculate_score
from .player import Player

__all__ = [
    "Artist",
    "Card",
    "CardTraits",
    "create_full_deck",
    "new_deck",
    "Hand",
    "Score",
    "calculate_score",
    "Player",
    "GameState",
    "InvariantViolationError",
]
