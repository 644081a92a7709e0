"""Formatters for game log output."""

from collections.abc import Iterable

from heist_sim.models.card import Card
from heist_sim.models.hand import Hand


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Card name (e.g., "MonaLisa"), or empty string for None.
    """
    if card is None:
        return ""
    return str(card)


def format_cards(cards: Iterable[Card]) -> str:
    """Format a pile of cards to comma-separated string.

    Args:
        cards: Cards in pile order.

    Returns:
        Comma-separated card names (e.g., "MonaLisa,Guernica").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hand(hand: Hand) -> str:
    """Format a hand to comma-separated string (first card first)."""
    return format_cards(hand.to_list())
