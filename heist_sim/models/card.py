"""Card and Artist models."""

import random
from enum import Enum

from pydantic import BaseModel


class Artist(str, Enum):
    """Painter a card belongs to (drives the same-artist bonus)."""

    MONET = "Monet"
    DAVINCI = "DaVinci"
    VAN_GOGH = "VanGogh"
    PICASSO = "Picasso"
    REMBRANDT = "Rembrandt"


class CardTraits(BaseModel, frozen=True):
    """Fixed attributes attached to a card identity."""

    artist: Artist
    points: int
    is_masterpiece: bool = False
    is_early_work: bool = False
    is_pull_alarm: bool = False


class Card(str, Enum):
    """One of the nine paintings in the deck."""

    WATER_LILIES = "WaterLilies"
    MONA_LISA = "MonaLisa"
    STARRY_NIGHT = "StarryNight"
    GUERNICA = "Guernica"
    BLUE_NUDE = "BlueNude"
    THE_NIGHT_WATCH = "TheNightWatch"
    THE_POTATO_EATERS = "ThePotatoEaters"
    HAYSTACKS = "Haystacks"
    SUNFLOWERS = "Sunflowers"

    @property
    def traits(self) -> CardTraits:
        """Row of the fixed traits table for this card."""
        return CARD_TRAITS[self]

    @property
    def artist(self) -> Artist:
        return self.traits.artist

    @property
    def points(self) -> int:
        """Point value of the painting (2, 3 or 4)."""
        return self.traits.points

    @property
    def is_masterpiece(self) -> bool:
        return self.traits.is_masterpiece

    @property
    def is_early_work(self) -> bool:
        return self.traits.is_early_work

    @property
    def is_pull_alarm(self) -> bool:
        """Holding this card lets a player end the game early."""
        return self.traits.is_pull_alarm

    def describe(self) -> str:
        """Long form with every attribute, used in diagnostics."""
        traits = self.traits
        return (
            f"{self._value_} ({traits.artist.value}, {traits.points}, "
            f"masterpiece: {str(traits.is_masterpiece).lower()}, "
            f"early_work: {str(traits.is_early_work).lower()})"
        )

    def __str__(self) -> str:
        return self._value_

    def __repr__(self) -> str:
        return f"Card.{self.name}"


CARD_TRAITS: dict[Card, CardTraits] = {
    Card.WATER_LILIES: CardTraits(artist=Artist.MONET, points=4),
    Card.MONA_LISA: CardTraits(artist=Artist.DAVINCI, points=4, is_masterpiece=True),
    Card.STARRY_NIGHT: CardTraits(artist=Artist.VAN_GOGH, points=3),
    Card.GUERNICA: CardTraits(artist=Artist.PICASSO, points=3, is_masterpiece=True),
    Card.BLUE_NUDE: CardTraits(artist=Artist.PICASSO, points=3, is_early_work=True),
    Card.THE_NIGHT_WATCH: CardTraits(
        artist=Artist.REMBRANDT, points=2, is_masterpiece=True, is_pull_alarm=True
    ),
    Card.THE_POTATO_EATERS: CardTraits(
        artist=Artist.VAN_GOGH, points=2, is_early_work=True, is_pull_alarm=True
    ),
    Card.HAYSTACKS: CardTraits(artist=Artist.MONET, points=2),
    Card.SUNFLOWERS: CardTraits(
        artist=Artist.VAN_GOGH, points=2, is_masterpiece=True, is_pull_alarm=True
    ),
}

DECK_SIZE = len(Card)


def create_full_deck() -> list[Card]:
    """Create the 9-card deck in definition order."""
    return list(Card)


def new_deck(rng: random.Random | None = None) -> list[Card]:
    """Create a shuffled deck.

    Args:
        rng: Random source. Uses the module-level generator if None.

    Returns:
        All nine cards in uniformly random order.
    """
    cards = create_full_deck()
    (rng or random).shuffle(cards)
    return cards
