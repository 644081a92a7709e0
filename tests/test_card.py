"""Tests for card models."""

import random

import pytest

from heist_sim.models.card import (
    CARD_TRAITS,
    Artist,
    Card,
    create_full_deck,
    new_deck,
)

# (card, artist, points, masterpiece, early work)
CARD_TABLE = [
    (Card.WATER_LILIES, Artist.MONET, 4, False, False),
    (Card.MONA_LISA, Artist.DAVINCI, 4, True, False),
    (Card.STARRY_NIGHT, Artist.VAN_GOGH, 3, False, False),
    (Card.GUERNICA, Artist.PICASSO, 3, True, False),
    (Card.BLUE_NUDE, Artist.PICASSO, 3, False, True),
    (Card.THE_NIGHT_WATCH, Artist.REMBRANDT, 2, True, False),
    (Card.THE_POTATO_EATERS, Artist.VAN_GOGH, 2, False, True),
    (Card.HAYSTACKS, Artist.MONET, 2, False, False),
    (Card.SUNFLOWERS, Artist.VAN_GOGH, 2, True, False),
]


class TestCard:
    """Tests for Card lookups."""

    @pytest.mark.parametrize("card,artist,points,masterpiece,early_work", CARD_TABLE)
    def test_traits_table(self, card, artist, points, masterpiece, early_work):
        """Test every card against the fixed table."""
        assert card.artist == artist
        assert card.points == points
        assert card.is_masterpiece is masterpiece
        assert card.is_early_work is early_work

    def test_traits_row(self):
        """Test that each card exposes its own row of the table."""
        for card in Card:
            assert card.traits is CARD_TRAITS[card]
            assert card.points == card.traits.points

    def test_table_covers_every_card(self):
        """Test that no card is missing from the traits table."""
        assert set(CARD_TRAITS) == set(Card)
        assert len(Card) == 9

    def test_pull_alarm_cards(self):
        """Test that exactly three cards can pull the alarm."""
        alarms = {c for c in Card if c.is_pull_alarm}
        assert alarms == {
            Card.THE_NIGHT_WATCH,
            Card.THE_POTATO_EATERS,
            Card.SUNFLOWERS,
        }

    def test_five_artists(self):
        """Test that all five artists appear in the deck."""
        assert {c.artist for c in Card} == set(Artist)

    def test_card_string(self):
        """Test card string representation."""
        assert str(Card.MONA_LISA) == "MonaLisa"
        assert Card.WATER_LILIES.describe() == (
            "WaterLilies (Monet, 4, masterpiece: false, early_work: false)"
        )
        assert "masterpiece: true" in Card.GUERNICA.describe()

    def test_card_hashable(self):
        """Test that cards can be used in sets."""
        assert len({Card.MONA_LISA, Card.MONA_LISA, Card.GUERNICA}) == 2


class TestDeck:
    """Tests for deck construction."""

    def test_full_deck(self):
        """Test that the full deck holds each card once."""
        deck = create_full_deck()
        assert len(deck) == 9
        assert set(deck) == set(Card)

    @pytest.mark.parametrize("seed", range(20))
    def test_new_deck_is_permutation(self, seed):
        """Test that a shuffled deck is a permutation of the nine cards."""
        deck = new_deck(random.Random(seed))
        assert len(deck) == 9
        assert len(set(deck)) == 9
        assert sorted(deck) == sorted(Card)

    def test_new_deck_without_rng(self):
        """Test shuffling with the module-level generator."""
        assert set(new_deck()) == set(Card)

    def test_new_deck_seeded_is_reproducible(self):
        """Test that the same seed deals the same deck."""
        assert new_deck(random.Random(7)) == new_deck(random.Random(7))

    def test_new_deck_shuffles(self):
        """Test that shuffling produces more than one ordering."""
        rng = random.Random(0)
        orders = {tuple(new_deck(rng)) for _ in range(50)}
        assert len(orders) > 1
