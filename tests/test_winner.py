"""Tests for winner determination."""

import pytest

from heist_sim.game.winner import (
    TIE_BREAKERS,
    ImpossibleTieError,
    TieBreak,
    TieBreaker,
    calculate_winner,
    compare_scores,
    decide_winner,
)
from heist_sim.models.card import Card, create_full_deck
from heist_sim.models.game_state import GameState
from heist_sim.models.hand import Hand, Score, calculate_score
from heist_sim.models.player import Player


def decide(one: Hand, two: Hand):
    return compare_scores(calculate_score(one), calculate_score(two))


class TestTieBreaker:
    """Tests for individual cascade steps."""

    def test_cascade_order(self):
        """Test the fixed precedence of the statistics."""
        assert [b.stat for b in TIE_BREAKERS] == [
            TieBreak.SCORE,
            TieBreak.MASTERPIECE_COUNT,
            TieBreak.EARLY_WORK_COUNT,
            TieBreak.MAX_MASTERPIECE_SCORE,
            TieBreak.MAX_EARLY_WORK_SCORE,
        ]

    def test_early_work_is_penalty(self):
        """Test that only the early work count prefers the lower value."""
        lower_wins = [b.stat for b in TIE_BREAKERS if not b.higher_wins]
        assert lower_wins == [TieBreak.EARLY_WORK_COUNT]

    def test_compare(self):
        """Test a single step in both directions."""
        breaker = TieBreaker(TieBreak.SCORE)
        assert breaker.compare(Score(score=5), Score(score=4)) is Player.ONE
        assert breaker.compare(Score(score=4), Score(score=5)) is Player.TWO
        assert breaker.compare(Score(score=4), Score(score=4)) is None

    def test_compare_lower_wins(self):
        breaker = TieBreaker(TieBreak.EARLY_WORK_COUNT, higher_wins=False)
        one = Score(score=5, early_work_count=0)
        two = Score(score=5, early_work_count=1)
        assert breaker.compare(one, two) is Player.ONE
        assert breaker.compare(two, one) is Player.TWO


class TestCompareScores:
    """Tests for the full cascade, one hand pair per level."""

    def test_decided_by_score(self):
        """Test MonaLisa+WaterLilies (8) beating StarryNight+Guernica (6)."""
        decision = decide(
            Hand.of(Card.MONA_LISA, Card.WATER_LILIES),
            Hand.of(Card.STARRY_NIGHT, Card.GUERNICA),
        )
        assert decision.winner is Player.ONE
        assert decision.decided_by is TieBreak.SCORE

    def test_decided_by_masterpiece_count(self):
        """Test equal score (5) resolved by one masterpiece against none."""
        decision = decide(
            Hand.of(Card.BLUE_NUDE, Card.THE_POTATO_EATERS),
            Hand.of(Card.GUERNICA, Card.HAYSTACKS),
        )
        assert decision.winner is Player.TWO
        assert decision.decided_by is TieBreak.MASTERPIECE_COUNT

    def test_decided_by_early_work_count(self):
        """Test that fewer early works wins."""
        decision = decide(
            Hand.of(Card.STARRY_NIGHT, Card.HAYSTACKS),
            Hand.of(Card.BLUE_NUDE, Card.THE_POTATO_EATERS),
        )
        assert decision.winner is Player.ONE
        assert decision.decided_by is TieBreak.EARLY_WORK_COUNT

    def test_decided_by_early_work_count_reversed(self):
        decision = decide(
            Hand.of(Card.BLUE_NUDE, Card.THE_POTATO_EATERS),
            Hand.of(Card.STARRY_NIGHT, Card.HAYSTACKS),
        )
        assert decision.winner is Player.TWO
        assert decision.decided_by is TieBreak.EARLY_WORK_COUNT

    def test_decided_by_max_masterpiece_score(self):
        """Test Guernica (3) outranking The Night Watch (2)."""
        decision = decide(
            Hand.of(Card.GUERNICA, Card.HAYSTACKS),
            Hand.of(Card.THE_NIGHT_WATCH, Card.STARRY_NIGHT),
        )
        assert decision.winner is Player.ONE
        assert decision.decided_by is TieBreak.MAX_MASTERPIECE_SCORE

    def test_decided_by_max_early_work_score(self):
        """Test Blue Nude (3) outranking The Potato Eaters (2)."""
        decision = decide(
            Hand.of(Card.THE_POTATO_EATERS, Card.WATER_LILIES),
            Hand.of(Card.BLUE_NUDE, Card.STARRY_NIGHT),
        )
        assert decision.winner is Player.TWO
        assert decision.decided_by is TieBreak.MAX_EARLY_WORK_SCORE

    def test_deterministic(self):
        """Test that the same hands always give the same winner."""
        one = Hand.of(Card.GUERNICA, Card.HAYSTACKS)
        two = Hand.of(Card.THE_NIGHT_WATCH, Card.STARRY_NIGHT)
        winners = {decide(one, two).winner for _ in range(10)}
        assert winners == {Player.ONE}

    def test_impossible_tie(self):
        """Test that a full tie raises instead of picking a winner."""
        score = Score(
            score=6,
            masterpiece_count=1,
            max_masterpiece_score=4,
            early_work_count=0,
            max_early_work_score=0,
        )
        with pytest.raises(ImpossibleTieError) as exc_info:
            compare_scores(score, score)

        assert exc_info.value.player_one_score == score
        assert isinstance(exc_info.value, AssertionError)

    def test_impossible_tie_reports_state(self):
        """Test that the error message includes the state dump."""
        state = GameState.new(create_full_deck())
        state.player_two_hand = Hand.of(Card.WATER_LILIES, Card.MONA_LISA)

        with pytest.raises(ImpossibleTieError, match="private_collection"):
            calculate_winner(state)


class TestCalculateWinner:
    """Tests for calculate_winner on a game state."""

    def test_fresh_deal(self):
        """Test P1 (WaterLilies, MonaLisa = 8) beating P2 (6)."""
        state = GameState.new(create_full_deck())

        assert calculate_winner(state) is Player.ONE
        decision = decide_winner(state)
        assert decision.decided_by is TieBreak.SCORE
        assert decision.player_one_score.score == 8
        assert decision.player_two_score.score == 6
