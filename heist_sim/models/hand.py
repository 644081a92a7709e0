"""Hand and Score models."""

from pydantic import BaseModel

from .card import Card

# Bonus for holding two paintings by the same artist
SAME_ARTIST_BONUS = 2


class Score(BaseModel, frozen=True):
    """Scoring snapshot of a hand.

    Only `score` counts towards the win; the other fields break ties
    (see heist_sim.game.winner).
    """

    score: int
    masterpiece_count: int = 0
    max_masterpiece_score: int = 0  # 0 if no masterpiece held
    early_work_count: int = 0
    max_early_work_score: int = 0  # 0 if no early work held


class Hand(BaseModel):
    """Ordered pair of cards held by one player."""

    first: Card
    second: Card

    @classmethod
    def of(cls, first: Card, second: Card) -> "Hand":
        return cls(first=first, second=second)

    def card(self, index: int) -> Card:
        """Get the card at position 0 or 1."""
        if index == 0:
            return self.first
        if index == 1:
            return self.second
        raise IndexError(f"Hand index out of range: {index}")

    def swap(self, index: int, card: Card) -> Card:
        """Replace the card at `index` and return the one it replaced."""
        previous = self.card(index)
        if index == 0:
            self.first = card
        else:
            self.second = card
        return previous

    def has_pull_alarm(self) -> bool:
        """Check if either card can trigger the alarm."""
        return self.first.is_pull_alarm or self.second.is_pull_alarm

    def calculate_score(self) -> Score:
        return calculate_score(self)

    def to_list(self) -> list[Card]:
        return [self.first, self.second]

    def __contains__(self, card: Card) -> bool:
        return card in (self.first, self.second)

    def __str__(self) -> str:
        return f"[{self.first}, {self.second}]"


def _max_points(cards: list[Card]) -> int:
    return max((c.points for c in cards), default=0)


def calculate_score(hand: Hand) -> Score:
    """Compute the score and tie-break statistics of a hand.

    Args:
        hand: Hand to score.

    Returns:
        Score snapshot. Symmetric in the two cards.
    """
    a, b = hand.first, hand.second

    score = a.points + b.points
    if a.artist == b.artist:
        score += SAME_ARTIST_BONUS

    masterpieces = [c for c in (a, b) if c.is_masterpiece]
    early_works = [c for c in (a, b) if c.is_early_work]

    return Score(
        score=score,
        masterpiece_count=len(masterpieces),
        max_masterpiece_score=_max_points(masterpieces),
        early_work_count=len(early_works),
        max_early_work_score=_max_points(early_works),
    )
