"""Game state model."""

from collections import deque

from pydantic import BaseModel, Field

from .card import DECK_SIZE, Card
from .hand import Hand
from .player import Player

INITIAL_GALLERY_SIZE = 1
INITIAL_COLLECTION_SIZE = 4


class InvariantViolationError(AssertionError):
    """Raised when the game reaches a state the rules make impossible."""


class GameState(BaseModel):
    """State of a single game.

    The gallery is face-up and read from the front. The private collection
    is face-down and used as a stack: cards are popped from the end.
    """

    player_one_hand: Hand
    player_two_hand: Hand
    player_to_play: Player = Player.ONE
    gallery: deque[Card] = Field(default_factory=deque)
    private_collection: list[Card] = Field(default_factory=list)

    @classmethod
    def new(cls, cards: list[Card]) -> "GameState":
        """Deal a shuffled deck into a fresh state.

        Args:
            cards: The nine cards, in deal order.

        Returns:
            New GameState with Player One to play.

        Raises:
            ValueError: If `cards` is not nine distinct cards.
        """
        cards = list(cards)
        if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
            raise ValueError(f"Expected {DECK_SIZE} distinct cards, got {cards}")

        a, b, c, d, e, f, g, h, i = cards
        return cls(
            player_one_hand=Hand(first=a, second=b),
            player_two_hand=Hand(first=c, second=d),
            player_to_play=Player.ONE,
            gallery=deque([e]),
            private_collection=[f, g, h, i],  # i is drawn first
        )

    def hand_of(self, player: Player) -> Hand:
        """Get the hand held by a player."""
        if player is Player.ONE:
            return self.player_one_hand
        return self.player_two_hand

    def advance_turn(self) -> Player:
        """Pass the turn to the opponent.

        Returns:
            The player whose turn it was.
        """
        acting = self.player_to_play
        self.player_to_play = acting.next()
        return acting

    def swap_with_gallery(self, card: Card) -> Card:
        """Put `card` at the front of the gallery and take the card there.

        Raises:
            InvariantViolationError: If the gallery is empty.
        """
        if not self.gallery:
            raise InvariantViolationError(
                "Gallery must always contain at least one card\n" + self.dump()
            )
        taken = self.gallery[0]
        self.gallery[0] = card
        return taken

    def draw_from_collection(self) -> Card:
        """Pop the top card of the private collection.

        Raises:
            InvariantViolationError: If the collection is already empty.
        """
        if not self.private_collection:
            raise InvariantViolationError(
                "Private collection must contain a card to draw\n" + self.dump()
            )
        return self.private_collection.pop()

    def add_to_gallery(self, card: Card) -> None:
        """Place a card at the back of the gallery."""
        self.gallery.append(card)

    def is_collection_empty(self) -> bool:
        return not self.private_collection

    def all_cards(self) -> list[Card]:
        """Get every card in play, hands first."""
        return [
            *self.player_one_hand.to_list(),
            *self.player_two_hand.to_list(),
            *self.gallery,
            *self.private_collection,
        ]

    def check_invariants(self) -> None:
        """Verify that every card is in exactly one place.

        Raises:
            InvariantViolationError: If cards were lost or duplicated.
        """
        cards = self.all_cards()
        if len(cards) != DECK_SIZE or len(set(cards)) != DECK_SIZE:
            raise InvariantViolationError(
                f"Expected {DECK_SIZE} distinct cards in play, got {len(cards)}\n"
                + self.dump()
            )

    def dump(self) -> str:
        """Multi-line description of the full state for diagnostics."""
        lines = [
            "GameState {",
            f"  player_to_play: {self.player_to_play},",
            "  player_one_hand: "
            + ", ".join(c.describe() for c in self.player_one_hand.to_list()),
            "  player_two_hand: "
            + ", ".join(c.describe() for c in self.player_two_hand.to_list()),
            "  gallery: [" + ", ".join(str(c) for c in self.gallery) + "],",
            "  private_collection: ["
            + ", ".join(str(c) for c in self.private_collection)
            + "],",
            "}",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return (
            f"{self.player_to_play} to play | "
            f"P1: {self.player_one_hand} P2: {self.player_two_hand} | "
            f"gallery: {len(self.gallery)} collection: {len(self.private_collection)}"
        )
