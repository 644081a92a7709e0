"""Player model."""

from enum import Enum


class Player(str, Enum):
    """Seat at the table. Player One always moves first."""

    ONE = "player_one"
    TWO = "player_two"

    def next(self) -> "Player":
        """Get the opponent (whose turn follows this one)."""
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def number(self) -> int:
        return 1 if self is Player.ONE else 2

    def __str__(self) -> str:
        return f"Player {self.number}"
