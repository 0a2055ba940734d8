"""Players at the table and what they can do."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from holdem.cards import Card


class PlayerAction(Enum):
    """An action a player can take on their turn."""

    FOLD = "Fold"
    CHECK = "Check"
    CALL = "Call"
    BET = "Bet"
    RAISE = "Raise"
    ALL_IN = "All-In"

    def __str__(self) -> str:
        return self.value


class PlayerStatus(Enum):
    """Where a player stands in the current hand."""

    ACTIVE = "active"
    FOLDED = "folded"
    ALL_IN = "all-in"
    OUT = "out"


@dataclass(eq=False)
class Player:
    """A seat at the table with its chips, hole cards and current bet."""

    id: str
    name: str
    chips: int
    position: int = 0
    cards: list[Card] = field(default_factory=list)
    bet: int = 0
    status: PlayerStatus = PlayerStatus.ACTIVE

    def place_bet(self, amount: int) -> None:
        """Move ``amount`` chips from the stack into the bet."""
        if amount > self.chips:
            raise ValueError(
                f"{self.name} cannot bet {amount} with only {self.chips} chips"
            )
        self.bet += amount
        self.chips -= amount
        if self.chips == 0:
            self.status = PlayerStatus.ALL_IN

    def collect_winnings(self, amount: int) -> None:
        """Add ``amount`` chips to the stack."""
        self.chips += amount

    def fold(self) -> None:
        self.status = PlayerStatus.FOLDED

    def reset_for_new_hand(self) -> None:
        """Clear cards and bet; a player without chips sits out."""
        self.cards = []
        self.bet = 0
        self.status = PlayerStatus.ACTIVE if self.chips > 0 else PlayerStatus.OUT

    def is_active(self) -> bool:
        """Whether the player is still in the hand and able to bet."""
        return self.status is PlayerStatus.ACTIVE

    def can_act(self) -> bool:
        """Whether the player is still contesting the pot."""
        return self.status in (PlayerStatus.ACTIVE, PlayerStatus.ALL_IN)