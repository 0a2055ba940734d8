"""Playing cards and the deck they are dealt from."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator


class Suit(IntEnum):
    """A card suit."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.symbol


_SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


class Rank(IntEnum):
    """A card rank; the value is the pip count, with the ace high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        return _FACE_LABELS.get(self, str(int(self)))

    def __str__(self) -> str:
        return self.label


_FACE_LABELS = {
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


@dataclass(frozen=True)
class Card:
    """A playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


class EmptyDeckError(LookupError):
    """Raised when a card is drawn from an empty deck."""


class Deck:
    """An ordered pile of cards; cards are drawn from the top (the front)."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        if cards is None:
            self.cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        else:
            self.cards = list(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the deck in place, using ``rng`` if one is given."""
        (rng or random.Random()).shuffle(self.cards)

    def draw(self, n: int) -> list[Card]:
        """Draw up to ``n`` cards from the top; fewer if the deck runs out."""
        if n < 0:
            raise ValueError(f"cannot draw a negative number of cards: {n}")
        drawn, self.cards = self.cards[:n], self.cards[n:]
        return drawn

    def draw_one(self) -> Card:
        """Draw the top card."""
        if not self.cards:
            raise EmptyDeckError("the deck is empty")
        return self.cards.pop(0)