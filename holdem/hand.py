"""Poker hand ranking and comparison."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Sequence

from holdem.cards import Card, Rank


class HandRank(IntEnum):
    """The category of a poker hand, from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        return _HAND_NAMES[self]


_HAND_NAMES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.PAIR: "Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.ROYAL_FLUSH: "Royal Flush",
}

_WHEEL = {Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE}


@dataclass(frozen=True)
class HandEvaluation:
    """A ranked hand; ``value`` orders hands of the same rank."""

    rank: HandRank
    cards: tuple[Card, ...]
    value: int = 0


def _straight_high(ranks: set[Rank]) -> Rank | None:
    if len(ranks) != 5:
        return None
    if max(ranks) - min(ranks) == 4:
        return max(ranks)
    if ranks == _WHEEL:
        return Rank.FIVE
    return None


def _evaluate_five(five: Sequence[Card]) -> HandEvaluation:
    counts = Counter(card.rank for card in five)
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    shape = [count for _, count in groups]
    flush = len({card.suit for card in five}) == 1
    high = _straight_high(set(counts))
    tiebreak = [rank for rank, _ in groups]

    if high is not None and flush:
        rank = HandRank.ROYAL_FLUSH if high is Rank.ACE else HandRank.STRAIGHT_FLUSH
        tiebreak = [high]
    elif shape[0] == 4:
        rank = HandRank.FOUR_OF_A_KIND
    elif shape[:2] == [3, 2]:
        rank = HandRank.FULL_HOUSE
    elif flush:
        rank = HandRank.FLUSH
    elif high is not None:
        rank = HandRank.STRAIGHT
        tiebreak = [high]
    elif shape[0] == 3:
        rank = HandRank.THREE_OF_A_KIND
    elif shape[:2] == [2, 2]:
        rank = HandRank.TWO_PAIR
    elif shape[0] == 2:
        rank = HandRank.PAIR
    else:
        rank = HandRank.HIGH_CARD

    value = 0
    for tiebreak_rank in tiebreak:
        value = value * 15 + int(tiebreak_rank)

    wheel = high is Rank.FIVE

    def order(card: Card) -> tuple[int, int]:
        pips = 1 if wheel and card.rank is Rank.ACE else int(card.rank)
        return counts[card.rank], pips

    return HandEvaluation(rank, tuple(sorted(five, key=order, reverse=True)), value)


def evaluate_hand(cards: Sequence[Card]) -> HandEvaluation:
    """Return the best five-card hand that can be made from ``cards``.

    With fewer than five cards nothing is ranked and a high card of
    value 0 holding the given cards is returned.
    """
    if len(cards) < 5:
        return HandEvaluation(HandRank.HIGH_CARD, tuple(cards), 0)
    return max(
        (_evaluate_five(five) for five in combinations(cards, 5)),
        key=lambda evaluation: (evaluation.rank, evaluation.value),
    )


def compare_hands(hand1: HandEvaluation, hand2: HandEvaluation) -> int:
    """Return 1 if ``hand1`` wins, -1 if ``hand2`` wins, 0 on a tie."""
    key1 = (hand1.rank, hand1.value)
    key2 = (hand2.rank, hand2.value)
    return (key1 > key2) - (key1 < key2)