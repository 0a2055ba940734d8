"""The state of a Texas Hold'em hand and the betting that drives it."""

from __future__ import annotations

import random
from contextlib import suppress
from enum import IntEnum
from typing import Iterable

from holdem.cards import Card, Deck, EmptyDeckError
from holdem.player import Player, PlayerAction, PlayerStatus


class GamePhase(IntEnum):
    """The betting street a hand has reached."""

    PRE_FLOP = 0
    FLOP = 1
    TURN = 2
    RIVER = 3
    SHOWDOWN = 4

    def __str__(self) -> str:
        return _PHASE_NAMES[self]


_PHASE_NAMES = {
    GamePhase.PRE_FLOP: "Pre-Flop",
    GamePhase.FLOP: "Flop",
    GamePhase.TURN: "Turn",
    GamePhase.RIVER: "River",
    GamePhase.SHOWDOWN: "Showdown",
}


class InvalidActionError(ValueError):
    """Raised when the player to act attempts an action the rules forbid."""


class GameState:
    """A table of players, the deck, the board and the betting state."""

    def __init__(
        self, players: Iterable[Player], small_blind: int, big_blind: int
    ) -> None:
        self.players: list[Player] = list(players)
        self.deck = Deck()
        self.community_cards: list[Card] = []
        self.phase = GamePhase.PRE_FLOP
        self.pot = 0
        self.current_bet = 0
        self.small_blind = small_blind
        self.big_blind = big_blind
        self.dealer_pos = 0
        self.current_pos = 0
        self.last_raise_pos: int | None = None
        self.min_raise = big_blind

    def start_new_hand(self, rng: random.Random | None = None) -> None:
        """Shuffle a fresh deck, move the button, post blinds and deal."""
        if not self.players:
            raise ValueError("cannot start a hand without players")

        self.deck = Deck()
        self.deck.shuffle(rng)
        self.community_cards = []
        self.phase = GamePhase.PRE_FLOP
        self.pot = 0
        self.current_bet = 0
        self.last_raise_pos = None
        self.min_raise = self.big_blind

        for player in self.players:
            player.reset_for_new_hand()

        self.dealer_pos = (self.dealer_pos + 1) % len(self.players)

        sb_pos = self._next_active_position(self.dealer_pos)
        with suppress(ValueError):
            self.players[sb_pos].place_bet(self.small_blind)

        bb_pos = self._next_active_position(sb_pos)
        with suppress(ValueError):
            self.players[bb_pos].place_bet(self.big_blind)
        self.current_bet = self.big_blind

        for _ in range(2):
            for player in self.players:
                if player.is_active() or player.status is PlayerStatus.ALL_IN:
                    card = self._draw()
                    if card is not None:
                        player.cards.append(card)

        self.current_pos = self._next_active_position(bb_pos)

    def deal_flop(self) -> None:
        """Burn one card and deal three to the board; only before the flop."""
        self._deal_street(GamePhase.PRE_FLOP, 3, GamePhase.FLOP)

    def deal_turn(self) -> None:
        """Burn one card and deal the turn; only on the flop."""
        self._deal_street(GamePhase.FLOP, 1, GamePhase.TURN)

    def deal_river(self) -> None:
        """Burn one card and deal the river; only on the turn."""
        self._deal_street(GamePhase.TURN, 1, GamePhase.RIVER)

    def process_action(self, action: PlayerAction, amount: int = 0) -> None:
        """Apply ``action`` for the player to act and pass the turn on.

        Raises InvalidActionError if the action is not allowed; the state
        is then left unchanged.
        """
        player = self.current_player()

        if action is PlayerAction.FOLD:
            player.fold()
        elif action is PlayerAction.CHECK:
            if self.current_bet > player.bet:
                raise InvalidActionError(
                    f"cannot check facing a bet of {self.current_bet}"
                )
        elif action is PlayerAction.CALL:
            self._wager(player, self.current_bet - player.bet)
        elif action is PlayerAction.BET:
            if self.current_bet > 0:
                raise InvalidActionError("cannot bet when a bet has been made")
            if amount < self.big_blind:
                raise InvalidActionError(
                    f"a bet must be at least the big blind of {self.big_blind}"
                )
            self._wager(player, amount)
            self.current_bet = amount
            self.last_raise_pos = self.current_pos
            self.min_raise = amount
        elif action is PlayerAction.RAISE:
            if amount < self.min_raise:
                raise InvalidActionError(
                    f"a raise must be at least {self.min_raise}"
                )
            self._wager(player, self.current_bet - player.bet + amount)
            self.current_bet = player.bet
            self.last_raise_pos = self.current_pos
            self.min_raise = amount
        elif action is PlayerAction.ALL_IN:
            all_in_amount = player.chips
            self._wager(player, all_in_amount)
            if player.bet > self.current_bet:
                self.current_bet = player.bet
                self.last_raise_pos = self.current_pos
                self.min_raise = all_in_amount

        self.current_pos = self._next_active_position(self.current_pos)

        if self.current_pos == self.last_raise_pos or self._count_active() <= 1:
            self._advance_phase()

    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.players[self.current_pos]

    def is_hand_over(self) -> bool:
        """Whether the hand reached showdown or only one player remains."""
        return self.phase is GamePhase.SHOWDOWN or self._count_active() <= 1

    def _wager(self, player: Player, amount: int) -> None:
        try:
            player.place_bet(amount)
        except ValueError as exc:
            raise InvalidActionError(str(exc)) from exc
        self.pot += amount

    def _draw(self) -> Card | None:
        try:
            return self.deck.draw_one()
        except EmptyDeckError:
            return None

    def _deal_street(
        self, expected: GamePhase, count: int, next_phase: GamePhase
    ) -> None:
        if self.phase is not expected:
            return
        self._draw()  # burn card
        for _ in range(count):
            card = self._draw()
            if card is not None:
                self.community_cards.append(card)
        self.phase = next_phase
        self.current_bet = 0
        self.last_raise_pos = None
        self.current_pos = self._next_active_position(self.dealer_pos)

    def _next_active_position(self, pos: int) -> int:
        seats = len(self.players)
        for step in range(1, seats + 1):
            candidate = (pos + step) % seats
            if self.players[candidate].is_active():
                return candidate
        return pos

    def _count_active(self) -> int:
        return sum(1 for player in self.players if player.is_active())

    def _advance_phase(self) -> None:
        if self.phase is GamePhase.PRE_FLOP:
            self.deal_flop()
        elif self.phase is GamePhase.FLOP:
            self.deal_turn()
        elif self.phase is GamePhase.TURN:
            self.deal_river()
        elif self.phase is GamePhase.RIVER:
            self.phase = GamePhase.SHOWDOWN