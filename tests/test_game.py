import random

import pytest

from holdem.cards import Deck
from holdem.game import GamePhase, GameState, InvalidActionError
from holdem.player import Player, PlayerAction, PlayerStatus


def make_players(n=4, chips=1000):
    return [Player(str(i + 1), f"Player {i + 1}", chips, i) for i in range(n)]


@pytest.fixture
def game():
    state = GameState(make_players(), 5, 10)
    state.start_new_hand(random.Random(1))
    return state


def test_new_state_defaults():
    state = GameState(make_players(), 5, 10)
    assert state.phase is GamePhase.PRE_FLOP
    assert state.pot == 0
    assert state.min_raise == 10
    assert state.last_raise_pos is None
    assert len(state.deck) == len(Deck())


def test_phase_names_follow_the_hand(game):
    assert str(game.phase) == "Pre-Flop"
    for _ in range(3):
        game.process_action(PlayerAction.FOLD)
    assert str(game.phase) == "Flop"
    for _ in range(3):
        game.process_action(PlayerAction.CHECK)
    assert str(game.phase) == "Showdown"


def test_start_new_hand_posts_blinds_and_deals(game):
    assert game.dealer_pos == 1
    assert game.players[2].bet == 5
    assert game.players[3].bet == 10
    assert game.current_bet == 10
    assert game.current_pos == 0
    assert game.pot == 0
    assert all(len(p.cards) == 2 for p in game.players)


def test_dealt_cards_come_from_the_deck(game):
    dealt = [card for p in game.players for card in p.cards]
    assert len(set(dealt)) == len(dealt)
    assert not set(dealt) & set(game.deck)
    assert len(dealt) + len(game.deck) == len(Deck())


def test_same_seed_same_deal():
    first = GameState(make_players(), 5, 10)
    second = GameState(make_players(), 5, 10)
    first.start_new_hand(random.Random(7))
    second.start_new_hand(random.Random(7))
    assert [p.cards for p in first.players] == [p.cards for p in second.players]


def test_dealer_button_wraps_around():
    state = GameState(make_players(), 5, 10)
    seen = []
    for _ in range(4):
        state.start_new_hand(random.Random(0))
        seen.append(state.dealer_pos)
    assert seen == [1, 2, 3, 0]


def test_players_without_chips_are_skipped():
    players = make_players()
    players[2].chips = 0
    state = GameState(players, 5, 10)
    state.start_new_hand(random.Random(3))
    assert players[2].status is PlayerStatus.OUT
    assert players[2].cards == []
    assert players[3].bet == 5
    assert players[0].bet == 10
    assert state.current_pos == 1


def test_start_without_players_raises():
    with pytest.raises(ValueError):
        GameState([], 5, 10).start_new_hand()


def test_call_moves_chips_and_passes_turn(game):
    game.process_action(PlayerAction.CALL)
    assert game.players[0].chips == 990
    assert game.players[0].bet == 10
    assert game.pot == 10
    assert game.current_pos == 1


def test_check_facing_bet_is_rejected(game):
    with pytest.raises(InvalidActionError):
        game.process_action(PlayerAction.CHECK)
    assert game.current_pos == 0


def test_bet_when_bet_exists_is_rejected(game):
    with pytest.raises(InvalidActionError):
        game.process_action(PlayerAction.BET, 50)


def test_raise_below_minimum_is_rejected(game):
    with pytest.raises(InvalidActionError):
        game.process_action(PlayerAction.RAISE, 5)
    assert game.pot == 0


def test_call_without_enough_chips_is_rejected():
    players = make_players()
    players[0].chips = 0
    players[1].chips = 5
    state = GameState(players, 5, 10)
    state.start_new_hand(random.Random(2))
    # Seat 1 is the only other active seat; big blind was posted by seat 3.
    state.current_pos = 1
    with pytest.raises(InvalidActionError):
        state.process_action(PlayerAction.CALL)
    assert players[1].chips == 5


def test_raise_updates_betting_state(game):
    game.process_action(PlayerAction.RAISE, 10)
    raiser = game.players[0]
    assert game.current_bet == raiser.bet
    assert game.pot == raiser.bet
    assert game.last_raise_pos == 0
    assert game.min_raise == 10


def test_round_ends_when_action_returns_to_raiser(game):
    game.process_action(PlayerAction.RAISE, 10)
    for _ in range(3):
        game.process_action(PlayerAction.CALL)
    assert game.phase is GamePhase.FLOP
    assert len(game.community_cards) == 3
    assert game.current_bet == 0
    assert game.last_raise_pos is None
    assert game.current_pos == 2
    assert all(p.bet == game.players[0].bet for p in game.players)


def test_all_in_sets_new_bet(game):
    game.process_action(PlayerAction.ALL_IN)
    player = game.players[0]
    assert player.chips == 0
    assert player.status is PlayerStatus.ALL_IN
    assert game.current_bet == player.bet
    assert game.pot == player.bet
    assert game.min_raise == player.bet
    assert game.current_pos == 1


def test_folds_end_the_hand(game):
    for _ in range(3):
        game.process_action(PlayerAction.FOLD)
    assert game.is_hand_over()
    assert game.phase is GamePhase.FLOP
    assert game.current_player() is game.players[3]


def test_lone_player_checks_through_to_showdown(game):
    for _ in range(3):
        game.process_action(PlayerAction.FOLD)
    for _ in range(3):
        game.process_action(PlayerAction.CHECK)
    assert game.phase is GamePhase.SHOWDOWN
    assert len(game.community_cards) == 5
    assert game.is_hand_over()


def test_streets_deal_in_order(game):
    before = len(game.deck)
    game.deal_flop()
    game.deal_turn()
    game.deal_river()
    assert game.phase is GamePhase.RIVER
    assert len(game.community_cards) == 5
    # one burn card per street
    assert before - len(game.deck) == len(game.community_cards) + 3


def test_out_of_order_deal_does_nothing(game):
    game.deal_turn()
    game.deal_river()
    assert game.community_cards == []
    assert game.phase is GamePhase.PRE_FLOP


def test_hand_not_over_at_start(game):
    assert not game.is_hand_over()
    assert game.current_player() is game.players[0]