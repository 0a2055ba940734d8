# holdem

A small Texas Hold'em engine. It provides a 52-card deck, players with chip
stacks and bets, a five-card hand evaluator, and a betting-round state
machine that runs from pre-flop to showdown. It also includes a static file
server for a browser front end.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cards and decks (`holdem.cards`)

```python
import random
from holdem.cards import Deck, EmptyDeckError

deck = Deck()                 # 52 cards, spades first, two to ace
deck.shuffle(random.Random(42))
hand = deck.draw(2)
print(" ".join(str(card) for card in hand), len(deck))
```

- `Card` is a frozen dataclass of `Rank` and `Suit`. `str(card)` gives the
  rank label followed by the suit symbol, for example `10♥` or `A♠`.
- `Deck.draw(n)` returns at most as many cards as remain. It raises
  `ValueError` if `n` is negative.
- `Deck.draw_one()` raises `EmptyDeckError` when the deck is empty.

## Players (`holdem.player`)

`Player(id, name, chips, position)` holds a player's stack, hole cards,
current bet and a `PlayerStatus`. The status is `ACTIVE`, `FOLDED`,
`ALL_IN` or `OUT`.

- `place_bet(amount)` moves chips into the bet. It raises `ValueError` if
  the player has too few chips. A player left with no chips becomes
  `ALL_IN`.
- `fold()` sets the status to `FOLDED`.
- `collect_winnings(amount)` adds chips to the stack.
- `reset_for_new_hand()` clears the player's cards and bet. A player with no
  chips is set to `OUT`.
- `is_active()` tells whether the player can still bet.
- `can_act()` tells whether the player is still contesting the pot.

`PlayerAction` lists the moves a player can make: `FOLD`, `CHECK`, `CALL`,
`BET`, `RAISE` and `ALL_IN`.

## Ranking hands (`holdem.hand`)

```python
from holdem.cards import Card, Rank, Suit
from holdem.hand import evaluate_hand, compare_hands

best = evaluate_hand([
    Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.SPADES),
    Card(Rank.QUEEN, Suit.SPADES), Card(Rank.JACK, Suit.SPADES),
    Card(Rank.TEN, Suit.SPADES), Card(Rank.TWO, Suit.HEARTS),
    Card(Rank.THREE, Suit.CLUBS),
])
print(best.rank)   # Royal Flush
```

`evaluate_hand` returns a `HandEvaluation` for the best five-card hand that
can be made from the given cards. The evaluation holds a `HandRank`, the
five cards and a tie-break `value`. The ace-to-five straight counts as a
five-high straight. With fewer than five cards, the result is a high card
of value 0 that holds the given cards.

`compare_hands(a, b)` compares by rank and then by value. It returns `1` if
`a` wins, `-1` if `b` wins, and `0` on a tie.

## Playing a hand (`holdem.game`)

```python
from holdem.player import Player, PlayerAction
from holdem.game import GameState, InvalidActionError

players = [Player(str(n), f"Player {n}", 1000, n - 1) for n in range(1, 5)]
state = GameState(players, small_blind=5, big_blind=10)
state.start_new_hand()

print(state.current_player().name)
state.process_action(PlayerAction.CALL)

try:
    state.process_action(PlayerAction.CHECK)
except InvalidActionError as err:
    print("rejected:", err)

print(state.phase, state.pot, state.is_hand_over())
```

`start_new_hand(rng=None)` does the following:

- shuffles a fresh deck;
- moves the dealer button;
- posts the blinds;
- deals two cards to each player still in the game.

`process_action(action, amount=0)` applies a move for the player whose turn
it is and passes the turn on. A move the rules forbid raises
`InvalidActionError` and leaves the state unchanged. Examples are checking
when facing a bet, a bet below the big blind, a raise below the minimum,
and wagering more chips than the player has.

When a betting round closes, the board advances by itself through
`GamePhase.FLOP`, `TURN` and `RIVER` to `SHOWDOWN`. `deal_flop`,
`deal_turn` and `deal_river` deal a street directly. Each one burns a card
first, and each does nothing unless the hand is on the street before it.

## Serving the web front end (`holdem.server`)

```
holdem-server
```

This serves the `web` directory on port 8080. Files ending in `.wasm` are
sent as `application/wasm`. The `--host`, `--port` and `--directory`
options change the defaults. From code, use
`create_server(host, port, directory)` to get a `ThreadingHTTPServer` that
uses `WasmRequestHandler`.

## What it does not do

- Reaching `SHOWDOWN` does not settle the hand. No winners are picked and
  the pot is not paid out. Use `evaluate_hand`, `compare_hands` and
  `Player.collect_winnings` to do that yourself.
- There is no graphical table and no saved game storage. The game is driven
  entirely through `GameState`. The server only hands out the files in its
  directory.