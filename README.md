# durak

The card game Durak, played on the console between you and the computer,
together with the game logic it is built from.

## Installation

```
pip install .
```

## Playing

```
durak
```

starts a game between you and a computer opponent. Forty cards (ranks 1 to 10
of each suit) are used. Each player is dealt six cards at random, and the rest
are shuffled onto the deck. Players then take turns attacking and defending.

When it is your turn, your hand is listed with a number next to each card.
At the prompt:

- type a card's number to attack with it, or to defend with it; a defending
  card must be of the attacking card's suit and of a higher rank,
- type `d` to draw the top card of the deck,
- type `q` (or `quit`) to stop.

Options:

- `--seed N` seeds the random number generator, so that dealing and shuffling
  repeat from run to run.
- `--ai-only` lets two computer players play each other.

The computer attacks with the first card in its hand and defends with the
first card of the same suit and a higher rank, if it has one. The game ends,
printing `Game over`, when a player does not answer: you quit or input ends,
or the computer has no card left to attack with.

## Using the library

- `durak.cards`: `Card` and `CardSuit`. `Card.beats(other, trump)` decides
  whether one card beats another given a trump suit. Ranks are clamped to
  1..14, and `str(card)` gives `J`, `Q`, `K` and `A` for 11 to 14.
  `suit_to_string` and `card_hash` are also provided.
- `durak.fsm`: a small finite state machine. `State` holds the `Action` run on
  entering it and its transitions; `FSM.on_event(event)` follows the transition
  for an `Event` and returns the new state's action, or `None`.
- `durak.playerbuffer`: `PlayerBuffer`, the players in seating order, with
  `next()` and `prev()` to step through turns and indexing that counts round
  the table.
- `durak.deck`: `Deck`, a stack that shuffles cards put into it, with `top()`
  and `take_top()`.
- `durak.players`: `Player`, `AIPlayer` and `HumanPlayer`, with hand
  management (`take_cards`, `move_card`, `card_throw_result`) and attack and
  defence turns. `HumanPlayer.click_card` plays a card from the hand and
  raises `IllegalMoveError` for a card that cannot be played.
- `durak.controller`: `GameController`, which deals the cards
  (`format_table`) and runs rounds of attack and defence (`start`,
  `game_loop`). Callbacks passed to it report cards put on the table and
  messages about the defence, and wait for a player who has not answered yet.
- `durak.app`: `create_test_fsm()` and `create_test_cards()` to set up a game,
  and `main()`, the `durak` command.

```python
from durak.cards import Card, CardSuit

attack = Card(CardSuit.HEART, 6)
defence = Card(CardSuit.HEART, 9)
defence.beats(attack, CardSuit.SPADE)   # True: same suit, higher rank
```

```python
from durak.fsm import Event
from durak.app import create_test_fsm

fsm = create_test_fsm()
fsm.on_event(Event.GAME_STARTED)        # Action.START_ROUND
```

## What it does not do

- There is no graphical table: the game is played on the console only.
- Only attacks and defences are played. There is no trump suit in play, no
  taking of cards by a defender who cannot beat the attack, no refilling of
  hands at the end of a round, and no winner is declared; the state machine
  from `create_test_fsm()` never ends a round.

## Running the tests

```
pip install .[test]
pytest
```