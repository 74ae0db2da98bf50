"""A console game of durak between a human and the computer."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable

from durak.cards import Card, CardSuit
from durak.controller import GameController
from durak.deck import Deck
from durak.fsm import FSM, Action, Event, State
from durak.playerbuffer import PlayerBuffer
from durak.players import AIPlayer, HumanPlayer, IllegalMoveError, Player, UiMode

_SUIT_ORDER = (CardSuit.CLUB, CardSuit.DIAMOND, CardSuit.HEART, CardSuit.SPADE)


def create_test_fsm() -> FSM:
    """Build the state machine for a game of attacks and defences."""
    null_state = State(Action.NONE)
    start = State(Action.START_ROUND)
    prepare_round = State(Action.GIVE_CARDS)
    attack = State(Action.PLAYER_ATTACK)
    defend = State(Action.NEXT_PLAYER_DEFEND)

    start.set_transitions({Event.GAME_STARTED: prepare_round})
    null_state.set_transitions({Event.GAME_STARTED: start})
    prepare_round.set_transitions({Event.ROUND_STARTED: attack})
    attack.set_transitions({Event.PLAYER_ATTACKED: defend})
    defend.set_transitions(
        {Event.PLAYER_DEFENDED: attack, Event.PLAYER_CANT_DEFEND: attack}
    )
    return FSM(null_state, [start, prepare_round, attack, defend, null_state])


def create_test_cards() -> list[Card]:
    """Ranks 1 to 10 of clubs, diamonds, hearts and spades, in that order."""
    return [Card(suit, rank) for suit in _SUIT_ORDER for rank in range(1, 11)]


def _describe(card: Card) -> str:
    return f"{card} of {card.suit.name.lower()}s"


def _console_wait(deck: Deck) -> Callable[[Player], None]:
    def wait(player: Player) -> None:
        if not isinstance(player, HumanPlayer):
            return
        while player.mode is not UiMode.IDLE:
            verb = "attack with" if player.mode is UiMode.ATTACK else "defend with"
            print("Your hand:")
            for number, card in enumerate(player.hand, start=1):
                print(f"  {number}: {_describe(card)}")
            try:
                line = input(f"Card to {verb} (number, d to draw, q to quit)> ")
            except EOFError:
                return
            choice = line.strip().lower()
            if choice in ("q", "quit"):
                return
            if choice == "d":
                if player.take_card_from_deck(deck) is None:
                    print("The deck is empty")
                continue
            try:
                number = int(choice)
            except ValueError:
                print("Enter a card number, d or q")
                continue
            if not 1 <= number <= len(player.hand):
                print("No card with that number")
                continue
            try:
                player.click_card(player.hand[number - 1])
            except IllegalMoveError as error:
                print(error)

    return wait


def _on_table(card: Card | None) -> None:
    if card is not None:
        print(f"Table: {_describe(card)}")


def main(argv: list[str] | None = None) -> int:
    """Play a game on the console; returns the exit status."""
    parser = argparse.ArgumentParser(prog="durak", description="Play durak.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--ai-only", action="store_true", help="let two computer players play"
    )
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    deck = Deck(rng)
    players: list[Player] = (
        [AIPlayer(), AIPlayer()] if args.ai_only else [HumanPlayer(), AIPlayer()]
    )
    controller = GameController(
        PlayerBuffer(players),
        create_test_fsm(),
        create_test_cards(),
        deck,
        rng=rng,
        wait=_console_wait(deck),
        on_table=_on_table,
        notify=print,
    )
    controller.start()
    print("Game over")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())