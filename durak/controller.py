"""The game controller: deals cards and runs rounds of attack and defence."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Union

from durak.cards import Card, CardSuit
from durak.deck import Deck
from durak.fsm import FSM, Action, Event
from durak.playerbuffer import PlayerBuffer
from durak.players import CardThrowResult, Player

DEFAULT_CARDS_PER_PLAYER = 6

MSG_CANT_DEFEND = "Player can't defend"
MSG_DEFENDED = "Player defended with card"
MSG_BAD_DEFENCE = "Player can't defend with this card"


@dataclass(frozen=True)
class WaitCritical:
    """The player being waited for never answered."""


@dataclass(frozen=True)
class DefenceAccepted:
    """The defender beat the attacking card with ``card``."""

    card: Card


@dataclass(frozen=True)
class DefenceRejected:
    """The defender offered a card that does not beat the attacking one."""


@dataclass(frozen=True)
class DefenceNoCard:
    """The defender had nothing to defend with."""


DefenceResult = Union[DefenceAccepted, DefenceRejected, DefenceNoCard]


class GameController:
    """Runs the game: follows the state machine and asks players for moves.

    ``wait(player)`` is called when a player has not answered a request
    straight away; it is expected to drive the player (for instance by
    reading input) until it answers. If the player still has not answered
    afterwards, the request ends with :class:`WaitCritical`.
    """

    def __init__(
        self,
        players: PlayerBuffer[Player],
        fsm: FSM,
        heap: Iterable[Card],
        deck: Deck,
        *,
        rng: random.Random | None = None,
        wait: Callable[[Player], None] | None = None,
        on_table: Callable[[Card | None], None] | None = None,
        notify: Callable[[str], None] | None = None,
        on_logic_error: Callable[[], None] | None = None,
    ) -> None:
        self.players = players
        self.fsm = fsm
        self.heap: list[Card] = list(heap)
        self.deck = deck
        self.current_player: Player | None = None
        self.wait = wait
        self.on_table = on_table
        self.notify = notify
        self.on_logic_error = on_logic_error
        self._rng = rng if rng is not None else random.Random()
        for player in players:
            player.took_card_from_deck.connect(self._on_took_card)

    def _on_took_card(self, card: Card, player: Player) -> None:
        self.player_take_card_from_deck(player, card)

    def _say(self, message: str) -> None:
        if self.notify is not None:
            self.notify(message)

    def _put_on_table(self, card: Card | None) -> None:
        if self.on_table is not None:
            self.on_table(card)

    def player_take_card_from_deck(self, player: Player, card: Card) -> bool:
        """Give a card drawn from the deck to ``player`` if it is their turn."""
        if self.current_player is not player:
            return False
        player.take_cards([card])
        return True

    def random_from_heap(self) -> list[Card]:
        """Remove a hand's worth of randomly chosen cards from the heap."""
        if len(self.heap) < DEFAULT_CARDS_PER_PLAYER:
            raise ValueError("not enough cards in the heap to deal a hand")
        return [
            self.heap.pop(self._rng.randrange(len(self.heap)))
            for _ in range(DEFAULT_CARDS_PER_PLAYER)
        ]

    def format_table(self) -> None:
        """Deal a hand to every player and put the rest of the heap on the deck."""
        for player in self.players:
            player.take_cards(self.random_from_heap())
        self.deck.put_cards(self.heap)
        self.heap.clear()

    def start(self) -> None:
        """Start the game and run it until it can go no further."""
        if self.fsm.on_event(Event.GAME_STARTED) is None:
            return
        self.game_loop()

    def _await_answer(
        self, signal, player: Player, ask: Callable[[], None]
    ) -> Card | None | WaitCritical:
        answers: list[Card | None] = []
        signal.connect(answers.append, once=True)
        ask()
        if not answers and self.wait is not None:
            self.wait(player)
        if not answers:
            signal.disconnect(answers.append)
            return WaitCritical()
        return answers[0]

    def attack_request(self, player: Player) -> Card | WaitCritical:
        """Ask ``player`` to attack; the chosen card leaves the hand for the table."""
        answer = self._await_answer(player.attacked, player, player.on_attack_turn)
        if isinstance(answer, WaitCritical):
            return answer
        player.card_throw_result(CardThrowResult.ACCEPTED, answer)
        self._put_on_table(answer)
        return answer

    def defence_request(
        self, player: Player, attack_card: Card
    ) -> DefenceResult | WaitCritical:
        """Ask ``player`` to beat ``attack_card`` and judge the answer."""
        answer = self._await_answer(
            player.defended, player, lambda: player.on_defence_turn(attack_card)
        )
        if isinstance(answer, WaitCritical):
            return answer
        result = CardThrowResult.ACCEPTED
        if answer is not None and not answer.beats(attack_card, CardSuit.DM):
            result = CardThrowResult.REJECTED_REQUIRES_REPEAT
        player.card_throw_result(result, answer)
        self._put_on_table(None)
        if result is CardThrowResult.REJECTED_REQUIRES_REPEAT:
            return DefenceRejected()
        if answer is None:
            return DefenceNoCard()
        return DefenceAccepted(answer)

    def game_loop(self) -> None:
        """Play rounds until the state machine or a player stops the game."""
        while True:
            self.current_player = self.players.next()
            current_card: Card | None = None
            last_event = Event.GAME_STARTED

            while last_event is not Event.ROUND_ENDED:
                action = self.fsm.on_event(last_event)
                if action is None:
                    return

                if action is Action.GIVE_CARDS:
                    self.format_table()
                    last_event = Event.ROUND_STARTED
                elif action is Action.PLAYER_ATTACK:
                    attack = self.attack_request(self.current_player)
                    if isinstance(attack, WaitCritical):
                        return
                    current_card = attack
                    last_event = Event.PLAYER_ATTACKED
                elif action is Action.NEXT_PLAYER_DEFEND:
                    self.current_player = self.players.next()
                    defence = self.defence_request(self.current_player, current_card)
                    if isinstance(defence, WaitCritical):
                        return
                    if isinstance(defence, DefenceNoCard):
                        last_event = Event.PLAYER_CANT_DEFEND
                        self._say(MSG_CANT_DEFEND)
                    elif isinstance(defence, DefenceAccepted):
                        current_card = defence.card
                        last_event = Event.PLAYER_DEFENDED
                        self._say(MSG_DEFENDED)
                    else:
                        self.current_player = self.players.prev()
                        self._say(MSG_BAD_DEFENCE)
                        if self.on_logic_error is not None:
                            self.on_logic_error()
                elif action is Action.ROUND_END:
                    last_event = Event.ROUND_ENDED