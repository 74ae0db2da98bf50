"""Players at the table: a hand of cards and how each kind of player moves."""

from __future__ import annotations

import abc
import enum
from collections.abc import Callable, Iterable
from typing import Any

from durak.cards import Card, CardSuit
from durak.deck import Deck


class CardThrowResult(enum.Enum):
    """The controller's verdict on a card a player threw."""

    ACCEPTED = enum.auto()
    REJECTED_REQUIRES_REPEAT = enum.auto()


class UiMode(enum.Enum):
    """What a click on a card of a human player's hand means."""

    IDLE = enum.auto()
    ATTACK = enum.auto()
    DEFENCE = enum.auto()


class IllegalMoveError(ValueError):
    """Raised when a human player picks a card that cannot be played."""


class _Signal:
    """A list of callbacks run, in order of connection, on each emit."""

    def __init__(self) -> None:
        self._slots: list[tuple[Callable[..., Any], bool]] = []

    def connect(self, callback: Callable[..., Any], once: bool = False) -> None:
        """Run ``callback`` on every emit, or only on the next one if ``once``."""
        self._slots.append((callback, once))

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Stop running ``callback``."""
        self._slots = [(cb, once) for cb, once in self._slots if cb is not callback]

    def emit(self, *args: Any) -> None:
        slots = self._slots
        self._slots = [(cb, once) for cb, once in slots if not once]
        for callback, _ in slots:
            callback(*args)


class Player(abc.ABC):
    """A player holding a hand of cards.

    Signals:
      ``hand_changed(hand)`` after cards are taken or played,
      ``attacked(card)`` when the player chooses a card to attack with,
      ``defended(card_or_none)`` when the player answers an attack,
      ``took_card_from_deck(card, player)`` when the player draws from the deck.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)
        self.hand_changed = _Signal()
        self.attacked = _Signal()
        self.defended = _Signal()
        self.took_card_from_deck = _Signal()

    @property
    def hand(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def _index_of(self, card: Card) -> int | None:
        return next((i for i, held in enumerate(self._cards) if held is card), None)

    def take_cards(self, cards: Iterable[Card]) -> None:
        """Add ``cards`` to the end of the hand."""
        self._cards.extend(cards)
        self.hand_changed.emit(self.hand)

    def move_card(self, card: Card) -> Card | None:
        """Remove this very card object from the hand and return it, or None."""
        index = self._index_of(card)
        if index is None:
            return None
        return self._cards.pop(index)

    @abc.abstractmethod
    def on_attack_turn(self) -> None:
        """The player is asked to attack."""

    @abc.abstractmethod
    def on_defence_turn(self, attack_card: Card) -> None:
        """The player is asked to beat ``attack_card``."""

    def card_throw_result(
        self, result: CardThrowResult, thrown_card: Card | None
    ) -> Card | None:
        """Apply the verdict on a thrown card.

        An accepted card leaves the hand and is returned; otherwise the hand
        is left alone and None is returned.
        """
        if thrown_card is None or result is not CardThrowResult.ACCEPTED:
            return None
        played = self.move_card(thrown_card)
        if played is not None:
            self.hand_changed.emit(self.hand)
        return played


class AIPlayer(Player):
    """A computer player with the simplest possible strategy."""

    def on_attack_turn(self) -> None:
        """Attack with the first card in hand; with no cards, do nothing."""
        if not self._cards:
            return
        self.attacked.emit(self._cards[0])

    def on_defence_turn(self, attack_card: Card) -> None:
        """Defend with the first higher card of the same suit, or with None."""
        defence = next(
            (
                card
                for card in self._cards
                if card > attack_card and card.suit == attack_card.suit
            ),
            None,
        )
        self.defended.emit(defence)


class HumanPlayer(Player):
    """A player whose moves come from clicks on the cards of the hand."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        super().__init__(cards)
        self.mode = UiMode.IDLE
        self.attack_card: Card | None = None

    def on_attack_turn(self) -> None:
        """Wait for the player to click a card to attack with."""
        self.mode = UiMode.ATTACK

    def on_defence_turn(self, attack_card: Card) -> None:
        """Wait for the player to click a card that beats ``attack_card``."""
        self.mode = UiMode.DEFENCE
        self.attack_card = attack_card

    def click_card(self, card: Card) -> None:
        """Handle a click on ``card`` according to the current mode.

        Raises IllegalMoveError if the card is not in hand, or if in defence
        it does not beat the attacking card; the mode is then unchanged.
        """
        if self._index_of(card) is None:
            raise IllegalMoveError("card is not in the player's hand")
        if self.mode is UiMode.ATTACK:
            self.mode = UiMode.IDLE
            self.attacked.emit(card)
        elif self.mode is UiMode.DEFENCE:
            attack = self.attack_card
            if attack is None or not card.beats(attack, CardSuit.DM):
                raise IllegalMoveError("this card does not beat the attack one")
            self.mode = UiMode.IDLE
            self.attack_card = None
            self.defended.emit(card)

    def take_card_from_deck(self, deck: Deck) -> Card | None:
        """Draw the top card of ``deck`` and announce it; None if the deck is empty."""
        card = deck.take_top()
        if card is not None:
            self.took_card_from_deck.emit(card, self)
        return card