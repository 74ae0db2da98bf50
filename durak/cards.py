"""Playing cards, suits and the rules for beating one card with another."""

from __future__ import annotations

import enum

MIN_RANK = 1
MAX_RANK = 14

_FACE_NAMES = {11: "J", 12: "Q", 13: "K", 14: "A"}


class CardSuit(enum.IntEnum):
    """Card suits; ``DM`` is a placeholder suit that no card is dealt in."""

    HEART = 0
    DIAMOND = 1
    SPADE = 2
    CLUB = 3
    DM = 4


_SUIT_GLYPHS = {
    CardSuit.HEART: "{",
    CardSuit.DIAMOND: "[",
    CardSuit.SPADE: "}",
    CardSuit.CLUB: "]",
}


def suit_to_string(suit: CardSuit) -> str:
    """Return the glyph the card font uses for ``suit`` (empty for ``DM``)."""
    return _SUIT_GLYPHS.get(suit, "")


def card_hash(card: Card) -> int:
    """Hash a card from its suit and rank."""
    return hash(int(card.suit)) ^ (hash(card.rank) << 1)


class Card:
    """A single card. Ranks are clamped into the range 1..14."""

    __slots__ = ("_suit", "_rank", "__weakref__")

    def __init__(self, suit: CardSuit, rank: int) -> None:
        self._suit = CardSuit(suit)
        self._rank = min(max(int(rank), MIN_RANK), MAX_RANK)

    @property
    def suit(self) -> CardSuit:
        return self._suit

    @property
    def rank(self) -> int:
        return self._rank

    def beats(self, other: Card, trump: CardSuit) -> bool:
        """Tell whether this card beats ``other`` when ``trump`` is the trump suit."""
        if self._suit == trump and other.suit != trump:
            return True
        return self._suit == other.suit and self > other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank == other.rank and self._suit == other.suit

    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank < other.rank

    def __le__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank <= other.rank

    def __gt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank > other.rank

    def __ge__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._rank >= other.rank

    def __hash__(self) -> int:
        return card_hash(self)

    def __str__(self) -> str:
        return _FACE_NAMES.get(self._rank, str(self._rank))

    def __repr__(self) -> str:
        return f"Card({self._suit.name}, {self._rank})"