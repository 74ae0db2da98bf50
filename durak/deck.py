"""The draw pile: a shuffled stack of cards taken from the top."""

from __future__ import annotations

import random
from collections.abc import Iterable

from durak.cards import Card


class Deck:
    """A stack of cards; cards put in are shuffled and laid on top."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._cards: list[Card] = []
        self._rng = rng if rng is not None else random.Random()

    def put_cards(self, cards: Iterable[Card]) -> None:
        """Shuffle ``cards`` and push them onto the stack."""
        shuffled = list(cards)
        self._rng.shuffle(shuffled)
        self._cards.extend(shuffled)

    def top(self) -> Card | None:
        """Return the top card without removing it, or None if the deck is empty."""
        return self._cards[-1] if self._cards else None

    def take_top(self) -> Card | None:
        """Remove and return the top card, or None if the deck is empty."""
        return self._cards.pop() if self._cards else None

    def __len__(self) -> int:
        return len(self._cards)