"""Seating of players around the table, with turn stepping."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class PlayerBuffer(Generic[T]):
    """Players in seating order and the seat whose turn it is.

    Before the first call to :meth:`next` no seat is current.
    """

    def __init__(self, players: Iterable[T]) -> None:
        self._players = list(players)
        self._current = -1

    def _require_players(self) -> None:
        if not self._players:
            raise IndexError("no players at the table")

    def next(self) -> T:
        """Move to the next seat, wrapping after the last one."""
        self._require_players()
        step = self._current + 1
        self._current = step if step < len(self._players) else 0
        return self._players[self._current]

    def prev(self) -> T:
        """Move back one seat; stepping back from the first seat stays there."""
        self._require_players()
        self._current = max(self._current - 1, 0)
        return self._players[self._current]

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[T]:
        return iter(self._players)

    def __getitem__(self, index: int) -> T:
        """Return the player at ``index``, counting round the table."""
        self._require_players()
        return self._players[index % len(self._players)]