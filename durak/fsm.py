"""A small finite state machine driving the flow of a game."""

from __future__ import annotations

import enum
import weakref
from collections.abc import Iterable, Mapping


class Action(enum.Enum):
    """What the game should do on entering a state."""

    START_ROUND = enum.auto()
    GIVE_CARDS = enum.auto()
    PLAYER_ATTACK = enum.auto()
    NEXT_PLAYER_DEFEND = enum.auto()
    ROUND_END = enum.auto()
    PLAYER_TAKE_CARDS = enum.auto()
    DRAW_CARDS = enum.auto()
    NONE = enum.auto()


class Event(enum.Enum):
    """Something that happened in the game and may move the machine on."""

    GAME_STARTED = enum.auto()
    ROUND_STARTED = enum.auto()
    PLAYER_ATTACKED = enum.auto()
    PLAYER_DEFENDED = enum.auto()
    PLAYER_CANT_DEFEND = enum.auto()
    ROUND_ENDED = enum.auto()
    CARDS_DRAWN = enum.auto()


class State:
    """A state with the action run on entry and weak links to its successors."""

    def __init__(self, on_enter: Action) -> None:
        self.on_enter = on_enter
        self._transitions: dict[Event, weakref.ref[State]] = {}

    def set_transitions(self, transitions: Mapping[Event, State]) -> None:
        """Replace the transitions; targets are held weakly."""
        self._transitions = {
            event: weakref.ref(target) for event, target in transitions.items()
        }

    def _target(self, event: Event) -> State | None:
        ref = self._transitions.get(event)
        return ref() if ref is not None else None


class FSM:
    """Holds the states and the current one, and follows transitions on events."""

    def __init__(self, start: State | None, states: Iterable[State]) -> None:
        self.current = start
        self.states = list(states)

    def on_event(self, event: Event) -> Action | None:
        """Follow the transition for ``event`` and return the new state's action.

        Returns None, leaving the machine where it is, if there is no current
        state, no transition for the event, or the target state is gone.
        """
        if self.current is None:
            return None
        target = self.current._target(event)
        if target is None:
            return None
        self.current = target
        return target.on_enter