"""Pure state transitions for the counter."""

from __future__ import annotations

from typing import Iterable

from counter_reducer_stack.reducer.actions import Action, ActionType
from counter_reducer_stack.reducer.state import CounterState


def transition(state: CounterState, action: Action) -> CounterState:
    """Return the state that follows ``state`` once ``action`` is applied.

    Unrecognized, missing or non-string action types fall through and the
    input state is returned as-is.
    """
    if action.type == ActionType.INCREMENT:
        return CounterState(count=state.count + 1)
    if action.type == ActionType.DECREMENT:
        return CounterState(count=state.count - 1)
    return state


def replay(state: CounterState, actions: Iterable[Action]) -> CounterState:
    for action in actions:
        state = transition(state, action)
    return state


def trace(state: CounterState, actions: Iterable[Action]) -> list[CounterState]:
    states = [state]
    for action in actions:
        state = transition(state, action)
        states.append(state)
    return states
