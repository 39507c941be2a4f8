"""Pure reducer layer for the counter."""

from counter_reducer_stack.reducer.actions import Action, ActionType, action_from_mapping
from counter_reducer_stack.reducer.state import CounterState, format_state, initial_state
from counter_reducer_stack.reducer.transition import replay, trace, transition

__all__ = [
    "Action",
    "ActionType",
    "CounterState",
    "action_from_mapping",
    "format_state",
    "initial_state",
    "replay",
    "trace",
    "transition",
]
