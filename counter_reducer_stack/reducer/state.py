"""Counter state record and its plain views."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CounterState:
    count: int


@dataclass(frozen=True)
class StateSnapshot:
    count: int
    formatted: str


def initial_state(count: int = 0) -> CounterState:
    return CounterState(count=count)


def format_state(state: CounterState) -> str:
    return f"{{ count: {state.count} }}"


def snapshot(state: CounterState) -> StateSnapshot:
    return StateSnapshot(count=state.count, formatted=format_state(state))
