"""State store tests."""

from __future__ import annotations

import asyncio

from counter_reducer_stack.reducer.actions import Action
from counter_reducer_stack.reducer.state import CounterState
from counter_reducer_stack.server.store import StateStore


def test_dispatch_threads_state_through_transition() -> None:
    async def scenario() -> list[CounterState]:
        store = StateStore(CounterState(count=0))
        first = await store.dispatch(Action(type="counter/increment"))
        second = await store.dispatch(Action(type="counter/increment"))
        third = await store.dispatch(Action(type="counter/decrement"))
        return [first, second, third, await store.get()]

    assert asyncio.run(scenario()) == [
        CounterState(count=1),
        CounterState(count=2),
        CounterState(count=1),
        CounterState(count=1),
    ]


def test_unrecognized_dispatch_keeps_state() -> None:
    async def scenario() -> CounterState:
        store = StateStore(CounterState(count=4))
        await store.dispatch(Action(type=None))
        return await store.dispatch(Action(type="counter/unknown"))

    assert asyncio.run(scenario()) == CounterState(count=4)


def test_reset_returns_to_initial_state() -> None:
    async def scenario() -> CounterState:
        store = StateStore(CounterState(count=10))
        await store.dispatch(Action(type="counter/decrement"))
        return await store.reset()

    assert asyncio.run(scenario()) == CounterState(count=10)


def test_concurrent_dispatches_are_all_applied() -> None:
    async def scenario() -> CounterState:
        store = StateStore(CounterState(count=0))
        await asyncio.gather(
            *(store.dispatch(Action(type="counter/increment")) for _ in range(50))
        )
        return await store.get()

    assert asyncio.run(scenario()) == CounterState(count=50)
