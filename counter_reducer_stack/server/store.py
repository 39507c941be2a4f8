"""State store with functional update semantics."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from counter_reducer_stack.reducer.actions import Action
from counter_reducer_stack.reducer.state import CounterState
from counter_reducer_stack.reducer.transition import transition

logger = logging.getLogger(__name__)


class StateStore:
    """Async-safe state store using pure update functions."""

    def __init__(self, initial_state: CounterState) -> None:
        self._initial_state = initial_state
        self._state = initial_state
        self._lock = asyncio.Lock()

    async def get(self) -> CounterState:
        async with self._lock:
            return self._state

    async def update(
        self, updater: Callable[[CounterState], CounterState]
    ) -> CounterState:
        async with self._lock:
            self._state = updater(self._state)
            return self._state

    async def dispatch(self, action: Action) -> CounterState:
        logger.debug("Dispatching action %r", action.type)
        return await self.update(lambda state: transition(state, action))

    async def reset(self) -> CounterState:
        logger.info("Resetting state to %s", self._initial_state)
        return await self.update(lambda _: self._initial_state)
