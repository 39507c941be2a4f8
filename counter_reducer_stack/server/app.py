"""
FastAPI server that owns the counter state and applies dispatched actions.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import Any

from fastapi import Body, FastAPI
from pydantic import BaseModel

from counter_reducer_stack.reducer.actions import (
    Action,
    ActionType,
    action_from_mapping,
)
from counter_reducer_stack.reducer.state import CounterState, initial_state, snapshot
from counter_reducer_stack.server.config import ServerConfig, load_config
from counter_reducer_stack.server.store import StateStore

logger = logging.getLogger(__name__)


class StateResponse(BaseModel):
    count: int
    formatted: str


class DispatchResponse(StateResponse):
    action_type: Any = None
    recognized: bool


def _is_recognized(action: Action) -> bool:
    return any(action.type == member for member in ActionType)


def _state_response(state: CounterState) -> StateResponse:
    snap = snapshot(state)
    return StateResponse(count=snap.count, formatted=snap.formatted)


def create_app(config: ServerConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = StateStore(initial_state(config.initial_count))
        app.state.config = config
        logger.info("Counter store ready (count=%d)", config.initial_count)
        yield

    app = FastAPI(
        title="Counter Reducer Stack",
        description="Counter state driven by a pure reducer",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/api/state", response_model=StateResponse)
    async def get_state():
        store: StateStore = app.state.store
        state = await store.get()
        return _state_response(state)

    @app.post("/api/actions", response_model=DispatchResponse)
    async def dispatch_action(body: dict[str, Any] = Body(...)):
        store: StateStore = app.state.store
        action = action_from_mapping(body)
        recognized = _is_recognized(action)
        if not recognized:
            logger.info("Ignoring unrecognized action type %r", action.type)

        state = await store.dispatch(action)
        response = _state_response(state)
        return DispatchResponse(
            **response.model_dump(),
            action_type=action.type,
            recognized=recognized,
        )

    @app.post("/api/state/reset", response_model=StateResponse)
    async def reset_state():
        store: StateStore = app.state.store
        state = await store.reset()
        return _state_response(state)

    return app


def main() -> None:
    import uvicorn

    config = load_config()

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level)


if __name__ == "__main__":
    main()
