#!/usr/bin/env python3
"""
Walkthrough: threading counter state through the reducer

Starts from ``{ count: 0 }``, applies an increment and then a decrement,
printing the state after each step. The caller owns the state value and
passes it into every transition, receiving the next value back.

With ``--base-url`` the same actions are dispatched to a running counter
server and the printed states come from its responses.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from counter_reducer_stack.client.api import ClientConfig, CounterServerClient
from counter_reducer_stack.reducer.actions import Action, ActionType
from counter_reducer_stack.reducer.state import (
    CounterState,
    format_state,
    initial_state,
)
from counter_reducer_stack.reducer.transition import transition

logger = logging.getLogger(__name__)

WALKTHROUGH_ACTIONS = (ActionType.INCREMENT, ActionType.DECREMENT)


def run_walkthrough(out: Callable[[str], None] = print) -> list[CounterState]:
    state = initial_state()
    out(format_state(state))
    states = [state]

    for action_type in WALKTHROUGH_ACTIONS:
        state = transition(state, Action(type=action_type.value))
        out(format_state(state))
        states.append(state)

    return states


def run_remote_walkthrough(
    client: CounterServerClient, out: Callable[[str], None] = print
) -> list[CounterState]:
    """Same walkthrough, but the server owns the state."""
    response = client.reset()
    logger.debug("Server reset: %s", response)
    out(response["formatted"])
    states = [CounterState(count=response["count"])]

    for action_type in WALKTHROUGH_ACTIONS:
        response = client.dispatch(action_type.value)
        out(response["formatted"])
        states.append(CounterState(count=response["count"]))

    return states


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Counter reducer walkthrough")
    parser.add_argument("--base-url", help="Run against a counter server")
    parser.add_argument("--log-level", default="warning")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.base_url:
        with CounterServerClient(ClientConfig(base_url=args.base_url)) as client:
            run_remote_walkthrough(client)
        return 0

    run_walkthrough()
    return 0


if __name__ == "__main__":
    sys.exit(main())
