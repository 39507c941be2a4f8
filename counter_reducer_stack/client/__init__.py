"""Client library for talking to the local counter server."""

from counter_reducer_stack.client.api import ClientConfig, CounterServerClient

__all__ = ["ClientConfig", "CounterServerClient"]
