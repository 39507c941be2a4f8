"""HTTP client for the counter server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = "http://127.0.0.1:8676"
    timeout: float = 10.0


def build_base_url(host: str, port: int) -> str:
    return f"http://{host}:{port}"


class CounterServerClient:
    def __init__(
        self,
        config: ClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                base_url=self._config.base_url, timeout=self._config.timeout
            )
        self._client = http_client

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _json(self, response: httpx.Response) -> dict:
        response.raise_for_status()
        return response.json()

    def health(self) -> dict:
        return self._json(self._client.get("/health"))

    def get_state(self) -> dict:
        return self._json(self._client.get("/api/state"))

    def dispatch(self, action_type: Any, /, **payload: Any) -> dict:
        body = {**payload, "type": action_type}
        return self._json(self._client.post("/api/actions", json=body))

    def reset(self) -> dict:
        return self._json(self._client.post("/api/state/reset"))

    def __enter__(self) -> "CounterServerClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
