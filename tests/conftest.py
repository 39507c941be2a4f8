"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from counter_reducer_stack.server.app import create_app
from counter_reducer_stack.server.config import ServerConfig


@pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(host="127.0.0.1", port=8676, log_level="info", initial_count=0)


@pytest.fixture
def test_client(server_config: ServerConfig) -> Iterator[TestClient]:
    with TestClient(create_app(server_config)) as client:
        yield client
