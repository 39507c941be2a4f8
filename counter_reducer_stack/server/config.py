"""Server configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
import os


def _env_int(value: str | None, default: int, name: str) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


@dataclass(frozen=True)
class ServerConfig:
    host: str
    port: int
    log_level: str
    initial_count: int


def load_config(env: dict[str, str] | None = None) -> ServerConfig:
    env = os.environ if env is None else env

    host = env.get("COUNTER_HOST", "127.0.0.1")
    port = _env_int(env.get("COUNTER_PORT"), 8676, "COUNTER_PORT")
    log_level = env.get("COUNTER_LOG_LEVEL", "info").lower()
    initial_count = _env_int(
        env.get("COUNTER_INITIAL_COUNT"), 0, "COUNTER_INITIAL_COUNT"
    )

    return ServerConfig(
        host=host,
        port=port,
        log_level=log_level,
        initial_count=initial_count,
    )
