"""
Action types for the counter reducer.

An action describes an intended state change. It is identified by its
``type`` discriminator and may carry extra payload fields, which the
current action set does not read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ActionType(str, Enum):
    """Recognized action identifiers."""

    INCREMENT = "counter/increment"
    DECREMENT = "counter/decrement"


def _empty_payload() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class Action:
    type: Any
    payload: Mapping[str, Any] = field(default_factory=_empty_payload, hash=False)

    def __post_init__(self) -> None:
        # Payload is always a private read-only copy.
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))


def action_from_mapping(data: Mapping[str, Any]) -> Action:
    """Build an action from a plain mapping such as decoded JSON.

    ``type`` is taken as-is (``None`` when absent); every other key ends up
    in the payload. Nothing is validated here.
    """
    payload = {key: value for key, value in data.items() if key != "type"}
    return Action(type=data.get("type"), payload=payload)
