"""
Output mapping - the nested structure accumulated during an export.

Each node is one of three variants:
- Leaf: a rendered scalar value
- Themed: values keyed by theme (or "base") plus an optional description
- Node: a mapping of key to child

Serialization goes through `to_json_value`, which keeps the description
key last in every Themed object.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from chuk_mcp_tokens.constants import DESCRIPTION_KEY


@dataclass(frozen=True)
class Leaf:
    """A rendered scalar value."""

    value: str


@dataclass(frozen=True)
class Themed:
    """Values keyed by theme identifier, with an optional trailing description."""

    values: dict[str, str] = field(default_factory=dict)
    description: str | None = None


@dataclass(frozen=True)
class Node:
    """A nested mapping of key to child."""

    children: dict[str, OutputValue] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return bool(self.children)

    def get(self, key: str) -> OutputValue | None:
        """Get a child by key."""
        return self.children.get(key)

    def at(self, *keys: str) -> OutputValue | None:
        """Walk a key path, returning None if any step is missing."""
        current: OutputValue | None = self
        for key in keys:
            if not isinstance(current, Node):
                return None
            current = current.children.get(key)
        return current


OutputValue = Leaf | Themed | Node


def to_json_value(value: OutputValue) -> Any:
    """Convert an output value into plain JSON-compatible data."""
    if isinstance(value, Leaf):
        return value.value
    if isinstance(value, Themed):
        data: dict[str, Any] = dict(value.values)
        if value.description:
            data[DESCRIPTION_KEY] = value.description
        return data
    return {key: to_json_value(child) for key, child in value.children.items()}


def to_json_text(value: OutputValue, indent: int = 2) -> str:
    """Serialize an output value to JSON text."""
    return json.dumps(to_json_value(value), indent=indent or None, ensure_ascii=False)
