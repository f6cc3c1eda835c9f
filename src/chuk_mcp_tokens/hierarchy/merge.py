"""
Deep merge for output mappings.

Merging is pure: inputs are never modified. Source values win over
target values, except that two Nodes merge recursively and two Themed
values merge their per-theme entries. A "description" key is always
placed after its sibling keys.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import DESCRIPTION_KEY
from chuk_mcp_tokens.models.output import Node, OutputValue, Themed


def deep_merge(target: OutputValue | None, source: OutputValue | None) -> OutputValue | None:
    """
    Merge `source` into `target`.

    Args:
        target: Earlier value (may be None)
        source: Later value (may be None)

    Returns:
        The combined value; the other side unchanged if one is None
    """
    if target is None:
        return source
    if source is None:
        return target

    if isinstance(target, Node) and isinstance(source, Node):
        return _merge_nodes(target, source)
    if isinstance(target, Themed) and isinstance(source, Themed):
        return Themed(
            values={**target.values, **source.values},
            description=source.description or target.description,
        )
    return source


def _merge_nodes(target: Node, source: Node) -> Node:
    children = dict(target.children)

    # Description is pulled out and re-added last
    description = source.children.get(DESCRIPTION_KEY)
    if description is None:
        description = target.children.get(DESCRIPTION_KEY)
    children.pop(DESCRIPTION_KEY, None)

    for key, value in source.children.items():
        if key == DESCRIPTION_KEY:
            continue
        if key in children:
            merged = deep_merge(children[key], value)
            if merged is not None:
                children[key] = merged
        else:
            children[key] = value

    if description is not None:
        children[DESCRIPTION_KEY] = description
    return Node(children)


def merge_all(values: list[OutputValue]) -> OutputValue | None:
    """Merge a sequence of values left to right."""
    result: OutputValue | None = None
    for value in values:
        result = deep_merge(result, value)
    return result
