"""
Name resolver - assigns each token a unique key within one output branch.

The resolver is an explicit object owned by whoever builds a branch.
Call `reset()` before each branch (the primitive pass, each
section x theme pass) so uniqueness is enforced per branch, never
across separate exports.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chuk_mcp_tokens.constants import StringCase
from chuk_mcp_tokens.errors import NameCollisionError
from chuk_mcp_tokens.models.token import Token, TokenGroup
from chuk_mcp_tokens.naming.case import code_safe_variable_name, strip_leading_underscore

logger = logging.getLogger(__name__)

# Upper bound on numeric suffixes tried before giving up
MAX_SUFFIX = 10_000


class NameResolver:
    """
    Generates collision-free token names.

    Names are unique per path: two tokens may share a leaf name when
    they sit under different path segments. The same token always gets
    the same name within one reset scope.

    Collisions are resolved by:
    1. Widening the name with the parent group's name
    2. Appending a numeric suffix (2, 3, ...)
    """

    def __init__(self) -> None:
        self._names_by_token: dict[str, str] = {}
        self._issued: dict[tuple[tuple[str, ...], str], str] = {}

    def reset(self) -> None:
        """Forget every issued name."""
        self._names_by_token.clear()
        self._issued.clear()

    @property
    def issued_count(self) -> int:
        """Number of names issued since the last reset."""
        return len(self._issued)

    def resolve_name(
        self,
        token: Token,
        style: StringCase,
        path_segments: Sequence[str] = (),
        parent_group: TokenGroup | None = None,
    ) -> str:
        """
        Get the unique name for a token and record it.

        Args:
            token: The token to name
            style: Case style
            path_segments: Normalized path the name will live under
            parent_group: The token's parent group, used to widen on collision

        Returns:
            Code-safe name, unique under `path_segments` in this scope
        """
        if token.id in self._names_by_token:
            return self._names_by_token[token.id]

        path = tuple(path_segments)
        name = self._disambiguate(token, style, path, parent_group)
        self._issued[(path, name)] = token.id
        self._names_by_token[token.id] = name
        return name

    def peek_name(self, token: Token, style: StringCase) -> str:
        """
        Get a token's name without recording it.

        Used when a token is mentioned (e.g. as a reference target)
        rather than emitted, so mentions never claim a slot.
        """
        if token.id in self._names_by_token:
            return self._names_by_token[token.id]
        return self._candidate(token.name, style)

    def _candidate(self, label: str, style: StringCase) -> str:
        return strip_leading_underscore(code_safe_variable_name(label, style))

    def _is_free(self, path: tuple[str, ...], name: str) -> bool:
        return bool(name) and (path, name) not in self._issued

    def _disambiguate(
        self,
        token: Token,
        style: StringCase,
        path: tuple[str, ...],
        parent_group: TokenGroup | None,
    ) -> str:
        candidate = self._candidate(token.name, style) or self._candidate(token.id, style)
        if self._is_free(path, candidate):
            return candidate

        if parent_group is not None:
            widened = self._candidate(f"{parent_group.name} {token.name}", style)
            if self._is_free(path, widened):
                logger.debug(f"Name '{candidate}' taken, widened to '{widened}'")
                return widened

        for suffix in range(2, MAX_SUFFIX):
            suffixed = self._candidate(f"{token.name or token.id} {suffix}", style)
            if self._is_free(path, suffixed):
                logger.debug(f"Name '{candidate}' taken, suffixed to '{suffixed}'")
                return suffixed

        raise NameCollisionError(
            f"Could not find a free name for token '{token.id}' under '{'.'.join(path)}'"
        )
