"""
Reference resolver - decides between a literal value and a reference.

A token whose value points at another token renders as the reference
text produced by `options.name_of` when references are allowed, and as
the resolved literal otherwise. Rendered text has its quote characters
stripped before it enters the output mapping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from chuk_mcp_tokens.errors import DanglingReferenceError
from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.values.css import value_to_css
from chuk_mcp_tokens.values.options import RenderOptions

logger = logging.getLogger(__name__)


def tokens_by_id(tokens: list[Token]) -> dict[str, Token]:
    """Index tokens by id. Later duplicates win."""
    return {token.id: token for token in tokens}


def resolve_literal(token: Token, all_tokens: Mapping[str, Token]) -> Any:
    """
    Find the literal value behind a token, following reference chains.

    Args:
        token: Token to resolve
        all_tokens: Reference dictionary keyed by token id

    Returns:
        The first literal value found along the chain

    Raises:
        DanglingReferenceError: If a link in the chain is missing
        ValueError: If the chain loops
    """
    seen: set[str] = set()
    current = token
    while current.value is None and current.referenced_token_id is not None:
        if current.id in seen:
            raise ValueError(f"Reference cycle detected at token '{current.id}'")
        seen.add(current.id)
        target = all_tokens.get(current.referenced_token_id)
        if target is None:
            raise DanglingReferenceError(current.id, current.referenced_token_id)
        current = target
    return current.value


def render_value(token: Token, all_tokens: Mapping[str, Token], options: RenderOptions) -> str:
    """
    Render a token's value as text.

    Args:
        token: Token to render
        all_tokens: Reference dictionary keyed by token id
        options: Rendering options, including the `name_of` capability

    Returns:
        Reference text or the literal CSS value

    Raises:
        DanglingReferenceError: If the referenced token is absent
        ValueError: If the literal is missing or malformed
    """
    if token.referenced_token_id is not None and options.allow_references and options.name_of:
        target = all_tokens.get(token.referenced_token_id)
        if target is None:
            raise DanglingReferenceError(token.id, token.referenced_token_id)
        return options.name_of(target)

    return value_to_css(token.token_type, resolve_literal(token, all_tokens), options)


def render_literal_fallback(
    token: Token,
    all_tokens: Mapping[str, Token],
    options: RenderOptions,
) -> str | None:
    """
    Best-effort literal rendering for a token whose reference is dangling.

    Returns:
        The literal text, or None if the token carries no usable literal
    """
    if token.value is None:
        return None
    try:
        return value_to_css(token.token_type, token.value, replace(options, allow_references=False))
    except ValueError:
        logger.warning(f"Token '{token.id}' has an unrenderable literal value")
        return None


def clean_value(text: str) -> str:
    """Strip quote characters from rendered text."""
    return text.replace('"', "").replace("'", "")
