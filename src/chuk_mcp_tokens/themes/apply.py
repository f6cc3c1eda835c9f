"""
Theme application - derive a themed token list from a base list.

The derived list has the same identifiers and order as the base list;
only values differ. Tokens that reference other tokens pick up the
themed literal of their target.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chuk_mcp_tokens.constants import StringCase
from chuk_mcp_tokens.models.token import Theme, Token, TokenOverride
from chuk_mcp_tokens.naming.case import code_safe_variable_name

logger = logging.getLogger(__name__)


def compute_tokens_by_applying_themes(
    base_tokens: list[Token],
    reference_tokens: list[Token],
    themes: Iterable[Theme],
) -> list[Token]:
    """
    Apply theme overrides to a token list.

    Args:
        base_tokens: Tokens to derive themed copies of
        reference_tokens: Tokens available as reference targets
        themes: Themes to apply, later themes winning

    Returns:
        New token list, same ids and order as `base_tokens`
    """
    overrides: dict[str, TokenOverride] = {}
    for theme in themes:
        overrides.update(theme.overrides)

    themed = [
        token.model_copy(
            update={
                "value": overrides[token.id].value,
                "referenced_token_id": overrides[token.id].referenced_token_id,
            }
        )
        if token.id in overrides
        else token
        for token in base_tokens
    ]

    index = {token.id: token for token in reference_tokens}
    index.update((token.id, token) for token in themed)

    resolved: list[Token] = []
    for token in themed:
        if token.referenced_token_id is None:
            resolved.append(token)
            continue
        value = _resolved_value(token.id, index, set())
        resolved.append(token if value == token.value else token.model_copy(update={"value": value}))
    return resolved


def _resolved_value(token_id: str, index: dict[str, Token], seen: set[str]) -> object:
    token = index[token_id]
    target_id = token.referenced_token_id
    if target_id is None or token_id in seen:
        return token.value
    if target_id not in index:
        logger.debug(f"Token '{token_id}' references unknown token '{target_id}'")
        return token.value
    seen.add(token_id)
    return _resolved_value(target_id, index, seen)


def filter_themed_tokens(tokens: list[Token], theme: Theme) -> list[Token]:
    """Keep only tokens the theme overrides."""
    return [token for token in tokens if theme.overrides_token(token.id)]


def theme_identifier(theme: Theme, style: StringCase = StringCase.KEBAB) -> str:
    """Get a code-safe identifier for a theme."""
    return code_safe_variable_name(theme.name, style) or theme.id
