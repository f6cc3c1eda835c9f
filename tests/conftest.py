"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_tokens.constants import TokenType
from chuk_mcp_tokens.models import (
    Collection,
    ExporterConfiguration,
    Theme,
    Token,
    TokenGroup,
    TokenOverride,
    TokenSnapshot,
)

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


def make_token(
    id: str,
    name: str,
    value: Any = None,
    token_type: TokenType = TokenType.COLOR,
    path: list[str] | None = None,
    **fields: Any,
) -> Token:
    """Build a token with sensible defaults."""
    return Token(
        id=id,
        name=name,
        token_type=token_type,
        value=value,
        token_path=path or [],
        **fields,
    )


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def token_factory() -> Callable[..., Token]:
    """Factory for building tokens."""
    return make_token


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns the same instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def bare_config() -> ExporterConfiguration:
    """Configuration without the metadata header."""
    return ExporterConfiguration(
        show_generated_file_disclaimer=False,
        show_last_updated=False,
    )


@pytest.fixture
def themed_snapshot() -> TokenSnapshot:
    """
    A primitive teal scale, two semantic surface tokens, and a Dark theme.

    The Dark theme overrides the background only; the accent references
    the primitive teal.
    """
    teal = make_token("teal-50", "50", "#00BFA5", path=["primitive", "ui-teal"])
    background = make_token(
        "surface-bg",
        "Background",
        "#FFFFFF",
        path=["semantic", "surface"],
        description="Page background",
    )
    accent = make_token(
        "surface-accent",
        "Accent",
        "#00BFA5",
        path=["semantic", "surface"],
        referenced_token_id="teal-50",
    )
    dark = Theme(
        id="theme-dark",
        name="Dark",
        overrides={"surface-bg": TokenOverride(value="#000000")},
    )
    return TokenSnapshot(tokens=[teal, background, accent], themes=[dark])


@pytest.fixture
def typed_snapshot() -> TokenSnapshot:
    """Tokens of several types for per-type file exports."""
    primary = make_token(
        "primary",
        "Primary",
        "#007AFF",
        path=["colors"],
        parent_group_id="g-colors",
        description="Brand primary",
    )
    small = make_token(
        "space-small",
        "Small",
        {"measure": 8, "unit": "px"},
        token_type=TokenType.SPACE,
    )
    button = make_token(
        "button-bg",
        "Background",
        "#333333",
        path=["button"],
        collection_id="c-components",
    )
    dark = Theme(
        id="theme-dark",
        name="Dark",
        overrides={"primary": TokenOverride(value="#0A84FF")},
    )
    return TokenSnapshot(
        tokens=[primary, small, button],
        groups=[TokenGroup(id="g-colors", name="Colors")],
        collections=[Collection(id="c-components", name="Components")],
        themes=[dark],
    )
