"""
Token sources - where design system data comes from.

A source answers the four fetches an export needs. `SnapshotSource`
reads a YAML or JSON snapshot file; `RemoteTokenClient` (in
`platform.client`) calls the platform API.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

import yaml
from pydantic import ValidationError

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import ArtifactMissingError, ConfigurationError
from chuk_mcp_tokens.models.token import (
    Collection,
    RemoteVersionIdentifier,
    Theme,
    Token,
    TokenGroup,
    TokenSnapshot,
)

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    """Read-only access to one design system's token data."""

    async def get_tokens(self, version: RemoteVersionIdentifier) -> list[Token]: ...

    async def get_token_groups(self, version: RemoteVersionIdentifier) -> list[TokenGroup]: ...

    async def get_token_collections(
        self, version: RemoteVersionIdentifier
    ) -> list[Collection]: ...

    async def get_token_themes(self, version: RemoteVersionIdentifier) -> list[Theme]: ...


async def fetch_snapshot(source: TokenSource, version: RemoteVersionIdentifier) -> TokenSnapshot:
    """
    Fetch everything an export needs, one call after another.

    Args:
        source: Token source
        version: Design system version to fetch

    Returns:
        The combined snapshot
    """
    tokens = await source.get_tokens(version)
    groups = await source.get_token_groups(version)
    collections = await source.get_token_collections(version)
    themes = await source.get_token_themes(version)
    logger.info(
        f"Fetched {len(tokens)} tokens, {len(groups)} groups, "
        f"{len(collections)} collections, {len(themes)} themes"
    )
    return TokenSnapshot(tokens=tokens, groups=groups, collections=collections, themes=themes)


class InMemorySource:
    """Serves token data from an in-memory snapshot."""

    def __init__(self, snapshot: TokenSnapshot):
        self.snapshot = snapshot

    async def get_tokens(self, version: RemoteVersionIdentifier) -> list[Token]:
        return list(self.snapshot.tokens)

    async def get_token_groups(self, version: RemoteVersionIdentifier) -> list[TokenGroup]:
        return list(self.snapshot.groups)

    async def get_token_collections(self, version: RemoteVersionIdentifier) -> list[Collection]:
        return list(self.snapshot.collections)

    async def get_token_themes(self, version: RemoteVersionIdentifier) -> list[Theme]:
        return list(self.snapshot.themes)


class SnapshotSource(InMemorySource):
    """
    Serves token data from a snapshot file.

    The file is a mapping with `tokens`, `groups`, `collections` and
    `themes` lists, in the platform's camelCase field names. The version
    identifier is ignored; a snapshot holds one version.
    """

    def __init__(self, path: Path):
        """
        Initialize the source.

        Args:
            path: Path to a .yaml/.yml/.json snapshot file
        """
        self.path = path
        self._snapshot: TokenSnapshot | None = None

    @property
    def snapshot(self) -> TokenSnapshot:  # type: ignore[override]
        """The parsed snapshot, loaded on first access."""
        if self._snapshot is None:
            self._snapshot = self._load()
        return self._snapshot

    def _load(self) -> TokenSnapshot:
        if not self.path.exists():
            raise ArtifactMissingError(ErrorMessages.SNAPSHOT_NOT_FOUND.format(path=self.path))

        try:
            with open(self.path) as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Snapshot '{self.path}' is not valid YAML/JSON: {e}") from e

        try:
            snapshot = TokenSnapshot.model_validate(data or {})
        except ValidationError as e:
            raise ConfigurationError(f"Snapshot '{self.path}' is invalid: {e}") from e

        logger.debug(f"Loaded snapshot {self.path} ({len(snapshot.tokens)} tokens)")
        return snapshot
