"""
Remote platform client - fetches token data over the platform REST API.

Uses httpx. Authentication failures and missing resources raise
distinct errors so callers can tell a credentials problem from a
wrong design system or version id.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import (
    AuthenticationError,
    MissingContextError,
    NotFoundError,
    RemoteFetchError,
)
from chuk_mcp_tokens.models.token import (
    Collection,
    RemoteVersionIdentifier,
    Theme,
    Token,
    TokenGroup,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.supernova.io/api/v2"


class RemoteTokenClient:
    """Client for the design system platform API."""

    def __init__(
        self,
        api_token: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_token: API token (defaults to SUPERNOVA_API_TOKEN)
            base_url: API root (defaults to SUPERNOVA_API_URL or the public API)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests

        Raises:
            MissingContextError: If no API token is available
        """
        self.api_token = api_token or os.getenv("SUPERNOVA_API_TOKEN")
        if not self.api_token:
            raise MissingContextError(ErrorMessages.MISSING_API_TOKEN)
        self.base_url = (base_url or os.getenv("SUPERNOVA_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def get_tokens(self, version: RemoteVersionIdentifier) -> list[Token]:
        """Fetch every token in a design system version."""
        return await self._get_list(version, "tokens", "tokens", Token)

    async def get_token_groups(self, version: RemoteVersionIdentifier) -> list[TokenGroup]:
        """Fetch every token group in a design system version."""
        return await self._get_list(version, "token-groups", "groups", TokenGroup)

    async def get_token_collections(self, version: RemoteVersionIdentifier) -> list[Collection]:
        """Fetch every token collection in a design system version."""
        return await self._get_list(version, "collections", "collections", Collection)

    async def get_token_themes(self, version: RemoteVersionIdentifier) -> list[Theme]:
        """Fetch every theme in a design system version."""
        return await self._get_list(version, "themes", "themes", Theme)

    async def _get_list(
        self,
        version: RemoteVersionIdentifier,
        resource: str,
        key: str,
        model: type,
    ) -> list[Any]:
        url = (
            f"{self.base_url}/design-systems/{version.design_system_id}"
            f"/versions/{version.version_id}/{resource}"
        )
        payload = await self._get(url)
        items = payload if isinstance(payload, list) else (payload or {}).get(key, [])
        try:
            return TypeAdapter(list[model]).validate_python(items)  # type: ignore[valid-type]
        except ValidationError as e:
            raise RemoteFetchError(f"Unexpected {resource} payload from {url}: {e}") from e

    async def _get(self, url: str) -> Any:
        logger.debug(f"GET {url}")
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(
                    url,
                    headers={"Authorization": f"Bearer {self.api_token}"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise RemoteFetchError(f"Could not reach {url}: {e}") from e

        status = response.status_code
        if status in (401, 403):
            raise AuthenticationError(
                ErrorMessages.AUTHENTICATION_FAILED.format(status=status), status
            )
        if status == 404:
            raise NotFoundError(ErrorMessages.RESOURCE_NOT_FOUND.format(status=status, url=url), status)
        if status >= 400:
            raise RemoteFetchError(ErrorMessages.FETCH_FAILED.format(status=status, url=url), status)
        return response.json()
