"""
Exceptions raised while exporting tokens.

Three families matter to callers:
- configuration problems (bad config, missing credentials or context)
- platform data problems (remote fetch failures)
- missing artifacts (snapshot or configuration files not on disk)

Dangling references are per-token and never abort an export on their own.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import ErrorMessages


class TokenExportError(Exception):
    """Base class for every exporter error."""


class ConfigurationError(TokenExportError):
    """Configuration or credentials are invalid."""


class MissingContextError(ConfigurationError):
    """A required identifier or credential is absent."""


class ArtifactMissingError(TokenExportError):
    """A file the export depends on does not exist."""


class RemoteFetchError(TokenExportError):
    """The platform API call failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(RemoteFetchError):
    """The platform rejected the credentials (401/403)."""


class NotFoundError(RemoteFetchError):
    """The requested design system, version or resource does not exist (404)."""


class DanglingReferenceError(TokenExportError, LookupError):
    """A token references an identifier absent from the reference dictionary."""

    def __init__(self, token_id: str, referenced_token_id: str):
        super().__init__(
            ErrorMessages.DANGLING_REFERENCE.format(
                token_id=token_id, referenced_token_id=referenced_token_id
            )
        )
        self.token_id = token_id
        self.referenced_token_id = referenced_token_id


class NameCollisionError(TokenExportError):
    """Name disambiguation was exhausted. Indicates a defect, not bad input."""


def describe_error(exc: BaseException) -> str:
    """
    Turn an exception into a message telling the user where to look.

    Args:
        exc: The exception raised by an export

    Returns:
        Human-readable message with a category prefix
    """
    if isinstance(exc, ConfigurationError):
        return f"Configuration problem: {exc}"
    if isinstance(exc, AuthenticationError):
        return f"Platform data problem (authentication): {exc}"
    if isinstance(exc, NotFoundError):
        return f"Platform data problem (not found): {exc}"
    if isinstance(exc, RemoteFetchError):
        return f"Platform data problem: {exc}"
    if isinstance(exc, ArtifactMissingError):
        return f"Missing artifact: {exc}"
    return f"Export failed: {exc}"
