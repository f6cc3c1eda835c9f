"""
Token models - read-only snapshots of design system data.

Tokens, groups, collections and themes are fetched once per export and
never mutated. Theme application produces new Token instances.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from chuk_mcp_tokens.constants import TokenType

# Platform payloads use camelCase keys, Python code uses snake_case
_SNAPSHOT_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "alias_generator": to_camel,
}


class VariableModeInfo(BaseModel):
    """The variable mode a token value was imported from."""

    mode_id: str | None = None
    mode_name: str | None = None

    model_config = _SNAPSHOT_CONFIG


class Token(BaseModel):
    """
    A single design token.

    `value` always holds the resolved literal. When the token points at
    another token, `referenced_token_id` names the target as well.
    """

    id: str = Field(..., description="Stable identifier")
    name: str = Field(..., description="Display name")
    token_type: TokenType = Field(..., description="Semantic type")
    value: Any = Field(None, description="Resolved literal value")
    referenced_token_id: str | None = Field(None, description="Target of a reference value")
    description: str | None = None
    token_path: list[str] = Field(
        default_factory=list,
        description="Group names from root to immediate parent",
    )
    collection_id: str | None = None
    parent_group_id: str | None = None
    variable_mode_info: VariableModeInfo | None = None

    model_config = _SNAPSHOT_CONFIG

    @property
    def is_reference(self) -> bool:
        """Whether the value points at another token."""
        return self.referenced_token_id is not None


class TokenGroup(BaseModel):
    """A named container node in the token tree."""

    id: str
    name: str
    parent_group_id: str | None = None

    model_config = _SNAPSHOT_CONFIG


class Collection(BaseModel):
    """A named partition of tokens, such as a component library namespace."""

    id: str
    name: str

    model_config = _SNAPSHOT_CONFIG


class TokenOverride(BaseModel):
    """A theme's replacement value for one token."""

    value: Any = None
    referenced_token_id: str | None = None

    model_config = _SNAPSHOT_CONFIG


class Theme(BaseModel):
    """A named variant overriding some tokens' values."""

    id: str
    name: str
    overrides: dict[str, TokenOverride] = Field(
        default_factory=dict,
        description="Overrides keyed by token id",
    )

    model_config = _SNAPSHOT_CONFIG

    def overrides_token(self, token_id: str) -> bool:
        """Check if this theme overrides a token."""
        return token_id in self.overrides


class RemoteVersionIdentifier(BaseModel):
    """Identifies one version of one design system."""

    design_system_id: str
    version_id: str

    model_config = _SNAPSHOT_CONFIG


class ExportContext(BaseModel):
    """What the caller asked to export."""

    design_system_id: str | None = None
    version_id: str | None = None
    theme_ids: list[str] = Field(
        default_factory=list,
        description="Themes selected by the caller (include mode)",
    )

    model_config = _SNAPSHOT_CONFIG


class TokenSnapshot(BaseModel):
    """Everything fetched from the platform for one export."""

    tokens: list[Token] = Field(default_factory=list)
    groups: list[TokenGroup] = Field(default_factory=list)
    collections: list[Collection] = Field(default_factory=list)
    themes: list[Theme] = Field(default_factory=list)

    model_config = _SNAPSHOT_CONFIG

    def group_by_id(self, group_id: str | None) -> TokenGroup | None:
        """Find a group by id."""
        if group_id is None:
            return None
        return next((g for g in self.groups if g.id == group_id), None)
