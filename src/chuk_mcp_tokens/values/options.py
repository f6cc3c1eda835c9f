"""Rendering options shared by the value renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from chuk_mcp_tokens.constants import ColorFormat

if TYPE_CHECKING:
    from chuk_mcp_tokens.models.config import ExporterConfiguration
    from chuk_mcp_tokens.models.token import Token


class NameOf(Protocol):
    """Capability that turns a referenced token into its reference text."""

    def __call__(self, token: Token) -> str: ...


@dataclass(frozen=True)
class RenderOptions:
    """How token values are rendered."""

    allow_references: bool = True
    decimals: int = 3
    color_format: ColorFormat = ColorFormat.SMART_HASH_HEX
    force_rem_unit: bool = False
    rem_base: float = 16
    name_of: NameOf | None = None

    @classmethod
    def from_config(
        cls,
        config: ExporterConfiguration,
        name_of: NameOf | None = None,
    ) -> RenderOptions:
        """Build render options from exporter configuration."""
        return cls(
            allow_references=config.use_references,
            decimals=config.color_precision,
            color_format=config.color_format,
            force_rem_unit=config.force_rem_unit,
            rem_base=config.rem_base,
            name_of=name_of,
        )
