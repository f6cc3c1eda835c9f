"""
Themes - applying theme overrides and partitioning tokens by section.
"""

from chuk_mcp_tokens.themes.apply import (
    compute_tokens_by_applying_themes,
    filter_themed_tokens,
    theme_identifier,
)
from chuk_mcp_tokens.themes.partition import (
    allowed_sections,
    filter_exportable,
    partition_primitive,
    select_themes,
    themed_sections,
    tokens_in_section,
)

__all__ = [
    "allowed_sections",
    "compute_tokens_by_applying_themes",
    "filter_exportable",
    "filter_themed_tokens",
    "partition_primitive",
    "select_themes",
    "theme_identifier",
    "themed_sections",
    "tokens_in_section",
]
