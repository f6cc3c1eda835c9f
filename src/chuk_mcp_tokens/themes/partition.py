"""
Partitioner - splits tokens into sections and picks themes.

Primitive tokens are exported once, unthemed. Every other allowed
section is exported once per selected theme.
"""

from __future__ import annotations

import logging

from chuk_mcp_tokens.constants import Section, TokenType
from chuk_mcp_tokens.hierarchy.builder import top_level_section
from chuk_mcp_tokens.models.config import ExporterConfiguration
from chuk_mcp_tokens.models.token import Theme, Token

logger = logging.getLogger(__name__)


def allowed_sections(config: ExporterConfiguration) -> list[Section]:
    """Get the sections the configuration allows, in output order."""
    sections = [Section.PRIMITIVE, Section.SEMANTIC]
    if config.include_component_tokens:
        sections.append(Section.COMPONENTS)
    return sections


def filter_exportable(tokens: list[Token], config: ExporterConfiguration) -> list[Token]:
    """Drop token types the configuration skips."""
    if not config.skip_typography_tokens:
        return list(tokens)
    kept = [t for t in tokens if t.token_type != TokenType.TYPOGRAPHY]
    if len(kept) != len(tokens):
        logger.info(f"Skipped {len(tokens) - len(kept)} typography tokens")
    return kept


def select_themes(
    all_themes: list[Theme],
    config: ExporterConfiguration,
    context_theme_ids: list[str] | None = None,
) -> list[Theme]:
    """
    Choose which themes to export.

    Exclude mode applies every theme not listed in `excluded_theme_ids`.
    Include mode applies the themes the caller asked for, or all themes
    when the caller asked for none.

    Args:
        all_themes: Every theme in the design system
        config: Exporter configuration
        context_theme_ids: Theme ids selected by the caller

    Returns:
        Themes in design-system order
    """
    if config.exclude_themes_mode:
        excluded = set(config.excluded_theme_ids)
        return [theme for theme in all_themes if theme.id not in excluded]

    if context_theme_ids:
        selected = set(context_theme_ids)
        return [theme for theme in all_themes if theme.id in selected]

    return list(all_themes)


def partition_primitive(tokens: list[Token]) -> list[Token]:
    """
    Get the tokens exported in the unthemed primitive pass.

    Tokens whose first path segment is "primitive" belong here, as do
    tokens whose path names no section at all.
    """
    return [t for t in tokens if top_level_section(t) in (Section.PRIMITIVE, None)]


def tokens_in_section(tokens: list[Token], section: Section) -> list[Token]:
    """Get the tokens whose first path segment names `section`."""
    return [t for t in tokens if top_level_section(t) == section]


def themed_sections(tokens: list[Token], config: ExporterConfiguration) -> list[Section]:
    """Get the allowed non-primitive sections present in the token set."""
    present = {top_level_section(t) for t in tokens}
    return [s for s in allowed_sections(config) if s != Section.PRIMITIVE and s in present]
