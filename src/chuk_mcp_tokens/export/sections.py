"""
Section builders - fold a list of tokens into one output branch.

Two shapes of pass exist:
- `build_token_object`: single-file passes (primitive, or one
  section x theme), keyed without a section segment
- `process_tokens_to_object`: per-type file passes, keyed with a
  section segment, optionally grouping semantic tokens by color scheme
  and optionally producing nested-theme value objects

Neither method resets the name resolver. Callers reset it once per
output branch.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chuk_mcp_tokens.constants import (
    BASE_VALUE_KEY,
    COLOR_SCHEME_KEY,
    Section,
    StringCase,
    ThemeExportStyle,
    TokenSortOrder,
)
from chuk_mcp_tokens.errors import DanglingReferenceError
from chuk_mcp_tokens.hierarchy.builder import (
    HierarchyBuilder,
    SectionPolicy,
    classify_section,
    fold_segments,
)
from chuk_mcp_tokens.hierarchy.merge import deep_merge
from chuk_mcp_tokens.models.config import ExporterConfiguration
from chuk_mcp_tokens.models.output import Leaf, Node, OutputValue, Themed
from chuk_mcp_tokens.models.token import Theme, Token, TokenSnapshot
from chuk_mcp_tokens.naming.case import code_safe_variable_name
from chuk_mcp_tokens.naming.resolver import NameResolver
from chuk_mcp_tokens.themes.apply import theme_identifier
from chuk_mcp_tokens.values.options import RenderOptions
from chuk_mcp_tokens.values.references import (
    clean_value,
    render_literal_fallback,
    render_value,
    tokens_by_id,
)

logger = logging.getLogger(__name__)


class SectionBuilder:
    """Builds output branches from token lists."""

    def __init__(
        self,
        config: ExporterConfiguration,
        resolver: NameResolver,
        snapshot: TokenSnapshot,
        policy: SectionPolicy = SectionPolicy.TOP_LEVEL,
    ):
        """
        Initialize the section builder.

        Args:
            config: Exporter configuration
            resolver: Name resolver shared with the caller
            snapshot: Snapshot supplying groups and collections
            policy: Section policy for the hierarchy builder
        """
        self.config = config
        self.resolver = resolver
        self.hierarchy = HierarchyBuilder(
            resolver,
            config,
            collections=snapshot.collections,
            groups=snapshot.groups,
            policy=policy,
        )
        self.options = RenderOptions.from_config(config, name_of=self.hierarchy.reference_path)

    def sort_tokens(self, tokens: list[Token]) -> list[Token]:
        """Order tokens per the configured sort order."""
        if self.config.token_sort_order != TokenSortOrder.ALPHABETICAL:
            return list(tokens)
        style = self.config.token_name_style
        return sorted(tokens, key=lambda t: code_safe_variable_name(t.name, style).lower())

    def render(self, token: Token, all_tokens: Mapping[str, Token]) -> str | None:
        """
        Render one token's value, isolating per-token failures.

        A dangling reference falls back to the token's literal value;
        a token with nothing renderable, or a malformed value, is skipped.

        Returns:
            Cleaned value text, or None to skip the token
        """
        try:
            return clean_value(render_value(token, all_tokens, self.options))
        except DanglingReferenceError as e:
            fallback = render_literal_fallback(token, all_tokens, self.options)
            if fallback is None:
                logger.warning(f"{e} Skipping token.")
                return None
            logger.warning(f"{e} Using literal value.")
            return clean_value(fallback)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Skipping token '{token.id}' ({token.name}): {e}")
            return None

    def locate(self, token: Token, theme: Theme | None = None) -> list[str]:
        """
        Get every key down to a token's value and claim its name.

        Names are claimed before values are rendered; a token skipped
        for a bad value still holds its slot.
        """
        if (
            self.hierarchy.policy == SectionPolicy.CLASSIFIED
            and self.config.group_semantic_by_color_scheme_and_theme
            and classify_section(token) == Section.SEMANTIC
        ):
            return self._color_scheme_segments(token, theme)
        return self.hierarchy.locate(token)

    def claim_names(self, tokens: list[Token]) -> None:
        """Name a branch's tokens without rendering them."""
        for token in self.sort_tokens(tokens):
            self.locate(token)

    def value_for(self, text: str, token: Token, theme: Theme | None = None) -> OutputValue:
        """Wrap rendered text in the configured value shape."""
        if self.config.export_themes_as != ThemeExportStyle.NESTED_THEMES:
            return Leaf(text)

        key = theme_identifier(theme, StringCase.KEBAB) if theme else BASE_VALUE_KEY
        description = None
        if self.config.show_descriptions and token.description:
            description = token.description.strip()
        return Themed(values={key: text}, description=description)

    def build_token_object(self, tokens: list[Token], all_tokens: list[Token]) -> Node:
        """
        Build a single-file branch.

        Args:
            tokens: Tokens in this branch
            all_tokens: Reference dictionary for this branch (themed or not)

        Returns:
            Nested mapping of the branch's tokens
        """
        index = tokens_by_id(all_tokens)
        result: OutputValue = Node()

        for token in self.sort_tokens(tokens):
            segments = self.locate(token)
            text = self.render(token, index)
            if text is None:
                continue
            result = deep_merge(result, fold_segments(segments, Leaf(text))) or result

        return result if isinstance(result, Node) else Node()

    def process_tokens_to_object(
        self,
        tokens: list[Token],
        all_tokens: list[Token],
        theme: Theme | None = None,
    ) -> Node | None:
        """
        Build the body of a per-type file.

        Args:
            tokens: Tokens of one type
            all_tokens: Reference dictionary
            theme: Theme being exported, None for base values

        Returns:
            Nested mapping, or None when there is nothing to emit
        """
        if not tokens and not self.config.generate_empty_files:
            return None

        index = tokens_by_id(all_tokens)
        result: OutputValue = Node()

        for token in self.sort_tokens(tokens):
            segments = self.locate(token, theme)
            text = self.render(token, index)
            if text is None:
                continue
            value = self.value_for(text, token, theme)
            result = deep_merge(result, fold_segments(segments, value)) or result

        return result if isinstance(result, Node) else Node()

    def _color_scheme_segments(self, token: Token, theme: Theme | None) -> list[str]:
        if theme is not None:
            scheme = theme.name.lower()
        elif token.variable_mode_info and token.variable_mode_info.mode_name:
            scheme = token.variable_mode_info.mode_name.lower()
        else:
            scheme = BASE_VALUE_KEY

        # Drop the leading section key; it is re-added above the scheme
        leading = self.hierarchy.leading_segments(token)[1:]
        name = self.hierarchy.resolve_name(token, [scheme, *leading])
        return [Section.SEMANTIC.value, COLOR_SCHEME_KEY, scheme, *leading, name]
