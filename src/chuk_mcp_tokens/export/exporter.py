"""
Token exporter - one export invocation from fetch to output files.

    fetch -> filter -> partition -> per-pass build -> merge -> assemble

Each invocation owns its own NameResolver, reset before every output
branch, so nothing leaks between exports.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from chuk_mcp_tokens.constants import (
    COLOR_SCHEME_KEY,
    TYPOGRAPHY_SKIPPED_NOTE,
    ErrorMessages,
    FileStructure,
    Section,
    ThemeExportStyle,
    TokenType,
)
from chuk_mcp_tokens.errors import MissingContextError
from chuk_mcp_tokens.export.assembler import FileAssembler, OutputFile
from chuk_mcp_tokens.export.sections import SectionBuilder
from chuk_mcp_tokens.hierarchy.builder import SectionPolicy, fold_segments
from chuk_mcp_tokens.hierarchy.merge import deep_merge
from chuk_mcp_tokens.models.config import ExporterConfiguration
from chuk_mcp_tokens.models.output import Node, OutputValue
from chuk_mcp_tokens.models.token import (
    ExportContext,
    RemoteVersionIdentifier,
    Theme,
    Token,
    TokenSnapshot,
)
from chuk_mcp_tokens.naming.resolver import NameResolver
from chuk_mcp_tokens.platform.source import TokenSource, fetch_snapshot
from chuk_mcp_tokens.themes.apply import (
    compute_tokens_by_applying_themes,
    filter_themed_tokens,
    theme_identifier,
)
from chuk_mcp_tokens.themes.partition import (
    filter_exportable,
    partition_primitive,
    select_themes,
    themed_sections,
    tokens_in_section,
)

logger = logging.getLogger(__name__)


class TokenExporter:
    """
    Exports a design system's tokens as JSON files.

    The exporter:
    - Fetches tokens, groups, collections and themes once
    - Builds the primitive branch unthemed
    - Builds every other allowed section once per selected theme
    - Packages the result as one file or one file per token type
    """

    def __init__(
        self,
        source: TokenSource,
        config: ExporterConfiguration | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the exporter.

        Args:
            source: Where token data comes from
            config: Exporter configuration (defaults when omitted)
            clock: Timestamp source for `_lastUpdated`
        """
        self.source = source
        self.config = config or ExporterConfiguration()
        self.assembler = FileAssembler(self.config, clock)

    async def export(self, context: ExportContext) -> list[OutputFile]:
        """
        Run one export.

        Args:
            context: Design system, version and selected themes

        Returns:
            Output file descriptors

        Raises:
            MissingContextError: If the design system or version id is absent
            RemoteFetchError: If the source fails
        """
        version = self.version_for(context)
        snapshot = await fetch_snapshot(self.source, version)
        return self.build_files(snapshot, context.theme_ids)

    def version_for(self, context: ExportContext) -> RemoteVersionIdentifier:
        """Validate the context before any fetch happens."""
        if not context.design_system_id:
            raise MissingContextError(ErrorMessages.MISSING_DESIGN_SYSTEM)
        if not context.version_id:
            raise MissingContextError(ErrorMessages.MISSING_VERSION)
        return RemoteVersionIdentifier(
            design_system_id=context.design_system_id,
            version_id=context.version_id,
        )

    def build_files(
        self,
        snapshot: TokenSnapshot,
        theme_ids: list[str] | None = None,
    ) -> list[OutputFile]:
        """
        Build output files from an already fetched snapshot.

        Args:
            snapshot: Token data
            theme_ids: Themes selected by the caller (include mode)

        Returns:
            Output file descriptors
        """
        note = self._comment_note(snapshot.tokens)
        if self.config.file_structure == FileStructure.SEPARATE_BY_TYPE:
            files = [
                self.assembler.type_file(token_type, body, path, note)
                for token_type, body, path in self.build_type_files(snapshot, theme_ids)
            ]
        else:
            body = self.build_single_file_tree(snapshot, theme_ids)
            if not body and not self.config.generate_empty_files:
                logger.info("No tokens to export")
                return []
            files = [self.assembler.single_file(body, note)]

        logger.info(f"Assembled {len(files)} output file(s)")
        return files

    def build_single_file_tree(
        self,
        snapshot: TokenSnapshot,
        theme_ids: list[str] | None = None,
    ) -> Node:
        """
        Build the combined document body.

        Returns:
            {primitive: ..., semantic: {colorScheme: {<theme>: ...}}, ...}
        """
        resolver = NameResolver()
        sections = SectionBuilder(self.config, resolver, snapshot, SectionPolicy.TOP_LEVEL)
        tokens = filter_exportable(snapshot.tokens, self.config)
        root: OutputValue = Node()

        primitive_tokens = partition_primitive(tokens)
        section_names = themed_sections(tokens, self.config)
        self._claim_names(
            sections,
            [primitive_tokens, *(tokens_in_section(tokens, s) for s in section_names)],
        )

        if primitive_tokens:
            resolver.reset()
            body = sections.build_token_object(primitive_tokens, tokens)
            logger.debug(f"Primitive pass: {len(primitive_tokens)} tokens")
            if body:
                root = deep_merge(root, Node({Section.PRIMITIVE.value: body})) or root

        for theme in select_themes(snapshot.themes, self.config, theme_ids):
            theme_name = theme.name.lower()
            themed_tokens = compute_tokens_by_applying_themes(tokens, tokens, [theme])

            for section in section_names:
                in_section = tokens_in_section(themed_tokens, section)
                if not in_section:
                    continue

                resolver.reset()
                body = sections.build_token_object(in_section, themed_tokens)
                logger.debug(f"{section.value} x {theme_name} pass: {len(in_section)} tokens")
                if body:
                    branch = fold_segments([section.value, COLOR_SCHEME_KEY, theme_name], body)
                    root = deep_merge(root, branch) or root

        return root if isinstance(root, Node) else Node()

    def build_type_files(
        self,
        snapshot: TokenSnapshot,
        theme_ids: list[str] | None = None,
    ) -> list[tuple[TokenType, Node, str]]:
        """
        Build per-type file bodies.

        Returns:
            (token type, body, relative directory) for every file to write
        """
        resolver = NameResolver()
        sections = SectionBuilder(self.config, resolver, snapshot, SectionPolicy.CLASSIFIED)
        tokens = filter_exportable(snapshot.tokens, self.config)
        themes = select_themes(snapshot.themes, self.config, theme_ids)
        types = self._types_to_export(tokens)
        base_path = self.config.base_style_file_path
        self._claim_names(sections, [_of_type(tokens, token_type) for token_type in types])

        if self.config.export_themes_as == ThemeExportStyle.NESTED_THEMES:
            nested: list[tuple[TokenType, Node, str]] = []
            for token_type in types:
                body = self._nested_type_body(sections, token_type, tokens, themes)
                if body is not None:
                    nested.append((token_type, body, base_path))
            return nested

        files: list[tuple[TokenType, Node, str]] = []
        if self.config.export_base_values:
            for token_type in types:
                resolver.reset()
                body = sections.process_tokens_to_object(_of_type(tokens, token_type), tokens)
                if body is not None:
                    files.append((token_type, body, base_path))

        for theme in themes:
            themed_tokens = compute_tokens_by_applying_themes(tokens, tokens, [theme])
            theme_path = f"./{theme_identifier(theme)}"
            for token_type in types:
                of_type = self._themed_of_type(themed_tokens, token_type, theme)
                if of_type is None:
                    continue
                resolver.reset()
                body = sections.process_tokens_to_object(of_type, themed_tokens, theme)
                if body is not None:
                    files.append((token_type, body, theme_path))

        return files

    def _claim_names(self, sections: SectionBuilder, branches: list[list[Token]]) -> None:
        # Reference paths read the names claimed here
        for branch in branches:
            sections.resolver.reset()
            sections.claim_names(branch)

    def _nested_type_body(
        self,
        sections: SectionBuilder,
        token_type: TokenType,
        tokens: list[Token],
        themes: list[Theme],
    ) -> Node | None:
        body: OutputValue | None = None
        if self.config.export_base_values:
            sections.resolver.reset()
            body = sections.process_tokens_to_object(_of_type(tokens, token_type), tokens)

        for theme in themes:
            themed_tokens = compute_tokens_by_applying_themes(tokens, tokens, [theme])
            of_type = self._themed_of_type(themed_tokens, token_type, theme)
            if of_type is None:
                continue
            sections.resolver.reset()
            body = deep_merge(body, sections.process_tokens_to_object(of_type, themed_tokens, theme))

        return body if isinstance(body, Node) else None

    def _themed_of_type(
        self,
        themed_tokens: list[Token],
        token_type: TokenType,
        theme: Theme,
    ) -> list[Token] | None:
        of_type = _of_type(themed_tokens, token_type)
        if self.config.export_only_themed_tokens:
            of_type = filter_themed_tokens(of_type, theme)
            if not of_type:
                return None
        return of_type

    def _types_to_export(self, tokens: list[Token]) -> list[TokenType]:
        if self.config.generate_empty_files:
            return list(TokenType)
        present = {token.token_type for token in tokens}
        return [token_type for token_type in TokenType if token_type in present]

    def _comment_note(self, tokens: list[Token]) -> str | None:
        if self.config.skip_typography_tokens and any(
            token.token_type == TokenType.TYPOGRAPHY for token in tokens
        ):
            return TYPOGRAPHY_SKIPPED_NOTE
        return None


def _of_type(tokens: list[Token], token_type: TokenType) -> list[Token]:
    return [token for token in tokens if token.token_type == token_type]
