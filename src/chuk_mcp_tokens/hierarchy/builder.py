"""
Hierarchy builder - places a token's value at its location in the output.

A token's location is a list of keys:

    [section] [type prefix] [collection] [path segments...] [name]

The section key is only emitted by the classified policy used for
per-type files. In single-file passes the first path segment names the
section and the caller nests the whole pass under it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from chuk_mcp_tokens.constants import Section, TokenNameStructure
from chuk_mcp_tokens.models.config import ExporterConfiguration
from chuk_mcp_tokens.models.output import Leaf, Node, OutputValue
from chuk_mcp_tokens.models.token import Collection, Token, TokenGroup
from chuk_mcp_tokens.naming.case import code_safe_variable_name
from chuk_mcp_tokens.naming.resolver import NameResolver


class SectionPolicy(str, Enum):
    """Where a token's section comes from."""

    TOP_LEVEL = "topLevel"  # First path segment; stripped from the location
    CLASSIFIED = "classified"  # Derived from collection/path; emitted as first key


def classify_section(token: Token) -> Section:
    """
    Classify a token by its own data.

    Components if it belongs to a collection, semantic if it has a path,
    primitive otherwise.
    """
    if token.collection_id:
        return Section.COMPONENTS
    if any(segment.strip() for segment in token.token_path):
        return Section.SEMANTIC
    return Section.PRIMITIVE


def top_level_section(token: Token) -> Section | None:
    """Get the section named by a token's first path segment, if any."""
    if not token.token_path:
        return None
    first = token.token_path[0].strip().lower()
    return next((s for s in Section if s.value == first), None)


def fold_segments(segments: Sequence[str], value: OutputValue) -> OutputValue:
    """
    Wrap a value in one Node per segment, innermost last.

    ["a", "b", "c"] and v give {a: {b: {c: v}}}.
    """
    result = value
    for segment in reversed(segments):
        result = Node({segment: result})
    return result


class HierarchyBuilder:
    """
    Builds single-path Nodes for tokens.

    The builder shares a NameResolver with its caller; the caller resets
    the resolver between output branches.
    """

    def __init__(
        self,
        resolver: NameResolver,
        config: ExporterConfiguration,
        collections: Iterable[Collection] = (),
        groups: Iterable[TokenGroup] = (),
        policy: SectionPolicy = SectionPolicy.TOP_LEVEL,
    ):
        """
        Initialize the builder.

        Args:
            resolver: Name resolver for leaf names
            config: Exporter configuration (naming options)
            collections: All collections, for collection segments
            groups: All token groups, for widening colliding names
            policy: Section policy
        """
        self.resolver = resolver
        self.config = config
        self.policy = policy
        self._collections = {c.id: c for c in collections}
        self._groups = {g.id: g for g in groups}
        # First name issued to each token; survives resolver resets
        self.reference_names: dict[str, str] = {}

    def normalize(self, segment: str) -> str:
        """Case-style a single path segment."""
        return code_safe_variable_name(segment, self.config.token_name_style)

    def section_for(self, token: Token) -> Section:
        """Get the section a token is emitted under."""
        if self.policy == SectionPolicy.CLASSIFIED:
            return classify_section(token)
        return top_level_section(token) or Section.PRIMITIVE

    def path_for(self, token: Token) -> list[str]:
        """Get the raw path segments used for a token's location."""
        path = list(token.token_path)
        if self.policy == SectionPolicy.TOP_LEVEL and top_level_section(token) is not None:
            path = path[1:]
        return path

    def leading_segments(self, token: Token, path: Sequence[str] | None = None) -> list[str]:
        """
        Get every key above the token's name.

        Args:
            token: The token
            path: Raw path segments to use instead of the token's own

        Returns:
            Normalized keys, empty segments dropped
        """
        segments: list[str] = []
        if self.policy == SectionPolicy.CLASSIFIED:
            segments.append(classify_section(token).value)

            # Type prefixes belong to per-type files only
            prefix = self.config.token_prefix(token.token_type)
            if prefix:
                segments.append(self.normalize(prefix))

        structure = self.config.token_name_structure
        if structure == TokenNameStructure.COLLECTION_PATH_AND_NAME and token.collection_id:
            collection = self._collections.get(token.collection_id)
            if collection is not None:
                segments.append(self.normalize(collection.name))

        if structure != TokenNameStructure.NAME_ONLY:
            raw = self.path_for(token) if path is None else path
            segments.extend(self.normalize(s) for s in raw if s and s.strip())

        return [s for s in segments if s]

    def resolve_name(self, token: Token, leading: Sequence[str]) -> str:
        """Resolve and record the token's unique name under `leading`."""
        name = self.resolver.resolve_name(
            token,
            self.config.token_name_style,
            leading,
            self._groups.get(token.parent_group_id or ""),
        )
        self.reference_names.setdefault(token.id, name)
        return name

    def locate(self, token: Token, path: Sequence[str] | None = None) -> list[str]:
        """Get every key down to the token's value, claiming its name."""
        leading = self.leading_segments(token, path)
        return [*leading, self.resolve_name(token, leading)]

    def build_node(
        self,
        token: Token,
        value: OutputValue | str,
        path: Sequence[str] | None = None,
    ) -> OutputValue:
        """
        Build the nested mapping holding one token's value.

        Args:
            token: The token
            value: Rendered value (a plain string becomes a Leaf)
            path: Raw path segments to use instead of the token's own

        Returns:
            A Node nested once per key, with the value at the bottom
        """
        if isinstance(value, str):
            value = Leaf(value)
        return fold_segments(self.locate(token, path), value)

    def reference_path(self, token: Token) -> str:
        """
        Get the reference text for a token, e.g. "{primitive.uiTeal.50}".

        Targets already placed in an earlier branch keep the name they
        were given there. Mentioning a token never claims its name in
        the resolver.
        """
        segments: list[str] = []
        if self.config.global_name_prefix:
            segments.append(self.normalize(self.config.global_name_prefix))
        if self.policy == SectionPolicy.TOP_LEVEL:
            segments.append(self.section_for(token).value)
        segments.extend(self.leading_segments(token))
        name = self.reference_names.get(token.id)
        segments.append(name or self.resolver.peek_name(token, self.config.token_name_style))
        return "{" + ".".join(segments) + "}"
