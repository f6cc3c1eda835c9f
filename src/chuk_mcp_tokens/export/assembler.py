"""
File assembler - serializes output mappings into output file descriptors.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import COMMENT_KEY, LAST_UPDATED_KEY, TokenType
from chuk_mcp_tokens.models.config import ExporterConfiguration
from chuk_mcp_tokens.models.output import Leaf, Node, OutputValue, to_json_text


class OutputFile(BaseModel):
    """A file produced by an export."""

    relative_path: str = Field(..., description="Directory relative to the output root")
    file_name: str
    kind: str = Field("text", description="File kind tag")
    content: str = ""

    model_config = {"frozen": True}

    @property
    def path(self) -> str:
        """Relative path including the file name."""
        directory = self.relative_path.strip("/").removeprefix("./").strip("/")
        if directory in ("", "."):
            return self.file_name
        return f"{directory}/{self.file_name}"


def iso_timestamp(moment: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds and a Z suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class FileAssembler:
    """
    Packages output mappings as JSON text files.

    Reserved `_comment` and `_lastUpdated` keys are placed first in each
    document when the configuration asks for them.
    """

    def __init__(
        self,
        config: ExporterConfiguration,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the assembler.

        Args:
            config: Exporter configuration
            clock: Source of the generation timestamp (defaults to now, UTC)
        """
        self.config = config
        self.clock = clock or (lambda: datetime.now(UTC))

    def header(self, note: str | None = None) -> Node:
        """Build the reserved metadata keys."""
        children: dict[str, OutputValue] = {}
        if self.config.show_generated_file_disclaimer:
            comment = self.config.disclaimer
            if note:
                comment = f"{comment}\n\n{note}"
            children[COMMENT_KEY] = Leaf(comment)
        if self.config.show_last_updated:
            children[LAST_UPDATED_KEY] = Leaf(iso_timestamp(self.clock()))
        return Node(children)

    def document(self, body: Node, note: str | None = None) -> Node:
        """Prefix a body with the metadata header."""
        return Node({**self.header(note).children, **body.children})

    def text_file(self, relative_path: str, file_name: str, document: Node) -> OutputFile:
        """Serialize a document into a text file descriptor."""
        return OutputFile(
            relative_path=relative_path,
            file_name=file_name,
            content=to_json_text(document, indent=self.config.indent),
        )

    def single_file(self, body: Node, note: str | None = None) -> OutputFile:
        """Package the combined single-file document."""
        return self.text_file("./", self.config.output_filename, self.document(body, note))

    def type_file(
        self,
        token_type: TokenType,
        body: Node,
        relative_path: str,
        note: str | None = None,
    ) -> OutputFile:
        """Package one per-type document."""
        return self.text_file(
            relative_path,
            self.config.style_file_name(token_type),
            self.document(body, note),
        )
