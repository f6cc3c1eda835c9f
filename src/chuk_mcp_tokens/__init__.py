"""
chuk-mcp-tokens - design token exporter and MCP server.

Exports design tokens, their references and themes as JSON, either as
one combined file or one file per token type.
"""

from chuk_mcp_tokens.config import load_configuration
from chuk_mcp_tokens.errors import (
    ArtifactMissingError,
    ConfigurationError,
    DanglingReferenceError,
    MissingContextError,
    RemoteFetchError,
    TokenExportError,
    describe_error,
)
from chuk_mcp_tokens.export import FileAssembler, OutputFile, TokenExporter
from chuk_mcp_tokens.models import ExporterConfiguration, ExportContext, TokenSnapshot

__version__ = "0.1.0"

__all__ = [
    "ArtifactMissingError",
    "ConfigurationError",
    "DanglingReferenceError",
    "ExportContext",
    "ExporterConfiguration",
    "FileAssembler",
    "MissingContextError",
    "OutputFile",
    "RemoteFetchError",
    "TokenExportError",
    "TokenExporter",
    "TokenSnapshot",
    "describe_error",
    "load_configuration",
]
