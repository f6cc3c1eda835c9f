"""
Export - section passes, file assembly and the export pipeline.
"""

from chuk_mcp_tokens.export.assembler import FileAssembler, OutputFile
from chuk_mcp_tokens.export.exporter import TokenExporter
from chuk_mcp_tokens.export.sections import SectionBuilder

__all__ = [
    "FileAssembler",
    "OutputFile",
    "SectionBuilder",
    "TokenExporter",
]
