"""
MCP tool implementations.

Tools are organized by domain:
- export - Snapshot discovery, export preview and export to disk
"""

from chuk_mcp_tokens.tools.export import register_export_tools

__all__ = [
    "register_export_tools",
]
