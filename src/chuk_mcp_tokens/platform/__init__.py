"""
Platform - token sources and output writing.
"""

from chuk_mcp_tokens.platform.client import RemoteTokenClient
from chuk_mcp_tokens.platform.source import (
    InMemorySource,
    SnapshotSource,
    TokenSource,
    fetch_snapshot,
)
from chuk_mcp_tokens.platform.writer import write_output_files

__all__ = [
    "InMemorySource",
    "RemoteTokenClient",
    "SnapshotSource",
    "TokenSource",
    "fetch_snapshot",
    "write_output_files",
]
