"""
Pydantic models for the token exporter.

This module provides:
- Token, TokenGroup, Collection, Theme: platform snapshot data
- ExporterConfiguration: exporter options
- Leaf, Themed, Node: the output mapping variants
"""

from chuk_mcp_tokens.models.config import ExporterConfiguration
from chuk_mcp_tokens.models.output import Leaf, Node, OutputValue, Themed
from chuk_mcp_tokens.models.token import (
    Collection,
    ExportContext,
    RemoteVersionIdentifier,
    Theme,
    Token,
    TokenGroup,
    TokenOverride,
    TokenSnapshot,
    VariableModeInfo,
)

__all__ = [
    "Collection",
    "ExportContext",
    "ExporterConfiguration",
    "Leaf",
    "Node",
    "OutputValue",
    "RemoteVersionIdentifier",
    "Theme",
    "Themed",
    "Token",
    "TokenGroup",
    "TokenOverride",
    "TokenSnapshot",
    "VariableModeInfo",
]
