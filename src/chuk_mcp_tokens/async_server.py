#!/usr/bin/env python3
"""
Async Tokens MCP Server using chuk-mcp-server

This server provides MCP tools for exporting design tokens as JSON.
Token snapshots are read from the project's snapshots directory and
exported with the project's exporter configuration.

The server provides tools for:
- Listing token snapshots and their themes
- Previewing export output without touching disk
- Exporting snapshots to JSON files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.config import load_configuration
from chuk_mcp_tokens.constants import CONFIG_PATH_ENV, OUTPUT_DIR_ENV, SNAPSHOTS_DIR_ENV
from chuk_mcp_tokens.tools import register_export_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Paths - standard project structure unless the entry point moved them
BASE_PATH = Path.cwd()
SNAPSHOTS_DIR = Path(os.environ.get(SNAPSHOTS_DIR_ENV, BASE_PATH / "snapshots"))
OUTPUT_DIR = Path(os.environ.get(OUTPUT_DIR_ENV, BASE_PATH / "output"))
CONFIG_PATH = Path(os.environ.get(CONFIG_PATH_ENV, BASE_PATH / "exporter.yaml"))

# Configuration file is optional; defaults apply without one
config = load_configuration(CONFIG_PATH if CONFIG_PATH.exists() else None)

# Register all tools
export_tools = register_export_tools(mcp, SNAPSHOTS_DIR, OUTPUT_DIR, config)

# Export tool functions for direct access
tokens_list_snapshots = export_tools["tokens_list_snapshots"]
tokens_list_themes = export_tools["tokens_list_themes"]
tokens_preview = export_tools["tokens_preview"]
tokens_export = export_tools["tokens_export"]

logger.info("CHUK Tokens MCP Server initialized")
logger.info(f"  Snapshots dir: {SNAPSHOTS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
logger.info(f"  File structure: {config.file_structure.value}")
