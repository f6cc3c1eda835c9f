#!/usr/bin/env python3
"""
Entry point for the CHUK Tokens MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http). Snapshot, output
and configuration locations default to the working directory and can
be moved with command-line flags.
"""

import argparse
import asyncio
import logging
import os
from collections.abc import MutableMapping
from pathlib import Path

from chuk_mcp_tokens.constants import CONFIG_PATH_ENV, OUTPUT_DIR_ENV, SNAPSHOTS_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the server argument parser."""
    parser = argparse.ArgumentParser(description="CHUK Tokens MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--snapshots-dir",
        type=Path,
        help="Directory of token snapshots (default: ./snapshots)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory exports are written under (default: ./output)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Exporter configuration file (default: ./exporter.yaml if present)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def export_paths(args: argparse.Namespace, environ: MutableMapping[str, str]) -> None:
    """Publish the chosen server paths for async_server to pick up."""
    for value, name in (
        (args.snapshots_dir, SNAPSHOTS_DIR_ENV),
        (args.output_dir, OUTPUT_DIR_ENV),
        (args.config, CONFIG_PATH_ENV),
    ):
        if value is not None:
            environ[name] = str(value.resolve())


def main() -> None:
    """Main entry point with transport detection."""
    parser = build_parser()
    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.config is not None and not args.config.is_file():
        parser.error(f"configuration file not found: {args.config}")

    export_paths(args, os.environ)

    # async_server reads its paths from the environment when imported
    from chuk_mcp_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
