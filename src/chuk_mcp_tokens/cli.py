#!/usr/bin/env python3
"""
Command-line exporter.

Exports tokens from a snapshot file or the remote platform API into an
output directory:

    chuk-mcp-tokens-export --snapshot tokens.yaml --output ./out
    chuk-mcp-tokens-export --design-system-id ds --version-id v1 --theme dark
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from chuk_mcp_tokens.config import load_configuration
from chuk_mcp_tokens.constants import FileStructure
from chuk_mcp_tokens.errors import TokenExportError, describe_error
from chuk_mcp_tokens.export import TokenExporter
from chuk_mcp_tokens.models.token import ExportContext
from chuk_mcp_tokens.platform import (
    RemoteTokenClient,
    SnapshotSource,
    TokenSource,
    write_output_files,
)

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION_ID = "local"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Export design tokens as JSON")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--snapshot", type=Path, help="YAML/JSON token snapshot file")
    source.add_argument("--design-system-id", help="Design system id on the platform")

    parser.add_argument("--version-id", help="Design system version id (remote export)")
    parser.add_argument("--api-token", help="Platform API token (default: SUPERNOVA_API_TOKEN)")
    parser.add_argument("--api-url", help="Platform API root (default: SUPERNOVA_API_URL)")
    parser.add_argument("--config", type=Path, help="Exporter configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output"),
        help="Output directory (default: ./output)",
    )
    parser.add_argument(
        "--theme",
        action="append",
        dest="themes",
        default=[],
        help="Theme id to export (repeatable; all themes when omitted)",
    )
    parser.add_argument(
        "--file-structure",
        choices=[s.value for s in FileStructure],
        help="Override the configured file structure",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


async def run(args: argparse.Namespace) -> list[Path]:
    """
    Run one export from parsed arguments.

    Returns:
        Paths written
    """
    config = load_configuration(args.config, file_structure=args.file_structure)

    source: TokenSource
    if args.snapshot is not None:
        source = SnapshotSource(args.snapshot)
        context = ExportContext(
            design_system_id=args.snapshot.stem,
            version_id=SNAPSHOT_VERSION_ID,
            theme_ids=args.themes,
        )
    else:
        source = RemoteTokenClient(api_token=args.api_token, base_url=args.api_url)
        context = ExportContext(
            design_system_id=args.design_system_id,
            version_id=args.version_id,
            theme_ids=args.themes,
        )

    files = await TokenExporter(source, config).export(context)
    return await write_output_files(files, args.output)


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        written = asyncio.run(run(args))
    except TokenExportError as e:
        logger.debug("Export failed", exc_info=True)
        print(describe_error(e), file=sys.stderr)
        sys.exit(1)

    print(f"Exported {len(written)} file(s) to {args.output}")


if __name__ == "__main__":
    main()
