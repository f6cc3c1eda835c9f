#!/usr/bin/env python3
"""
Example: Exporting a Token Snapshot.

This demonstrates exporting the same snapshot as one combined JSON file
and as one file per token type, with themed values nested together.

Usage:
    python examples/export_snapshot.py
"""

import asyncio
from pathlib import Path

from chuk_mcp_tokens.constants import FileStructure, ThemeExportStyle
from chuk_mcp_tokens.export import TokenExporter
from chuk_mcp_tokens.models import ExportContext, ExporterConfiguration
from chuk_mcp_tokens.platform import SnapshotSource, write_output_files

SNAPSHOT_PATH = Path(__file__).parent / "snapshots" / "acme.yaml"
OUTPUT_DIR = Path(__file__).parent / "output"


async def main() -> None:
    """Export the example snapshot in both file structures."""
    print("CHUK Tokens Export Demo")
    print("=" * 40)
    print()

    source = SnapshotSource(SNAPSHOT_PATH)
    context = ExportContext(design_system_id="acme", version_id="local")

    # Single combined file
    single = TokenExporter(source, ExporterConfiguration())
    files = await single.export(context)
    print("Single file:")
    print(files[0].content)
    print()

    # One file per token type, themes merged into value objects
    config = ExporterConfiguration(
        file_structure=FileStructure.SEPARATE_BY_TYPE,
        export_themes_as=ThemeExportStyle.NESTED_THEMES,
        show_last_updated=False,
    )
    files = await TokenExporter(source, config).export(context)
    written = await write_output_files(files, OUTPUT_DIR)

    print("Per-type files:")
    for path in written:
        print(f"  {path.relative_to(OUTPUT_DIR)}")
    print()
    print(f"Written to {OUTPUT_DIR}")


if __name__ == "__main__":
    asyncio.run(main())
