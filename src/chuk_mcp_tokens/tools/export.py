"""
Export tools - MCP tools for exporting token snapshots.

Tools for listing snapshots and themes, previewing export output, and
writing exported files to disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.errors import TokenExportError, describe_error
from chuk_mcp_tokens.export import TokenExporter
from chuk_mcp_tokens.models.config import ExporterConfiguration
from chuk_mcp_tokens.models.token import ExportContext
from chuk_mcp_tokens.platform import SnapshotSource, write_output_files

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

SNAPSHOT_SUFFIXES = (".yaml", ".yml", ".json")

# Snapshots hold a single version; this id stands in for it
LOCAL_VERSION_ID = "local"


def register_export_tools(
    mcp: ChukMCPServer,
    snapshots_dir: Path,
    output_dir: Path,
    config: ExporterConfiguration,
) -> dict[str, Any]:
    """
    Register token export tools with the MCP server.

    Args:
        mcp: The MCP server instance
        snapshots_dir: Directory holding snapshot files
        output_dir: Directory for exported files
        config: Exporter configuration

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def snapshot_path(snapshot: str) -> Path:
        candidate = Path(snapshot)
        if candidate.suffix in SNAPSHOT_SUFFIXES:
            return candidate if candidate.is_absolute() else snapshots_dir / candidate
        for suffix in SNAPSHOT_SUFFIXES:
            path = snapshots_dir / f"{snapshot}{suffix}"
            if path.exists():
                return path
        return snapshots_dir / f"{snapshot}.yaml"

    async def run_export(snapshot: str, theme_ids: list[str] | None) -> list[Any]:
        source = SnapshotSource(snapshot_path(snapshot))
        exporter = TokenExporter(source, config)
        context = ExportContext(
            design_system_id=Path(snapshot).stem,
            version_id=LOCAL_VERSION_ID,
            theme_ids=theme_ids or [],
        )
        return await exporter.export(context)

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_snapshots() -> str:
        """
        List available token snapshots.

        Returns:
            JSON string with snapshot names

        Example:
            tokens_list_snapshots()
        """
        try:
            names = sorted(
                path.stem
                for path in (snapshots_dir.iterdir() if snapshots_dir.exists() else [])
                if path.suffix in SNAPSHOT_SUFFIXES
            )
            return json.dumps({"status": "success", "snapshots": names, "count": len(names)})
        except Exception as e:
            logger.exception("Failed to list snapshots")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_snapshots"] = tokens_list_snapshots

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_themes(snapshot: str) -> str:
        """
        List the themes defined in a snapshot.

        Args:
            snapshot: Snapshot name or file path

        Returns:
            JSON string with theme ids, names and override counts

        Example:
            tokens_list_themes(snapshot="acme")
        """
        try:
            themes = SnapshotSource(snapshot_path(snapshot)).snapshot.themes
            return json.dumps(
                {
                    "status": "success",
                    "themes": [
                        {"id": t.id, "name": t.name, "overrides": len(t.overrides)}
                        for t in themes
                    ],
                    "count": len(themes),
                }
            )
        except TokenExportError as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_themes"] = tokens_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_preview(snapshot: str, theme_ids: list[str] | None = None) -> str:
        """
        Export a snapshot without writing files.

        Args:
            snapshot: Snapshot name or file path
            theme_ids: Optional theme ids to export (all themes when omitted)

        Returns:
            JSON string with each file's path and content

        Example:
            tokens_preview(snapshot="acme", theme_ids=["dark"])
        """
        try:
            files = await run_export(snapshot, theme_ids)
            return json.dumps(
                {
                    "status": "success",
                    "files": [{"path": f.path, "content": f.content} for f in files],
                    "count": len(files),
                }
            )
        except TokenExportError as e:
            logger.exception("Failed to preview export")
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to preview export")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_preview"] = tokens_preview

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_export(
        snapshot: str,
        theme_ids: list[str] | None = None,
        output_name: str | None = None,
    ) -> str:
        """
        Export a snapshot to JSON files.

        Args:
            snapshot: Snapshot name or file path
            theme_ids: Optional theme ids to export (all themes when omitted)
            output_name: Optional subdirectory of the output directory

        Returns:
            JSON string with the written file paths

        Example:
            tokens_export(snapshot="acme")
        """
        try:
            files = await run_export(snapshot, theme_ids)
            target = output_dir / (output_name or Path(snapshot).stem)
            written = await write_output_files(files, target)
            return json.dumps(
                {
                    "status": "success",
                    "paths": [str(path) for path in written],
                    "count": len(written),
                    "message": f"Exported {len(written)} file(s) to {target}",
                }
            )
        except TokenExportError as e:
            logger.exception("Failed to export tokens")
            return json.dumps({"status": "error", "message": describe_error(e)})
        except Exception as e:
            logger.exception("Failed to export tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_export"] = tokens_export

    return tools
