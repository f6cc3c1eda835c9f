"""
Output writer - puts exported files on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_tokens.export.assembler import OutputFile

logger = logging.getLogger(__name__)


async def write_output_files(files: list[OutputFile], output_dir: Path) -> list[Path]:
    """
    Write output files under a directory, one after another.

    Args:
        files: Files produced by an export
        output_dir: Root directory; relative paths are resolved against it

    Returns:
        Paths written, in order
    """
    written: list[Path] = []
    for output in files:
        target = output_dir / output.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(output.content, encoding="utf-8")
        written.append(target)
        logger.info(f"Wrote {target}")
    return written
