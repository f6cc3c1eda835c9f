"""
Hierarchy - turning flat tokens into nested output mappings.
"""

from chuk_mcp_tokens.hierarchy.builder import (
    HierarchyBuilder,
    SectionPolicy,
    classify_section,
    fold_segments,
    top_level_section,
)
from chuk_mcp_tokens.hierarchy.merge import deep_merge, merge_all

__all__ = [
    "HierarchyBuilder",
    "SectionPolicy",
    "classify_section",
    "deep_merge",
    "fold_segments",
    "merge_all",
    "top_level_section",
]
