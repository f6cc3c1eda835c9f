"""
Value rendering - colors, dimensions, composites and references.
"""

from chuk_mcp_tokens.values.color import RGBA, format_color, parse_color
from chuk_mcp_tokens.values.css import render_dimension, value_to_css
from chuk_mcp_tokens.values.numbers import format_number
from chuk_mcp_tokens.values.options import NameOf, RenderOptions
from chuk_mcp_tokens.values.references import (
    clean_value,
    render_literal_fallback,
    render_value,
    resolve_literal,
    tokens_by_id,
)

__all__ = [
    "RGBA",
    "NameOf",
    "RenderOptions",
    "clean_value",
    "format_color",
    "format_number",
    "parse_color",
    "render_dimension",
    "render_literal_fallback",
    "render_value",
    "resolve_literal",
    "tokens_by_id",
    "value_to_css",
]
