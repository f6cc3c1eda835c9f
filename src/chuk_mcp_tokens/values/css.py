"""
CSS value rendering for literal token values.

Each token type has a literal shape:
- color: hex/rgb string or r/g/b/a mapping
- dimension types: {"measure": 16, "unit": "px"}, a number, or "16px"
- shadow: mapping or list of mappings with x/y/radius/spread/color/type
- border: {"width": ..., "style": "solid", "color": ...}
- gradient: {"type": "linear", "angle": 90, "stops": [{"color": ..., "position": 0}]}
- typography: {"fontFamily", "fontWeight", "fontSize", "lineHeight", "fontStyle"}
- string types: plain text, rendered quoted

References are handled one level up, in `values.references`.
"""

from __future__ import annotations

import re
from typing import Any

from chuk_mcp_tokens.constants import DIMENSION_TYPES, STRING_TYPES, TokenType
from chuk_mcp_tokens.values.color import format_color, parse_color
from chuk_mcp_tokens.values.numbers import format_number
from chuk_mcp_tokens.values.options import RenderOptions

UNIT_SUFFIXES: dict[str, str] = {
    "px": "px",
    "pixels": "px",
    "rem": "rem",
    "em": "em",
    "%": "%",
    "percent": "%",
    "percentage": "%",
    "ms": "ms",
    "milliseconds": "ms",
    "s": "s",
    "pt": "pt",
    "points": "pt",
    "raw": "",
}

_PX_STRING = re.compile(r"^(-?\d*\.?\d+)px$")


def value_to_css(token_type: TokenType, value: Any, options: RenderOptions) -> str:
    """
    Render a literal token value as CSS text.

    Args:
        token_type: Type of the token the value belongs to
        value: Literal value
        options: Rendering options

    Returns:
        CSS value text

    Raises:
        ValueError: If the value is missing or malformed for its type
    """
    if value is None:
        raise ValueError(f"No value to render for {token_type.value} token")

    try:
        return _render_literal(token_type, value, options)
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Malformed {token_type.value} value: {value!r}") from e


def _render_literal(token_type: TokenType, value: Any, options: RenderOptions) -> str:
    if token_type == TokenType.COLOR:
        return format_color(parse_color(value), options.color_format, options.decimals)
    if token_type in DIMENSION_TYPES:
        return render_dimension(value, options, allow_rem=token_type != TokenType.DURATION)
    if token_type in STRING_TYPES:
        return f'"{value}"'
    if token_type == TokenType.SHADOW:
        shadows = value if isinstance(value, list) else [value]
        return ", ".join(_render_shadow(_mapping(s, token_type), options) for s in shadows)
    if token_type == TokenType.BORDER:
        return _render_border(_mapping(value, token_type), options)
    if token_type == TokenType.GRADIENT:
        return _render_gradient(_mapping(value, token_type), options)
    if token_type == TokenType.TYPOGRAPHY:
        return _render_typography(_mapping(value, token_type), options)
    if isinstance(value, dict) and "measure" in value:
        return format_number(value["measure"], options.decimals)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(value, options.decimals)
    return str(value)


def render_dimension(value: Any, options: RenderOptions, allow_rem: bool = True) -> str:
    """
    Render a measure with its unit, converting px to rem when forced.

    Args:
        value: Measure mapping, bare number, or string like "8px"
        options: Rendering options
        allow_rem: Whether px values may be converted to rem

    Returns:
        Dimension text such as "16px" or "1rem"
    """
    if isinstance(value, dict):
        measure = value.get("measure", 0)
        unit = UNIT_SUFFIXES.get(str(value.get("unit", "px")).lower(), str(value.get("unit")))
    elif isinstance(value, int | float):
        measure, unit = value, ""
    else:
        match = _PX_STRING.match(str(value).strip())
        if not match:
            return str(value).strip()
        measure, unit = float(match.group(1)), "px"

    if unit == "px" and allow_rem and options.force_rem_unit:
        return f"{format_number(float(measure) / options.rem_base, options.decimals)}rem"
    return f"{format_number(measure, options.decimals)}{unit}"


def _mapping(value: Any, token_type: TokenType) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Expected a mapping for {token_type.value} value, got {value!r}")
    return value


def _length(value: Any, options: RenderOptions) -> str:
    # Bare numbers inside composite values are pixels
    if isinstance(value, int | float):
        return render_dimension({"measure": value, "unit": "px"}, options)
    return render_dimension(value, options)


def _color(value: Any, options: RenderOptions) -> str:
    return format_color(parse_color(value), options.color_format, options.decimals)


def _render_shadow(shadow: dict[str, Any], options: RenderOptions) -> str:
    parts = [
        _length(shadow.get("x", 0), options),
        _length(shadow.get("y", 0), options),
        _length(shadow.get("radius", 0), options),
        _length(shadow.get("spread", 0), options),
        _color(shadow.get("color", "#000000"), options),
    ]
    if str(shadow.get("type", "drop")).lower() == "inner":
        parts.insert(0, "inset")
    return " ".join(parts)


def _render_border(border: dict[str, Any], options: RenderOptions) -> str:
    return " ".join(
        [
            _length(border.get("width", 1), options),
            str(border.get("style", "solid")).lower(),
            _color(border.get("color", "#000000"), options),
        ]
    )


def _render_gradient(gradient: dict[str, Any], options: RenderOptions) -> str:
    stops = ", ".join(
        f"{_color(stop.get('color'), options)} "
        f"{format_number(float(stop.get('position', 0)) * 100, options.decimals)}%"
        for stop in gradient.get("stops", [])
    )
    if str(gradient.get("type", "linear")).lower() == "radial":
        return f"radial-gradient(circle, {stops})"
    angle = format_number(gradient.get("angle", 180), options.decimals)
    return f"linear-gradient({angle}deg, {stops})"


def _render_typography(typography: dict[str, Any], options: RenderOptions) -> str:
    parts: list[str] = []
    if typography.get("fontStyle") and str(typography["fontStyle"]).lower() != "normal":
        parts.append(str(typography["fontStyle"]).lower())
    if typography.get("fontWeight") is not None:
        parts.append(str(typography["fontWeight"]))

    size = typography.get("fontSize")
    if size is not None:
        size_text = _length(size, options)
        line_height = typography.get("lineHeight")
        if line_height is not None:
            size_text += f"/{render_dimension(line_height, options)}"
        parts.append(size_text)

    if typography.get("fontFamily"):
        parts.append(f'"{typography["fontFamily"]}"')
    return " ".join(parts)
