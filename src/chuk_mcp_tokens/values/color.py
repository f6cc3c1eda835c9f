"""
Color parsing and formatting.

Accepts hex strings (#RGB, #RGBA, #RRGGBB, #RRGGBBAA), rgb()/rgba()
strings, and mappings with r/g/b (0-255) and optional a (0-1).
"""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tokens.constants import ColorFormat
from chuk_mcp_tokens.values.numbers import format_number

_RGB_FUNCTION = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)


@dataclass(frozen=True)
class RGBA:
    """An sRGB color with 8-bit channels and a 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {channel} must be 0-255, got {value}")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.a}")

    @property
    def is_opaque(self) -> bool:
        return self.a >= 1.0


def parse_color(value: Any) -> RGBA:
    """
    Parse a color value.

    Args:
        value: Hex string, rgb()/rgba() string, or r/g/b/a mapping

    Returns:
        Parsed color

    Raises:
        ValueError: If the value is not a recognizable color
    """
    if isinstance(value, RGBA):
        return value
    if isinstance(value, dict):
        try:
            return RGBA(
                r=int(value.get("r", 0)),
                g=int(value.get("g", 0)),
                b=int(value.get("b", 0)),
                a=float(value.get("a", 1.0)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid color channels: {value!r}") from e
    if not isinstance(value, str):
        raise ValueError(f"Unsupported color value: {value!r}")

    text = value.strip()
    if text.startswith("#"):
        return _parse_hex(text[1:])

    match = _RGB_FUNCTION.match(text)
    if match:
        parts = [p.strip() for p in match.group(1).split(",")]
        if len(parts) not in (3, 4):
            raise ValueError(f"Invalid rgb color: {value}")
        alpha = float(parts[3]) if len(parts) == 4 else 1.0
        return RGBA(int(parts[0]), int(parts[1]), int(parts[2]), alpha)

    raise ValueError(f"Unsupported color value: {value!r}")


def _parse_hex(digits: str) -> RGBA:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        raise ValueError(f"Invalid hex color: #{digits}")
    try:
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    except ValueError as e:
        raise ValueError(f"Invalid hex color: #{digits}") from e
    alpha = channels[3] / 255 if len(channels) == 4 else 1.0
    return RGBA(channels[0], channels[1], channels[2], alpha)


def format_color(color: RGBA, color_format: ColorFormat, decimals: int = 3) -> str:
    """
    Format a color in the requested output format.

    Args:
        color: Parsed color
        color_format: Output format
        decimals: Precision for alpha and HSL components

    Returns:
        Formatted color string
    """
    alpha = format_number(color.a, decimals)

    if color_format in (ColorFormat.HASH_HEX, ColorFormat.SMART_HASH_HEX):
        hex_value = f"#{color.r:02X}{color.g:02X}{color.b:02X}"
        if color_format == ColorFormat.HASH_HEX or not color.is_opaque:
            hex_value += f"{round(color.a * 255):02X}"
        return hex_value

    if color_format == ColorFormat.RGBA or (
        color_format == ColorFormat.SMART_RGBA and not color.is_opaque
    ):
        return f"rgba({color.r}, {color.g}, {color.b}, {alpha})"
    if color_format in (ColorFormat.RGB, ColorFormat.SMART_RGBA):
        return f"rgb({color.r}, {color.g}, {color.b})"

    hue, lightness, saturation = colorsys.rgb_to_hls(color.r / 255, color.g / 255, color.b / 255)
    h = format_number(hue * 360, decimals)
    s = format_number(saturation * 100, decimals)
    light = format_number(lightness * 100, decimals)
    if color_format == ColorFormat.HSLA or (
        color_format == ColorFormat.SMART_HSLA and not color.is_opaque
    ):
        return f"hsla({h}, {s}%, {light}%, {alpha})"
    return f"hsl({h}, {s}%, {light}%)"
