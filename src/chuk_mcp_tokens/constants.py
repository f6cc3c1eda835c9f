"""
Constants and enums for the token exporter.

No magic strings - use enums for every constrained configuration value.
"""

from enum import Enum


class StringCase(str, Enum):
    """Case styles available for generated keys."""

    CAMEL = "camelCase"
    PASCAL = "pascalCase"
    KEBAB = "kebabCase"
    SNAKE = "snakeCase"
    CONSTANT = "constantCase"


class ColorFormat(str, Enum):
    """Output formats for color values."""

    HASH_HEX = "hashHex"  # Always #RRGGBBAA
    SMART_HASH_HEX = "smartHashHex"  # #RRGGBB unless translucent
    RGB = "rgb"
    RGBA = "rgba"
    SMART_RGBA = "smartRgba"  # rgb() unless translucent
    HSL = "hsl"
    HSLA = "hsla"
    SMART_HSLA = "smartHsla"  # hsl() unless translucent


class TokenType(str, Enum):
    """Semantic token types."""

    COLOR = "color"
    TYPOGRAPHY = "typography"
    DIMENSION = "dimension"
    SIZE = "size"
    SPACE = "space"
    OPACITY = "opacity"
    FONT_SIZE = "fontSize"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    PARAGRAPH_SPACING = "paragraphSpacing"
    BORDER_WIDTH = "borderWidth"
    RADIUS = "radius"
    DURATION = "duration"
    Z_INDEX = "zIndex"
    SHADOW = "shadow"
    BORDER = "border"
    GRADIENT = "gradient"
    BLUR = "blur"
    STRING = "string"
    PRODUCT_COPY = "productCopy"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    TEXT_CASE = "textCase"
    TEXT_DECORATION = "textDecoration"
    VISIBILITY = "visibility"


class Section(str, Enum):
    """Top-level output sections."""

    PRIMITIVE = "primitive"
    SEMANTIC = "semantic"
    COMPONENTS = "components"


class FileStructure(str, Enum):
    """How output is split into files."""

    SINGLE_FILE = "singleFile"
    SEPARATE_BY_TYPE = "separateByType"


class TokenSortOrder(str, Enum):
    """Order tokens are emitted in."""

    DEFAULT = "default"
    ALPHABETICAL = "alphabetical"


class TokenNameStructure(str, Enum):
    """Which parts of a token's location make up its generated name."""

    NAME_ONLY = "nameOnly"
    PATH_AND_NAME = "pathAndName"
    COLLECTION_PATH_AND_NAME = "collectionPathAndName"


class ThemeExportStyle(str, Enum):
    """How themed values are laid out in per-type mode."""

    SEPARATE_FILES = "separateFiles"
    NESTED_THEMES = "nestedThemes"


# Types rendered as measure + unit
DIMENSION_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.DIMENSION,
        TokenType.SIZE,
        TokenType.SPACE,
        TokenType.FONT_SIZE,
        TokenType.LINE_HEIGHT,
        TokenType.LETTER_SPACING,
        TokenType.PARAGRAPH_SPACING,
        TokenType.BORDER_WIDTH,
        TokenType.RADIUS,
        TokenType.DURATION,
        TokenType.BLUR,
    }
)

# Types rendered as quoted CSS strings
STRING_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.STRING, TokenType.PRODUCT_COPY, TokenType.FONT_FAMILY}
)

DEFAULT_TOKEN_PREFIXES: dict[TokenType, str] = {
    TokenType.COLOR: "color",
    TokenType.TYPOGRAPHY: "typography",
    TokenType.DIMENSION: "dimension",
    TokenType.SIZE: "size",
    TokenType.SPACE: "space",
    TokenType.OPACITY: "opacity",
    TokenType.FONT_SIZE: "font-size",
    TokenType.LINE_HEIGHT: "line-height",
    TokenType.LETTER_SPACING: "letter-spacing",
    TokenType.PARAGRAPH_SPACING: "paragraph-spacing",
    TokenType.BORDER_WIDTH: "border-width",
    TokenType.RADIUS: "radius",
    TokenType.DURATION: "duration",
    TokenType.Z_INDEX: "z-index",
    TokenType.SHADOW: "shadow",
    TokenType.BORDER: "border",
    TokenType.GRADIENT: "gradient",
    TokenType.BLUR: "blur",
    TokenType.STRING: "string",
    TokenType.PRODUCT_COPY: "product-copy",
    TokenType.FONT_FAMILY: "font-family",
    TokenType.FONT_WEIGHT: "font-weight",
    TokenType.TEXT_CASE: "text-case",
    TokenType.TEXT_DECORATION: "text-decoration",
    TokenType.VISIBILITY: "visibility",
}

DEFAULT_STYLE_FILE_NAMES: dict[TokenType, str] = {
    token_type: f"{token_type.value}.json" for token_type in TokenType
}

# Reserved keys
DESCRIPTION_KEY = "description"
COMMENT_KEY = "_comment"
LAST_UPDATED_KEY = "_lastUpdated"
COLOR_SCHEME_KEY = "colorScheme"
BASE_VALUE_KEY = "base"

DEFAULT_DISCLAIMER = (
    "This file was generated automatically by chuk-mcp-tokens and should not be changed manually."
)
TYPOGRAPHY_SKIPPED_NOTE = (
    "Note: Typography tokens generated from text styles have been skipped for now."
)

# Server paths, read by async_server at import time
SNAPSHOTS_DIR_ENV = "CHUK_TOKENS_SNAPSHOTS_DIR"
OUTPUT_DIR_ENV = "CHUK_TOKENS_OUTPUT_DIR"
CONFIG_PATH_ENV = "CHUK_TOKENS_CONFIG"


class ErrorMessages:
    """Standardized error messages."""

    MISSING_DESIGN_SYSTEM = "No design system id provided."
    MISSING_VERSION = "No design system version id provided."
    MISSING_API_TOKEN = "No API token provided. Set SUPERNOVA_API_TOKEN or pass --api-token."
    SNAPSHOT_NOT_FOUND = "Snapshot file '{path}' not found."
    CONFIG_NOT_FOUND = "Configuration file '{path}' not found."
    DANGLING_REFERENCE = "Token '{token_id}' references unknown token '{referenced_token_id}'."
    AUTHENTICATION_FAILED = "Platform rejected the credentials (HTTP {status})."
    RESOURCE_NOT_FOUND = "Platform resource not found (HTTP {status}): {url}"
    FETCH_FAILED = "Platform request failed (HTTP {status}): {url}"
