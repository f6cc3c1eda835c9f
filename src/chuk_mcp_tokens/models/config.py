"""
Exporter configuration.

Keys may be given in camelCase (the platform's exporter config format)
or snake_case. The model is frozen; build a new one to change options.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from chuk_mcp_tokens.constants import (
    DEFAULT_DISCLAIMER,
    DEFAULT_STYLE_FILE_NAMES,
    DEFAULT_TOKEN_PREFIXES,
    ColorFormat,
    FileStructure,
    StringCase,
    ThemeExportStyle,
    TokenNameStructure,
    TokenSortOrder,
    TokenType,
)


class ExporterConfiguration(BaseModel):
    """All options recognised by the exporter."""

    # Values
    show_descriptions: bool = Field(True, description="Attach descriptions to value objects")
    use_references: bool = Field(True, description="Render references instead of literals")
    color_format: ColorFormat = ColorFormat.SMART_HASH_HEX
    color_precision: int = Field(3, ge=0, le=10, description="Decimal places for numbers")
    force_rem_unit: bool = False
    rem_base: float = Field(16, gt=0)

    # Naming
    token_name_style: StringCase = StringCase.CAMEL
    token_name_structure: TokenNameStructure = TokenNameStructure.PATH_AND_NAME
    global_name_prefix: str = ""
    use_token_type_prefixes: bool = False
    customize_token_prefixes: bool = False
    token_prefixes: dict[TokenType, str] = Field(default_factory=dict)

    # Files
    indent: int = Field(2, ge=0, le=8)
    file_structure: FileStructure = FileStructure.SINGLE_FILE
    output_filename: str = "tokens.json"
    base_style_file_path: str = "./base"
    customize_style_file_names: bool = False
    style_file_names: dict[TokenType, str] = Field(default_factory=dict)
    generate_empty_files: bool = False
    show_generated_file_disclaimer: bool = True
    disclaimer: str = DEFAULT_DISCLAIMER
    show_last_updated: bool = True

    # Selection
    token_sort_order: TokenSortOrder = TokenSortOrder.DEFAULT
    include_component_tokens: bool = False
    skip_typography_tokens: bool = False
    exclude_themes_mode: bool = False
    excluded_theme_ids: list[str] = Field(default_factory=list)

    # Themes
    export_themes_as: ThemeExportStyle = ThemeExportStyle.SEPARATE_FILES
    export_base_values: bool = True
    export_only_themed_tokens: bool = False
    group_semantic_by_color_scheme_and_theme: bool = False

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    @field_validator("output_filename")
    @classmethod
    def validate_output_filename(cls, v: str) -> str:
        """Ensure the single-file output name ends in .json."""
        v = v.strip()
        if not v:
            raise ValueError("Output filename cannot be empty")
        return v if v.endswith(".json") else f"{v}.json"

    def token_prefix(self, token_type: TokenType, force: bool = False) -> str:
        """
        Get the leading name segment for a token type.

        Args:
            token_type: The token type
            force: Return the prefix even when type prefixes are disabled

        Returns:
            Prefix text, empty when prefixes are off
        """
        if not self.use_token_type_prefixes and not force:
            return ""
        if self.customize_token_prefixes and token_type in self.token_prefixes:
            return self.token_prefixes[token_type].strip()
        return DEFAULT_TOKEN_PREFIXES[token_type]

    def style_file_name(self, token_type: TokenType) -> str:
        """Get the per-type output file name."""
        if self.customize_style_file_names and token_type in self.style_file_names:
            name = self.style_file_names[token_type].strip()
            return name if name.endswith(".json") else f"{name}.json"
        return DEFAULT_STYLE_FILE_NAMES[token_type]
