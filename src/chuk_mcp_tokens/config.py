"""
Configuration loading.

Exporter configuration lives in a YAML or JSON file whose keys follow
the platform's camelCase naming (snake_case is accepted too).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import ArtifactMissingError, ConfigurationError
from chuk_mcp_tokens.models.config import ExporterConfiguration

logger = logging.getLogger(__name__)


def load_configuration(path: Path | None = None, **overrides: Any) -> ExporterConfiguration:
    """
    Load exporter configuration.

    Args:
        path: Optional YAML/JSON config file; defaults apply without one
        **overrides: Options taking precedence over the file

    Returns:
        Validated configuration

    Raises:
        ArtifactMissingError: If `path` does not exist
        ConfigurationError: If the file cannot be parsed or validated
    """
    data: dict[str, Any] = {}

    if path is not None:
        if not path.exists():
            raise ArtifactMissingError(ErrorMessages.CONFIG_NOT_FOUND.format(path=path))
        try:
            with open(path) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Configuration '{path}' is not valid YAML/JSON: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigurationError(f"Configuration '{path}' must be a mapping")
        data.update(loaded or {})
        logger.debug(f"Loaded configuration from {path}")

    # Aliases take precedence over field names during validation
    data.update({to_camel(key): value for key, value in overrides.items() if value is not None})

    try:
        return ExporterConfiguration.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
