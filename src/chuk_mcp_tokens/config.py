"""
Config loader - reads a build configuration from YAML.

Example tokens.yaml:

    prefix: rolo
    output_references: true
    box_shadow_inset: false
    rounding: direct
    themes:
      - name: light
        selector: ":root, .light"
        excluded_sets: [dark, semantics/mutable]
      - name: root
        selector: ":root"
        structural: true
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import ConfigError
from chuk_mcp_tokens.models.config import BuildConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "tokens.yaml"


def parse_config(data: dict[str, Any] | None, source: str = "<config>") -> BuildConfig:
    """Build a BuildConfig from parsed YAML data."""
    try:
        return BuildConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(ErrorMessages.CONFIG_INVALID.format(path=source, reason=e)) from e


def load_config(path: Path | None = None) -> BuildConfig:
    """
    Load a build configuration.

    Args:
        path: YAML file; a missing file gives the default configuration

    Returns:
        The configuration

    Raises:
        ConfigError: If the file is not valid YAML or has invalid fields
    """
    if path is None or not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return BuildConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(ErrorMessages.CONFIG_INVALID.format(path=path, reason=e)) from e

    if data is not None and not isinstance(data, dict):
        raise ConfigError(
            ErrorMessages.CONFIG_INVALID.format(path=path, reason="expected a mapping")
        )
    return parse_config(data, str(path))
