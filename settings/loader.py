"""Settings loader for pipeline configuration.

This module loads YAML/JSON settings files, validates them against
PipelineSettings and builds the PipelineConfig shared by pipeline calls.
It provides clear, user-friendly error messages.
"""

import json
import pathlib
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from core.config import ConfigurationError, PipelineConfig
from level2_validation.registry import get_schema_check
from level4_layout.layouts import SCHEMA_LAYOUTS, LayoutDefinition
from utils import (
    PathValidationError,
    get_logger,
    is_supported_config_format,
    validate_path_safe,
)

from .schema import PipelineSettings

logger = get_logger(__name__)


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load settings from a YAML or JSON file.

    Args:
        config_path: Path to settings file

    Returns:
        Dictionary containing settings

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(config_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise ConfigurationError(f"Invalid settings path: {e}") from e
    except FileNotFoundError as e:
        raise ConfigurationError(f"Settings file not found: {config_path}") from e

    if not is_supported_config_format(config_path):
        raise ConfigurationError(
            f"Unsupported settings format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix.lower() == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Failed to read settings file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Failed to decode settings file {config_path}: Encoding error: {e}") from e

    if config is None:
        raise ConfigurationError("Settings file is empty")

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Settings must be a mapping, got {type(config).__name__}"
        )

    return config


def _format_validation_error(error: ValidationError) -> str:
    """Format a pydantic validation error one field per line."""
    lines = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        lines.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(lines)


def validate_settings(config: dict) -> PipelineSettings:
    """Validate a settings mapping against PipelineSettings.

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return PipelineSettings.model_validate(config)
    except ValidationError as e:
        raise ConfigurationError(
            f"Settings validation failed:\n{_format_validation_error(e)}"
        ) from e


def build_pipeline_config(settings: PipelineSettings) -> PipelineConfig:
    """Build the runtime PipelineConfig described by validated settings.

    Raises:
        ConfigurationError: If the settings name an unknown record schema
    """
    check = None
    if settings.record_schema is not None:
        try:
            check = get_schema_check(settings.record_schema)
        except KeyError as e:
            raise ConfigurationError(str(e.args[0])) from e

    if settings.layouts is not None:
        layouts = tuple(
            LayoutDefinition(name=layout.name, columns=tuple(layout.columns))
            for layout in settings.layouts
        )
    else:
        layouts = SCHEMA_LAYOUTS.get(settings.record_schema or "", ())

    logger.debug(
        f"Pipeline config: schema={settings.record_schema}, "
        f"layouts={[layout.name for layout in layouts]}, "
        f"source_format={settings.source_format.value}"
    )
    return PipelineConfig(
        check=check,
        layouts=layouts,
        csv_delimiter=settings.csv.delimiter,
        source_format=settings.source_format,
    )


def load_settings(config_path: Optional[Union[str, pathlib.Path]] = None) -> PipelineConfig:
    """Load, validate and build the pipeline configuration.

    This is the main entry point for settings. Without a path, the
    default configuration (no record check, no layouts) is returned.

    Raises:
        ConfigurationError: If loading or validation fails
    """
    if config_path is None:
        return PipelineConfig()

    settings = validate_settings(load_config_file(config_path))
    logger.info(f"Settings loaded from {config_path}")
    return build_pipeline_config(settings)
