"""Pipeline settings: schema, file loading and config building."""

from .loader import (
    build_pipeline_config,
    load_config_file,
    load_settings,
    validate_settings,
)
from .schema import CsvSettings, LayoutSettings, PipelineSettings

__all__ = [
    "CsvSettings",
    "LayoutSettings",
    "PipelineSettings",
    "build_pipeline_config",
    "load_config_file",
    "load_settings",
    "validate_settings",
]
