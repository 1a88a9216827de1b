"""Pipeline configuration and entry points."""

from .config import ConfigurationError, PipelineConfig
from .pipeline import (
    ConvertResult,
    ParseResult,
    TransformResult,
    analyze,
    convert,
    parse,
    transform_to_layout,
)

__all__ = [
    "ConfigurationError",
    "ConvertResult",
    "ParseResult",
    "PipelineConfig",
    "TransformResult",
    "analyze",
    "convert",
    "parse",
    "transform_to_layout",
]
