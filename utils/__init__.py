"""Shared utilities for TabPrep.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_CSV_DELIMITER,
    DEFAULT_LOG_LEVEL,
    EXIT_INVALID_CONFIG,
    EXIT_MALFORMED_INPUT,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_INPUT_FORMATS,
)
from .file_helpers import (
    PathValidationError,
    ensure_directory,
    get_file_extension,
    is_supported_config_format,
    is_supported_input_format,
    validate_output_file,
    validate_path_safe,
)
from .logging import get_logger, resolve_log_level, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_CSV_DELIMITER",
    "DEFAULT_LOG_LEVEL",
    "EXIT_INVALID_CONFIG",
    "EXIT_MALFORMED_INPUT",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "SUPPORTED_CONFIG_FORMATS",
    "SUPPORTED_INPUT_FORMATS",
    "ensure_directory",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "is_supported_input_format",
    "PathValidationError",
    "resolve_log_level",
    "setup_logging",
    "validate_output_file",
    "validate_path_safe",
]
