"""Constants for TabPrep.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_MALFORMED_INPUT = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "TabPrep"
APP_VERSION = "1.0.0"

# Supported file formats
SUPPORTED_INPUT_FORMATS = ["csv", "txt", "xlsx"]
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Default values
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CSV_DELIMITER = ","
