"""File helper utilities for TabPrep.

This module provides the path checks used by the CLI before reading input
tables or writing rendered output.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import SUPPORTED_CONFIG_FORMATS, SUPPORTED_INPUT_FORMATS

logger = logging.getLogger(__name__)

_SYSTEM_DIRECTORIES = (
    "/bin", "/boot", "/dev", "/etc", "/lib", "/lib64", "/proc",
    "/sbin", "/sys", "/usr",
    "/private/etc", "/private/var/lib", "/private/var/log", "/private/var/run",
    "c:/windows", "c:/system32", "c:/syswow64",
)


class PathValidationError(Exception):
    """Raised when path validation fails due to security concerns."""

    pass


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure

    Returns:
        Resolved Path object (for chaining)

    Raises:
        OSError: If directory creation fails
    """
    try:
        resolved_path = path.resolve()
        resolved_path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {resolved_path}")
        return resolved_path
    except (OSError, RuntimeError) as e:
        logger.error(f"Failed to resolve or create directory {path}: {e}")
        raise


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path, lower-cased and without the dot."""
    return Path(file_path).suffix.lstrip(".").lower()


def is_supported_input_format(file_path: str | Path) -> bool:
    """Check if file is a supported tabular input format."""
    return get_file_extension(file_path) in SUPPORTED_INPUT_FORMATS


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported settings format."""
    return get_file_extension(file_path) in SUPPORTED_CONFIG_FORMATS


def validate_path_safe(
    file_path: str | Path,
    base_dir: Optional[Path] = None,
    must_exist: bool = False,
    must_be_file: bool = False,
) -> Path:
    """Validate path to prevent directory traversal attacks.

    Args:
        file_path: Path to validate
        base_dir: Optional base directory to restrict paths within
        must_exist: If True, path must exist
        must_be_file: If True, path must be a file

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If must_exist=True and path doesn't exist
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(
            f"Path contains directory traversal sequence: {file_path}"
        )

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if base_dir is not None:
        base_resolved = Path(base_dir).expanduser().resolve()
        try:
            common = os.path.commonpath([str(resolved), str(base_resolved)])
        except ValueError as e:
            raise PathValidationError(
                f"Path {file_path} cannot be validated against base directory {base_dir}"
            ) from e
        if common != str(base_resolved):
            raise PathValidationError(
                f"Path {file_path} is outside allowed base directory {base_dir}"
            )

    if must_exist and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        if resolved.exists():
            raise PathValidationError(f"Path is not a file: {file_path}")
        raise FileNotFoundError(f"File does not exist: {file_path}")

    return resolved


def is_system_directory(path: Path) -> bool:
    """Check if path is, or lives under, a system directory."""
    candidates = {str(path).lower().replace("\\", "/")}
    try:
        candidates.add(str(path.resolve()).lower().replace("\\", "/"))
    except (OSError, RuntimeError):
        pass

    for candidate in candidates:
        for sys_dir in _SYSTEM_DIRECTORIES:
            if candidate == sys_dir or candidate.startswith(sys_dir + "/"):
                return True
    return False


def validate_output_file(output_path: str | Path, overwrite: bool = True) -> Path:
    """Validate the destination of a rendered output file.

    The parent directory is created when missing.

    Args:
        output_path: Destination file path
        overwrite: If False, an existing file is rejected

    Returns:
        Resolved file path

    Raises:
        PathValidationError: If the path is unsafe or points at a directory
    """
    resolved = validate_path_safe(output_path)

    if is_system_directory(resolved.parent):
        raise PathValidationError(
            f"Output path cannot be inside a system directory: {resolved}"
        )

    if resolved.exists():
        if resolved.is_dir():
            raise PathValidationError(f"Output path is a directory: {resolved}")
        if not overwrite:
            raise PathValidationError(f"Output file already exists: {resolved}")

    ensure_directory(resolved.parent)
    return resolved
