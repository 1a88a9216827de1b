from pathlib import Path

import pytest

from utils import (
    PathValidationError,
    is_supported_config_format,
    is_supported_input_format,
    validate_output_file,
    validate_path_safe,
)


def test_traversal_is_rejected() -> None:
    with pytest.raises(PathValidationError):
        validate_path_safe("data/../../secret.csv")


def test_must_exist(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        validate_path_safe(tmp_path / "missing.csv", must_exist=True)


def test_base_dir_restriction(tmp_path: Path) -> None:
    inside = tmp_path / "a.csv"
    assert validate_path_safe(inside, base_dir=tmp_path) == inside.resolve()
    with pytest.raises(PathValidationError):
        validate_path_safe("/tmp", base_dir=tmp_path / "sub")


def test_output_file_parent_is_created(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "out.xlsx"
    assert validate_output_file(target) == target.resolve()
    assert target.parent.is_dir()


def test_output_file_cannot_be_a_directory(tmp_path: Path) -> None:
    with pytest.raises(PathValidationError):
        validate_output_file(tmp_path)


def test_output_file_overwrite_flag(tmp_path: Path) -> None:
    target = tmp_path / "out.json"
    target.write_text("{}", encoding="utf-8")
    assert validate_output_file(target) == target.resolve()
    with pytest.raises(PathValidationError):
        validate_output_file(target, overwrite=False)


def test_output_file_in_system_directory_is_rejected() -> None:
    with pytest.raises(PathValidationError):
        validate_output_file("/etc/tabprep/out.json")


def test_supported_formats() -> None:
    assert is_supported_input_format("movements.XLSX")
    assert is_supported_input_format("people.csv")
    assert not is_supported_input_format("report.pdf")
    assert is_supported_config_format("settings.yml")
    assert not is_supported_config_format("settings.toml")
