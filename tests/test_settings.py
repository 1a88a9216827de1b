import json
from pathlib import Path

import pytest

from core import ConfigurationError, PipelineConfig, parse
from level1_ingestion import SourceFormat
from level2_validation import PydanticRecordCheck
from settings import load_settings, validate_settings


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_no_settings_file_gives_default_config() -> None:
    assert load_settings(None) == PipelineConfig()


def test_bank_schema_brings_default_layouts(tmp_path: Path) -> None:
    config = load_settings(_write(tmp_path / "bank.yaml", "schema: bank_movement\n"))
    assert isinstance(config.check, PydanticRecordCheck)
    assert [layout.name for layout in config.layouts] == ["movements", "summary"]


def test_custom_layouts_and_csv_options(tmp_path: Path) -> None:
    settings = {
        "schema": "bank_movement",
        "source_format": "csv",
        "csv": {"delimiter": ";"},
        "layouts": [{"name": "short", "columns": ["bookingDate", " amount "]}],
    }
    config = load_settings(_write(tmp_path / "settings.json", json.dumps(settings)))
    assert config.csv_delimiter == ";"
    assert config.source_format == SourceFormat.CSV
    assert config.layouts[0].columns == ("bookingDate", "amount")


def test_delimiter_setting_is_used_when_parsing(tmp_path: Path) -> None:
    config = load_settings(_write(tmp_path / "semi.yml", "csv:\n  delimiter: ';'\n"))
    result = parse(b"a;b\n1;2\n", config)
    assert result.records == ({"a": "1", "b": "2"},)


@pytest.mark.parametrize(
    "text",
    [
        "schema: payroll\n",
        "unexpected: true\n",
        "csv:\n  delimiter: ';;'\n",
        "layouts:\n  - name: a\n    columns: []\n",
        "layouts:\n  - name: a\n    columns: [x]\n  - name: a\n    columns: [y]\n",
        "source_format: pdf\n",
    ],
)
def test_invalid_settings_are_configuration_errors(tmp_path: Path, text: str) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(_write(tmp_path / "bad.yaml", text))


def test_unreadable_settings_files(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_settings(tmp_path / "missing.yaml")
    with pytest.raises(ConfigurationError):
        load_settings(_write(tmp_path / "empty.yaml", ""))
    with pytest.raises(ConfigurationError):
        load_settings(_write(tmp_path / "list.yaml", "- a\n- b\n"))
    with pytest.raises(ConfigurationError):
        load_settings(_write(tmp_path / "broken.yaml", "schema: [unclosed\n"))
    with pytest.raises(ConfigurationError):
        load_settings(_write(tmp_path / "settings.toml", "schema = 'x'\n"))


def test_validation_message_names_the_field() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        validate_settings({"csv": {"delimiter": ""}})
    assert "csv -> delimiter" in str(exc_info.value)
