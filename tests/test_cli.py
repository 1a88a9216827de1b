import json
import logging
from pathlib import Path

import pytest

from conftest import read_workbook_rows
from cli import main
from utils import EXIT_INVALID_CONFIG, EXIT_MALFORMED_INPUT, EXIT_RUNTIME_ERROR, EXIT_SUCCESS


@pytest.fixture(autouse=True)
def _detach_cli_log_handlers():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    logging.captureWarnings(False)


def _csv(tmp_path: Path, text: str = "name,age\nAlice,30\nBob,25\n") -> Path:
    path = tmp_path / "input.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_analyze_prints_json(tmp_path: Path, capsys) -> None:
    assert main(["analyze", str(_csv(tmp_path))]) == EXIT_SUCCESS
    payload = json.loads(capsys.readouterr().out)
    assert payload["rowCount"] == 2
    assert payload["columnAnalysis"]["age"]["type"] == "number"


def test_parse_writes_json_file(tmp_path: Path) -> None:
    output = tmp_path / "out" / "parsed.json"
    assert main(["parse", str(_csv(tmp_path)), "--output", str(output)]) == EXIT_SUCCESS
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert [record["name"] for record in payload["records"]] == ["Alice", "Bob"]


def test_convert_writes_workbook(tmp_path: Path) -> None:
    output = tmp_path / "converted.xlsx"
    assert main(["convert", str(_csv(tmp_path)), "--output", str(output)]) == EXIT_SUCCESS
    assert read_workbook_rows(output.read_bytes(), "Data")[0] == ("name", "age")


def test_transform_writes_layout_sheets(tmp_path: Path, bank_workbook: bytes, capsys) -> None:
    source = tmp_path / "movements.xlsx"
    source.write_bytes(bank_workbook)
    settings = tmp_path / "bank.yaml"
    settings.write_text("schema: bank_movement\n", encoding="utf-8")
    output = tmp_path / "template.xlsx"

    code = main(["transform", str(source), "--config", str(settings), "--output", str(output)])

    assert code == EXIT_SUCCESS
    summary = read_workbook_rows(output.read_bytes(), "summary")
    assert summary[0][0] == "bookingDate"
    assert summary[1][0] == "2025-12-01"
    assert capsys.readouterr().err.find("rejectedRows") == -1


def test_transform_without_schema_is_a_configuration_error(tmp_path: Path) -> None:
    output = tmp_path / "out.xlsx"
    assert main(["transform", str(_csv(tmp_path)), "--output", str(output)]) == EXIT_INVALID_CONFIG
    assert not output.exists()


def test_malformed_input_exit_code(tmp_path: Path) -> None:
    path = tmp_path / "broken.xlsx"
    path.write_bytes(b"PK\x03\x04not a workbook")
    assert main(["analyze", str(path)]) == EXIT_MALFORMED_INPUT


def test_missing_input_file(tmp_path: Path) -> None:
    assert main(["analyze", str(tmp_path / "nope.csv")]) == EXIT_RUNTIME_ERROR
