import json
from datetime import date

import pytest

from conftest import read_workbook_rows
from level3_analysis.analyzer import analyze_records
from level4_layout.transformer import LayoutTable
from level5_export.json_export import render_json_payload
from level5_export.workbook import (
    ExportError,
    render_converted_workbook,
    render_layout_workbook,
    sheet_name,
)


def test_sheet_name_sanitizes_input() -> None:
    assert sheet_name("bank-movements 2025") == "bank movements 2025"
    assert sheet_name("///") == "Sheet"
    assert len(sheet_name("x" * 40)) == 31


def test_converted_workbook_has_data_and_analysis_sheets() -> None:
    records = [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": ""}]
    data = render_converted_workbook(records, analyze_records(records))

    data_rows = read_workbook_rows(data, "Data")
    assert data_rows[:2] == [("name", "age"), ("Alice", "30")]
    assert data_rows[2][0] == "Bob"
    assert data_rows[2][1] in (None, "")
    analysis_rows = read_workbook_rows(data, "Analysis")
    assert analysis_rows[0][:2] == ("Row count", 2)
    assert analysis_rows[2] == ("Column", "Type", "Missing", "Unique")
    assert analysis_rows[3] == ("name", "string", 0, 2)
    assert analysis_rows[4] == ("age", "number", 1, 1)


def test_layout_workbook_writes_one_sheet_per_table() -> None:
    tables = {
        "movements": LayoutTable(name="movements", columns=("a", "b"), rows=(("1", 2),)),
        "summary": LayoutTable(name="summary", columns=("b",), rows=((2,),)),
    }
    data = render_layout_workbook(tables)
    assert read_workbook_rows(data, "movements") == [("a", "b"), ("1", 2)]
    assert read_workbook_rows(data, "summary") == [("b",), (2,)]


def test_layout_workbook_requires_tables() -> None:
    with pytest.raises(ExportError):
        render_layout_workbook({})


def test_layout_workbook_rejects_colliding_sheet_titles() -> None:
    tables = {
        "a-b": LayoutTable(name="a-b", columns=("x",), rows=()),
        "a b": LayoutTable(name="a b", columns=("x",), rows=()),
    }
    with pytest.raises(ExportError):
        render_layout_workbook(tables)


def test_json_payload_renders_dates_as_iso_strings() -> None:
    text = render_json_payload({"records": [{"day": date(2025, 12, 1), "name": "Zoë"}]})
    assert json.loads(text) == {"records": [{"day": "2025-12-01", "name": "Zoë"}]}
