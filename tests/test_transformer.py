from datetime import date, datetime

import pytest

from level4_layout.layouts import (
    BANK_MOVEMENT_DETAIL_LAYOUT,
    BANK_MOVEMENT_SUMMARY_LAYOUT,
    LayoutDefinition,
)
from level4_layout.transformer import build_table, format_cell, transform_records


def test_format_cell() -> None:
    assert format_cell(date(2025, 12, 1)) == "2025-12-01"
    assert format_cell(datetime(2025, 1, 5, 13, 45)) == "2025-01-05"
    assert format_cell(None) == ""
    assert format_cell(1500.0) == 1500.0
    assert format_cell("debit") == "debit"


def test_build_table_follows_layout_order_and_blanks_missing_fields() -> None:
    layout = LayoutDefinition(name="out", columns=("c", "missing", "a"))
    table = build_table([{"a": 1, "b": 2, "c": date(2024, 2, 29)}], layout)
    assert table.columns == ("c", "missing", "a")
    assert table.rows == (("2024-02-29", "", 1),)


def test_layouts_share_row_order() -> None:
    records = [
        {"id": i, "day": date(2025, 1, i), "note": f"n{i}"} for i in range(1, 5)
    ]
    tables = transform_records(
        records,
        [
            LayoutDefinition(name="detail", columns=("id", "day", "note")),
            LayoutDefinition(name="summary", columns=("day", "id")),
        ],
    )
    assert list(tables) == ["detail", "summary"]
    detail, summary = tables["detail"], tables["summary"]
    assert len(detail.rows) == len(summary.rows) == 4
    for detail_row, summary_row in zip(detail.rows, summary.rows):
        assert detail_row[0] == summary_row[1]
        assert detail_row[1] == summary_row[0]


def test_empty_records_give_empty_tables() -> None:
    tables = transform_records([], [BANK_MOVEMENT_SUMMARY_LAYOUT])
    assert tables["summary"].rows == ()
    assert tables["summary"].to_dict() == {
        "columns": list(BANK_MOVEMENT_SUMMARY_LAYOUT.columns),
        "rows": [],
    }


def test_bank_layouts_shape() -> None:
    assert len(BANK_MOVEMENT_DETAIL_LAYOUT.columns) == 16
    assert len(BANK_MOVEMENT_SUMMARY_LAYOUT.columns) == 6
    assert set(BANK_MOVEMENT_SUMMARY_LAYOUT.columns) <= set(BANK_MOVEMENT_DETAIL_LAYOUT.columns)


def test_layout_definition_requires_name_and_columns() -> None:
    with pytest.raises(ValueError):
        LayoutDefinition(name="", columns=("a",))
    with pytest.raises(ValueError):
        LayoutDefinition(name="empty", columns=())
    assert LayoutDefinition(name="x", columns=["a", "b"]).columns == ("a", "b")
