"""Workbook rendering for Level 5.

Renders pipeline results as XLSX bytes with openpyxl. Nothing here
computes data; it only lays out rows that earlier levels produced.
"""

import io
import re
from typing import Any, Iterable

from openpyxl import Workbook

from level1_ingestion.normalizer import Record
from level3_analysis.analyzer import AnalysisReport
from level4_layout.transformer import LayoutTable
from utils import get_logger

logger = get_logger(__name__)

DATA_SHEET = "Data"
ANALYSIS_SHEET = "Analysis"
MAX_SHEET_NAME_LENGTH = 31


class ExportError(Exception):
    """Raised when results cannot be rendered."""

    pass


def sheet_name(name: str) -> str:
    """Normalize a table name to an Excel-safe worksheet title."""
    cleaned = re.sub(r"[^A-Za-z0-9]+", " ", name).strip()
    cleaned = cleaned or "Sheet"
    return cleaned[:MAX_SHEET_NAME_LENGTH]


def _append_rows(sheet: Any, rows: Iterable[Iterable[Any]]) -> None:
    for row in rows:
        try:
            sheet.append(list(row))
        except (ValueError, TypeError) as e:
            raise ExportError(f"Cannot write row to sheet '{sheet.title}': {e}") from e


def _to_bytes(workbook: Workbook) -> bytes:
    buffer = io.BytesIO()
    try:
        workbook.save(buffer)
    except (OSError, ValueError) as e:
        raise ExportError(f"Failed to serialize workbook: {e}") from e
    return buffer.getvalue()


def render_converted_workbook(
    records: list[Record] | tuple[Record, ...], analysis: AnalysisReport
) -> bytes:
    """Render accepted records plus their analysis as a two-sheet workbook.

    The Data sheet holds a header row and one row per record. The Analysis
    sheet holds the row count, a blank row, then one line per column with
    its type, missing and unique counts.

    Raises:
        ExportError: If a value cannot be written to a cell
    """
    workbook = Workbook()
    data_sheet = workbook.active
    data_sheet.title = DATA_SHEET
    columns = list(analysis.columns)
    _append_rows(data_sheet, [columns])
    _append_rows(
        data_sheet,
        ([record.get(column) for column in columns] for record in records),
    )

    analysis_sheet = workbook.create_sheet(ANALYSIS_SHEET)
    _append_rows(
        analysis_sheet,
        [["Row count", analysis.row_count], [], ["Column", "Type", "Missing", "Unique"]],
    )
    _append_rows(
        analysis_sheet,
        (
            [column, stats.type, stats.missing, stats.unique]
            for column, stats in analysis.column_analysis.items()
        ),
    )

    logger.info(f"Rendered workbook: {len(records)} data rows, {len(columns)} columns")
    return _to_bytes(workbook)


def render_layout_workbook(tables: dict[str, LayoutTable]) -> bytes:
    """Render one worksheet per layout table.

    Raises:
        ExportError: If there are no tables, two tables map to the same
            sheet title, or a value cannot be written
    """
    if not tables:
        raise ExportError("No layout tables to render")

    workbook = Workbook()
    workbook.remove(workbook.active)
    used_titles: set[str] = set()
    for table in tables.values():
        title = sheet_name(table.name)
        if title.lower() in used_titles:
            raise ExportError(f"Layout '{table.name}' collides with sheet title '{title}'")
        used_titles.add(title.lower())

        sheet = workbook.create_sheet(title)
        _append_rows(sheet, [table.columns])
        _append_rows(sheet, table.rows)
        logger.debug(f"Sheet '{title}': {len(table.rows)} rows")

    logger.info(f"Rendered layout workbook with {len(tables)} sheets")
    return _to_bytes(workbook)
