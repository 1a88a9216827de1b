"""Layout transformer for Level 4.

Remaps validated records into one table per layout. Every table is built
from the same record sequence, so row i of each table comes from the same
source record.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from level1_ingestion.normalizer import Record

from .layouts import LayoutDefinition

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class LayoutTable:
    """Rows rendered for one layout."""

    name: str
    columns: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...]

    def to_dict(self) -> dict[str, Any]:
        return {"columns": list(self.columns), "rows": [list(row) for row in self.rows]}


def format_cell(value: Any) -> Any:
    """Dates become YYYY-MM-DD, absent values a blank cell, the rest as is."""
    if value is None:
        return ""
    # datetime is a date subclass, so this covers both
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return value


def build_row(record: Record, columns: tuple[str, ...]) -> tuple[Any, ...]:
    return tuple(format_cell(record.get(key)) for key in columns)


def build_table(
    records: list[Record] | tuple[Record, ...], layout: LayoutDefinition
) -> LayoutTable:
    """Build the output table for a single layout.

    Args:
        records: Accepted, validated records in input order
        layout: Output layout

    Returns:
        LayoutTable with one row per record
    """
    rows = tuple(build_row(record, layout.columns) for record in records)
    logger.debug(f"Layout '{layout.name}': {len(rows)} rows x {len(layout.columns)} columns")
    return LayoutTable(name=layout.name, columns=layout.columns, rows=rows)


def transform_records(
    records: list[Record] | tuple[Record, ...],
    layouts: list[LayoutDefinition] | tuple[LayoutDefinition, ...],
) -> dict[str, LayoutTable]:
    """Build one table per layout from the same records.

    This is the main entry point for Level 4.

    Returns:
        Mapping from layout name to its table, in layout order
    """
    tables = {layout.name: build_table(records, layout) for layout in layouts}
    logger.info(f"Transformed {len(records)} records into {len(tables)} layout tables")
    return tables
