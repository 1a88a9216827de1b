"""Row normalizer for Level 1 ingestion.

This module turns a raw table into an ordered list of records, one
mapping per data row keyed by the header's column names.

Normalization rules:
- Header names are trimmed; empty names become col<N> (1-based position)
- String cells are trimmed; absent cells become the empty string
- Workbook rows whose cells are all empty are skipped; delimited text
  only loses its blank lines (dropped by the loader)
- Input order is preserved
"""

import logging
from typing import Any

from .loader import MalformedInputError, RawTable, SourceFormat, load_table

logger = logging.getLogger(__name__)

Record = dict[str, Any]


def synthetic_column_name(position: int) -> str:
    """Name for an unnamed header cell at a 1-based position."""
    return f"col{position}"


def normalize_cell(value: Any) -> Any:
    """Trim string cells and map absent cells to the empty string."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return value


def normalize_header(header: tuple[Any, ...]) -> list[str]:
    """Build column names from a raw header row.

    Args:
        header: Raw header cells

    Returns:
        List of column names, one per header cell

    Raises:
        MalformedInputError: If every header cell is empty
    """
    raw_names = [str(normalize_cell(cell)) for cell in header]
    if not any(raw_names):
        raise MalformedInputError("Header row is empty: column names are required")

    return [
        name if name else synthetic_column_name(position)
        for position, name in enumerate(raw_names, start=1)
    ]


def is_empty_row(values: list[Any]) -> bool:
    """True when every cell of a normalized row is empty."""
    return all(value == "" for value in values)


def normalize_rows(table: RawTable) -> list[Record]:
    """Convert a raw table into records.

    Args:
        table: Raw table from the loader

    Returns:
        Records in input order, keyed by the normalized header

    Raises:
        MalformedInputError: If the header row is empty
    """
    columns = normalize_header(table.header)
    width = len(columns)
    # Delimited text already dropped its blank lines; a line of bare
    # delimiters is a record of empty values
    skip_empty = table.source_format == SourceFormat.XLSX

    records: list[Record] = []
    skipped = 0
    for row in table.rows:
        cells = list(row[:width]) + [""] * max(0, width - len(row))
        values = [normalize_cell(cell) for cell in cells]
        if skip_empty and is_empty_row(values):
            skipped += 1
            continue
        records.append(dict(zip(columns, values)))

    logger.info(
        f"Normalized {len(records)} records over {width} columns "
        f"({table.source_format.value}, {skipped} empty rows skipped)"
    )
    return records


def normalize_source(
    raw: bytes,
    source_format: SourceFormat = SourceFormat.AUTO,
    delimiter: str = ",",
) -> list[Record]:
    """Load raw bytes and normalize them into records.

    This is the main entry point for Level 1.

    Raises:
        MalformedInputError: If the bytes cannot be read as a header plus rows
    """
    table = load_table(raw, source_format=source_format, delimiter=delimiter)
    return normalize_rows(table)
