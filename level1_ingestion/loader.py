"""Raw table loader for Level 1 ingestion.

This module turns uploaded bytes into a raw header row plus data rows.
Delimited text is parsed with the pandas C tokenizer, workbooks with
openpyxl. Values are returned exactly as read; trimming and row filtering
happen in the normalizer.
"""

import io
import zipfile
from dataclasses import dataclass
from enum import Enum
from typing import Any

import openpyxl
import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from utils import DEFAULT_CSV_DELIMITER, get_logger

logger = get_logger(__name__)

XLSX_SIGNATURE = b"PK\x03\x04"


class MalformedInputError(Exception):
    """Raised when raw bytes cannot be read as a header plus rows."""

    pass


class SourceFormat(str, Enum):
    """Supported raw input formats."""

    AUTO = "auto"
    CSV = "csv"
    XLSX = "xlsx"


@dataclass(frozen=True)
class RawTable:
    """Header row and data rows exactly as read from the source."""

    header: tuple[Any, ...]
    rows: tuple[tuple[Any, ...], ...]
    source_format: SourceFormat


def detect_source_format(raw: bytes) -> SourceFormat:
    """Guess the input format from the leading bytes.

    XLSX files are ZIP containers; anything else is treated as text.
    """
    if raw.startswith(XLSX_SIGNATURE):
        return SourceFormat.XLSX
    return SourceFormat.CSV


def _decode_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Input is not valid UTF-8 text: {e}") from e


def _read_frame(text: str, delimiter: str, **kwargs: Any) -> pd.DataFrame:
    return pd.read_csv(
        io.StringIO(text),
        sep=delimiter,
        header=None,
        index_col=False,
        dtype=str,
        keep_default_na=False,
        na_filter=False,
        skip_blank_lines=True,
        engine="c",
        **kwargs,
    )


def read_delimited(raw: bytes, delimiter: str = DEFAULT_CSV_DELIMITER) -> RawTable:
    """Read delimited text into a raw table.

    Every cell is read as text. Quoting is lenient: quote characters inside
    an unquoted field, or trailing a closing quote, are kept as literal
    text. A quote left open at the end of the input is malformed, since
    no row boundary can be recovered after it. Blank and whitespace-only
    lines are skipped. Rows wider than the header are truncated to the
    header width.

    Args:
        raw: UTF-8 encoded delimited text with a header line
        delimiter: Single-character field delimiter

    Returns:
        RawTable with the header line and all non-blank data lines

    Raises:
        MalformedInputError: If the bytes are empty, undecodable or unparsable
    """
    text = _decode_text(raw)
    if not text.strip():
        raise MalformedInputError("Input is empty: a header row is required")

    try:
        # The header line fixes the row width for the whole table
        width = _read_frame(text, delimiter, nrows=1).shape[1]
        columns = list(range(width))
        frame = _read_frame(text, delimiter, names=columns, usecols=columns)
    except pd.errors.EmptyDataError as e:
        raise MalformedInputError("Input is empty: a header row is required") from e
    except pd.errors.ParserError as e:
        raise MalformedInputError(f"Failed to parse delimited input: {e}") from e

    frame = frame.fillna("")
    table = frame.values.tolist()
    if not table:
        raise MalformedInputError("Input is empty: a header row is required")

    header, *rows = table
    logger.debug(f"Read delimited input: {len(header)} columns, {len(rows)} data rows")
    return RawTable(
        header=tuple(header),
        rows=tuple(tuple(row) for row in rows),
        source_format=SourceFormat.CSV,
    )


def read_workbook(raw: bytes) -> RawTable:
    """Read the first worksheet of an XLSX workbook into a raw table.

    Args:
        raw: XLSX workbook bytes

    Returns:
        RawTable with row 1 as header and rows 2.. as data

    Raises:
        MalformedInputError: If the workbook is corrupt or the sheet is empty
    """
    try:
        workbook = openpyxl.load_workbook(io.BytesIO(raw), read_only=True, data_only=True)
    except (zipfile.BadZipFile, InvalidFileException) as e:
        raise MalformedInputError(f"Input is not a readable workbook: {e}") from e
    except (KeyError, ValueError, OSError) as e:
        raise MalformedInputError(f"Workbook is corrupt: {e}") from e

    try:
        if not workbook.worksheets:
            raise MalformedInputError("Workbook has no worksheets")
        sheet = workbook.worksheets[0]
        table = [tuple(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()

    if not table:
        raise MalformedInputError(f"Worksheet '{sheet.title}' is empty: a header row is required")

    header, *rows = table
    logger.debug(
        f"Read worksheet '{sheet.title}': {len(header)} columns, {len(rows)} data rows"
    )
    return RawTable(header=header, rows=tuple(rows), source_format=SourceFormat.XLSX)


def load_table(
    raw: bytes,
    source_format: SourceFormat = SourceFormat.AUTO,
    delimiter: str = DEFAULT_CSV_DELIMITER,
) -> RawTable:
    """Load raw bytes as a table, detecting the format when asked to.

    Raises:
        MalformedInputError: If the bytes cannot be read as a table
    """
    if not raw:
        raise MalformedInputError("Input is empty: a header row is required")

    if source_format == SourceFormat.AUTO:
        source_format = detect_source_format(raw)
        logger.debug(f"Detected source format: {source_format.value}")

    if source_format == SourceFormat.XLSX:
        return read_workbook(raw)
    return read_delimited(raw, delimiter=delimiter)
