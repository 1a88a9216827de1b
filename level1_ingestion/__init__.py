"""Level 1: Data Ingestion & Row Normalization.

This module handles reading delimited text and workbooks from raw bytes
and normalizing their rows into ordered records.
"""

from .loader import (
    MalformedInputError,
    RawTable,
    SourceFormat,
    detect_source_format,
    load_table,
    read_delimited,
    read_workbook,
)
from .normalizer import Record, normalize_rows, normalize_source

__all__ = [
    "MalformedInputError",
    "RawTable",
    "Record",
    "SourceFormat",
    "detect_source_format",
    "load_table",
    "normalize_rows",
    "normalize_source",
    "read_delimited",
    "read_workbook",
]
