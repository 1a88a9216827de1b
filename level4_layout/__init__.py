"""Level 4: Fixed Layout Transform.

This module remaps validated records into fixed-column output tables.
"""

from .layouts import (
    BANK_MOVEMENT_DETAIL_LAYOUT,
    BANK_MOVEMENT_LAYOUTS,
    BANK_MOVEMENT_SUMMARY_LAYOUT,
    SCHEMA_LAYOUTS,
    LayoutDefinition,
)
from .transformer import LayoutTable, build_table, format_cell, transform_records

__all__ = [
    "BANK_MOVEMENT_DETAIL_LAYOUT",
    "BANK_MOVEMENT_LAYOUTS",
    "BANK_MOVEMENT_SUMMARY_LAYOUT",
    "SCHEMA_LAYOUTS",
    "LayoutDefinition",
    "LayoutTable",
    "build_table",
    "format_cell",
    "transform_records",
]
