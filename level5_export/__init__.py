"""Level 5: Rendering.

This module renders pipeline results as workbooks and JSON documents.
"""

from .json_export import render_json_payload
from .workbook import (
    ExportError,
    render_converted_workbook,
    render_layout_workbook,
    sheet_name,
)

__all__ = [
    "ExportError",
    "render_converted_workbook",
    "render_json_payload",
    "render_layout_workbook",
    "sheet_name",
]
