"""Level 3: Column Analysis.

This module computes descriptive statistics and a heuristic type for
every column of the accepted records.
"""

from .analyzer import AnalysisReport, ColumnStats, analyze_column, analyze_records
from .type_inference import (
    ColumnType,
    count_type_evidence,
    decide_column_type,
    infer_column_type,
    looks_like_date,
    looks_like_number,
)

__all__ = [
    "AnalysisReport",
    "ColumnStats",
    "ColumnType",
    "analyze_column",
    "analyze_records",
    "count_type_evidence",
    "decide_column_type",
    "infer_column_type",
    "looks_like_date",
    "looks_like_number",
]
