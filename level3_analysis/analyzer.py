"""Column analyzer for Level 3.

This module computes per-column descriptive statistics over accepted
records: missing and unique counts, the most frequent values, and an
inferred type. Analysis never fails on a well-formed record list; an
empty list yields an empty report.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from level1_ingestion.normalizer import Record

from .type_inference import infer_column_type, is_missing

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 3


@dataclass(frozen=True)
class ColumnStats:
    """Statistics for a single column.

    ``unique`` and ``examples`` compare values by their string form.
    """

    type: str
    missing: int
    unique: int
    examples: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "missing": self.missing,
            "unique": self.unique,
            "examples": list(self.examples),
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Column analysis for one batch of accepted records."""

    row_count: int
    columns: tuple[str, ...] = ()
    column_analysis: dict[str, ColumnStats] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys returned to callers."""
        return {
            "rowCount": self.row_count,
            "columns": list(self.columns),
            "columnAnalysis": {
                name: stats.to_dict() for name, stats in self.column_analysis.items()
            },
        }


def top_examples(values: list[Any], limit: int = MAX_EXAMPLES) -> tuple[str, ...]:
    """Most frequent non-missing values, ties kept in first-seen order."""
    frequencies = Counter(str(value) for value in values if not is_missing(value))
    return tuple(key for key, _ in frequencies.most_common(limit))


def analyze_column(values: list[Any]) -> ColumnStats:
    """Compute statistics for one column.

    Args:
        values: The column's value from every record, in record order

    Returns:
        ColumnStats for the column
    """
    present = [value for value in values if not is_missing(value)]
    return ColumnStats(
        type=infer_column_type(values),
        missing=len(values) - len(present),
        unique=len({str(value) for value in present}),
        examples=top_examples(present),
    )


def analyze_records(records: list[Record] | tuple[Record, ...]) -> AnalysisReport:
    """Analyze accepted records column by column.

    Columns come from the first record's keys. A record without one of
    those keys counts as an empty value for that column.

    This is the main entry point for Level 3.

    Args:
        records: Accepted records in input order

    Returns:
        AnalysisReport with row count, column names and per-column stats
    """
    if not records:
        logger.info("No accepted records to analyze")
        return AnalysisReport(row_count=0)

    columns = tuple(records[0].keys())
    logger.info(f"Analyzing {len(records)} rows across {len(columns)} columns")

    column_analysis = {}
    for column in columns:
        stats = analyze_column([record.get(column, "") for record in records])
        column_analysis[column] = stats
        logger.debug(
            f"Column '{column}': type={stats.type}, missing={stats.missing}, "
            f"unique={stats.unique}"
        )

    return AnalysisReport(
        row_count=len(records),
        columns=columns,
        column_analysis=column_analysis,
    )
