"""Pipeline entry points.

Each operation runs the levels in order on one materialized input:

    raw bytes -> Level 1 (normalize) -> Level 2 (validate)
              -> Level 3 (analyze) and/or Level 4 (layout transform)

Operations are synchronous and keep no state between calls; everything
they share is the read-only PipelineConfig passed in.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from level1_ingestion.normalizer import Record, normalize_source
from level2_validation.validator import RejectedRow, ValidationReport, validate_records
from level3_analysis.analyzer import AnalysisReport, analyze_records
from level4_layout.layouts import LayoutDefinition
from level4_layout.transformer import LayoutTable, transform_records
from level5_export.workbook import render_converted_workbook
from utils import get_logger

from .config import ConfigurationError, PipelineConfig, check_layouts

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Accepted records, their analysis and any rejected rows."""

    records: tuple[Record, ...]
    analysis: AnalysisReport
    rejected_rows: tuple[RejectedRow, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"records": [dict(record) for record in self.records]}
        payload.update(self.analysis.to_dict())
        if self.rejected_rows:
            payload["rejectedRows"] = [row.to_dict() for row in self.rejected_rows]
        return payload


@dataclass(frozen=True)
class TransformResult:
    """One table per layout, plus any rejected rows."""

    tables: dict[str, LayoutTable] = field(default_factory=dict)
    rejected_rows: tuple[RejectedRow, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "tables": {name: table.to_dict() for name, table in self.tables.items()}
        }
        if self.rejected_rows:
            payload["rejectedRows"] = [row.to_dict() for row in self.rejected_rows]
        return payload


@dataclass(frozen=True)
class ConvertResult:
    """Rendered Data/Analysis workbook and the parse result behind it."""

    workbook: bytes
    result: ParseResult


def _ingest(raw: bytes, config: PipelineConfig) -> ValidationReport:
    """Run Level 1 and Level 2.

    Raises:
        MalformedInputError: If the input cannot be read
    """
    logger.info("Level 1: normalizing input rows")
    records = normalize_source(
        raw, source_format=config.source_format, delimiter=config.csv_delimiter
    )

    logger.info("Level 2: validating records")
    return validate_records(records, config.check)


def analyze(raw: bytes, config: Optional[PipelineConfig] = None) -> AnalysisReport:
    """Normalize, optionally validate, then analyze raw tabular bytes.

    Rejected rows are left out of the analysis and are not reported.

    Raises:
        MalformedInputError: If the input cannot be read
    """
    config = config or PipelineConfig()
    report = _ingest(raw, config)

    logger.info("Level 3: analyzing columns")
    return analyze_records(report.accepted)


def parse(raw: bytes, config: Optional[PipelineConfig] = None) -> ParseResult:
    """Normalize, optionally validate, and analyze raw tabular bytes.

    Raises:
        MalformedInputError: If the input cannot be read
    """
    config = config or PipelineConfig()
    report = _ingest(raw, config)

    logger.info("Level 3: analyzing columns")
    analysis = analyze_records(report.accepted)
    return ParseResult(
        records=report.accepted,
        analysis=analysis,
        rejected_rows=report.rejected,
    )


def transform_to_layout(
    raw: bytes,
    config: PipelineConfig,
    layouts: Optional[list[LayoutDefinition] | tuple[LayoutDefinition, ...]] = None,
) -> TransformResult:
    """Validate raw tabular bytes and remap accepted records into each layout.

    Args:
        raw: Raw tabular bytes
        config: Pipeline configuration; must carry a record check
        layouts: Layouts to build; defaults to ``config.layouts``

    Returns:
        TransformResult with one table per layout, all sharing row order

    Raises:
        ConfigurationError: If there is no record check or no layout
        MalformedInputError: If the input cannot be read
    """
    if config.check is None:
        raise ConfigurationError("transform_to_layout requires a record check")

    effective_layouts = tuple(layouts) if layouts is not None else config.layouts
    if not effective_layouts:
        raise ConfigurationError("transform_to_layout requires at least one layout")
    check_layouts(effective_layouts)

    report = _ingest(raw, config)

    logger.info(f"Level 4: building {len(effective_layouts)} layout tables")
    tables = transform_records(report.accepted, effective_layouts)
    return TransformResult(tables=tables, rejected_rows=report.rejected)


def convert(raw: bytes, config: Optional[PipelineConfig] = None) -> ConvertResult:
    """Parse raw tabular bytes and render a Data/Analysis workbook.

    Raises:
        MalformedInputError: If the input cannot be read
        ExportError: If the workbook cannot be rendered
    """
    result = parse(raw, config)

    logger.info("Level 5: rendering workbook")
    workbook = render_converted_workbook(result.records, result.analysis)
    return ConvertResult(workbook=workbook, result=result)
