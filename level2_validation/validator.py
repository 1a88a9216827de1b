"""Row validator for Level 2.

Applies a record check to every normalized record independently and
partitions the batch into accepted and rejected rows. A rejected row
never stops the batch.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from level1_ingestion.normalizer import Record

from .checks import RecordCheck, RecordValidationError, ValidationIssue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RejectedRow:
    """A record that failed validation.

    ``row`` is the 1-based position in the normalized sequence.
    """

    row: int
    errors: tuple[ValidationIssue, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"row": self.row, "errors": [issue.to_dict() for issue in self.errors]}


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating one batch."""

    accepted: tuple[Record, ...] = field(default_factory=tuple)
    rejected: tuple[RejectedRow, ...] = field(default_factory=tuple)

    @property
    def has_rejections(self) -> bool:
        return bool(self.rejected)


def validate_records(
    records: list[Record] | tuple[Record, ...], check: Optional[RecordCheck] = None
) -> ValidationReport:
    """Validate each record and split the batch.

    Without a check every record is accepted unchanged. With one, each
    record is checked on its own; coerced records replace the originals in
    the accepted sequence and failures are reported with their row number.

    Args:
        records: Normalized records in input order
        check: Optional validation capability

    Returns:
        ValidationReport with accepted records (input order) and rejected
        rows (row order)
    """
    if check is None:
        logger.debug(f"No record check configured; accepting {len(records)} records")
        return ValidationReport(accepted=tuple(records))

    accepted: list[Record] = []
    rejected: list[RejectedRow] = []
    for row_number, record in enumerate(records, start=1):
        try:
            accepted.append(check.check(record))
        except RecordValidationError as e:
            rejected.append(RejectedRow(row=row_number, errors=e.issues))
            logger.debug(f"Row {row_number} rejected: {e}")

    if rejected:
        logger.warning(
            f"Validation rejected {len(rejected)} of {len(records)} rows "
            f"(rows {', '.join(str(r.row) for r in rejected[:10])}"
            f"{', ...' if len(rejected) > 10 else ''})"
        )
    logger.info(f"Validation accepted {len(accepted)} of {len(records)} rows")

    return ValidationReport(accepted=tuple(accepted), rejected=tuple(rejected))
