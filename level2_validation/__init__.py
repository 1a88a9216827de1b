"""Level 2: Row Validation.

This module applies a pluggable record check to every normalized record,
keeping accepted records and reporting rejected ones by row number.
"""

from .checks import (
    CallableRecordCheck,
    PydanticRecordCheck,
    RecordCheck,
    RecordValidationError,
    ValidationIssue,
    as_record_check,
)
from .registry import available_schemas, get_schema_check
from .schemas import BankMovement, Direction
from .validator import RejectedRow, ValidationReport, validate_records

__all__ = [
    "BankMovement",
    "CallableRecordCheck",
    "Direction",
    "PydanticRecordCheck",
    "RecordCheck",
    "RecordValidationError",
    "RejectedRow",
    "ValidationIssue",
    "ValidationReport",
    "as_record_check",
    "available_schemas",
    "get_schema_check",
    "validate_records",
]
