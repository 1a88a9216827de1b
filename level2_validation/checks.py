"""Record validation capabilities for Level 2.

A record check takes one normalized record and either returns the
(possibly coerced) record or raises RecordValidationError describing what
is wrong with it. Any schema engine can sit behind this contract; the
pydantic adapter below is the one shipped with TabPrep.
"""

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel, ValidationError

from level1_ingestion.normalizer import Record


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a record: field path plus message."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class RecordValidationError(Exception):
    """Raised by a record check when a record is rejected."""

    def __init__(self, issues: list[ValidationIssue] | tuple[ValidationIssue, ...]):
        self.issues = tuple(issues)
        summary = "; ".join(f"{issue.field}: {issue.message}" for issue in self.issues)
        super().__init__(summary or "Record rejected")


@runtime_checkable
class RecordCheck(Protocol):
    """Validate-and-coerce capability applied to each record."""

    def check(self, record: Record) -> Record:
        """Return the coerced record or raise RecordValidationError."""
        ...


class CallableRecordCheck:
    """Wraps a plain function as a RecordCheck.

    Args:
        func: Callable taking a record and returning the coerced record,
            raising RecordValidationError for bad records
        name: Optional name used in log messages
    """

    def __init__(self, func: Callable[[Record], Record], name: str | None = None):
        self._func = func
        self.name = name or getattr(func, "__name__", "callable")

    def check(self, record: Record) -> Record:
        return self._func(record)

    def __repr__(self) -> str:
        return f"CallableRecordCheck({self.name})"


def issues_from_pydantic(error: ValidationError) -> list[ValidationIssue]:
    """Convert a pydantic ValidationError into validation issues.

    The error location is joined with dots to form the field path.
    """
    issues = []
    for err in error.errors():
        field_path = ".".join(str(loc) for loc in err.get("loc", ())) or "__root__"
        issues.append(ValidationIssue(field=field_path, message=err.get("msg", "Validation error")))
    return issues


class PydanticRecordCheck:
    """RecordCheck backed by a pydantic model.

    Records are validated with ``model_validate`` and dumped back by alias,
    so the coerced record keeps the input's column names.

    Args:
        model: pydantic model class describing one record
    """

    def __init__(self, model: type[BaseModel]):
        self.model = model
        self.name = model.__name__

    def check(self, record: Record) -> Record:
        try:
            instance = self.model.model_validate(record)
        except ValidationError as e:
            raise RecordValidationError(issues_from_pydantic(e)) from e
        return instance.model_dump(by_alias=True)

    def __repr__(self) -> str:
        return f"PydanticRecordCheck({self.name})"


def as_record_check(candidate: Any) -> RecordCheck:
    """Accept a RecordCheck, a pydantic model class or a plain callable."""
    if isinstance(candidate, type) and issubclass(candidate, BaseModel):
        return PydanticRecordCheck(candidate)
    if isinstance(candidate, RecordCheck):
        return candidate
    if callable(candidate):
        return CallableRecordCheck(candidate)
    raise TypeError(f"Cannot use {type(candidate).__name__} as a record check")
