"""Settings schema definitions using Pydantic.

This module defines the pipeline settings contract loaded from YAML or
JSON files. Once validated, settings are read-only.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from level1_ingestion.loader import SourceFormat
from utils import DEFAULT_CSV_DELIMITER


class CsvSettings(BaseModel):
    """Delimited text options."""

    delimiter: str = Field(
        default=DEFAULT_CSV_DELIMITER, min_length=1, max_length=1, description="Field delimiter"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class LayoutSettings(BaseModel):
    """One output table: a name and its ordered column keys."""

    name: str = Field(..., min_length=1, description="Output table name")
    columns: list[str] = Field(..., min_length=1, description="Ordered output column keys")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate layout name."""
        if not v.strip():
            raise ValueError("layout name cannot be empty")
        return v.strip()

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[str]) -> list[str]:
        """Reject blank and repeated column keys."""
        cleaned = [key.strip() for key in v]
        if any(not key for key in cleaned):
            raise ValueError("layout columns cannot be empty")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("layout columns must be unique")
        return cleaned

    model_config = ConfigDict(frozen=True, extra="forbid")


class PipelineSettings(BaseModel):
    """Complete pipeline settings.

    ``record_schema`` names a registered record check (for example
    ``bank_movement``). When layouts are omitted, the schema's default
    layouts apply.
    """

    record_schema: Optional[str] = Field(
        default=None, alias="schema", description="Registered record schema name"
    )
    source_format: SourceFormat = Field(
        default=SourceFormat.AUTO, description="Input format, or auto-detect"
    )
    csv: CsvSettings = Field(default_factory=CsvSettings, description="Delimited text options")
    layouts: Optional[list[LayoutSettings]] = Field(
        default=None, description="Output tables for the layout transform"
    )

    @field_validator("layouts")
    @classmethod
    def validate_layout_names(cls, v: Optional[list[LayoutSettings]]) -> Optional[list[LayoutSettings]]:
        """Layout names must be unique."""
        if v is not None:
            names = [layout.name for layout in v]
            if len(set(names)) != len(names):
                raise ValueError("layout names must be unique")
        return v

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )
