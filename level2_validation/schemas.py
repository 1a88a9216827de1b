"""Record schemas shipped with TabPrep.

Schemas are pydantic models whose aliases match the input column names.
They are wrapped as record checks through PydanticRecordCheck.
"""

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_NON_NUMERIC_CHARS = re.compile(r"[^0-9.\-]+")


class Direction(str, Enum):
    """Direction of a bank movement."""

    DEBIT = "debit"
    CREDIT = "credit"


class BankMovement(BaseModel):
    """One movement from a bank statement export.

    Amounts accept thousands separators and currency symbols. Dates accept
    ISO text (YYYY-MM-DD) or workbook date cells; any other date text, such
    as 01/12/2025, is rejected.
    """

    bank_id: str = Field(..., min_length=1)
    account_id: str = Field(..., min_length=1)
    booking_date: date
    value_date: Optional[date] = None
    concept_code: Optional[str] = None
    concept: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    direction: Direction
    currency: str = Field(..., min_length=1)
    balance: Optional[float] = None
    counterparty_name: Optional[str] = None
    counterparty_id_type: Optional[str] = None
    counterparty_id_number: Optional[str] = None
    counterparty_account: Optional[str] = None
    reference: Optional[str] = None
    raw_row_id: Optional[Union[str, int, float]] = None

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        use_enum_values=True,
    )

    @field_validator(
        "value_date",
        "concept_code",
        "balance",
        "counterparty_name",
        "counterparty_id_type",
        "counterparty_id_number",
        "counterparty_account",
        "reference",
        "raw_row_id",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Empty optional cells are absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("amount", "balance", mode="before")
    @classmethod
    def strip_number_separators(cls, v: Any) -> Any:
        """Drop everything but digits, dots and minus signs from numeric text.

        Text with no digits left is passed through unchanged so it fails
        float parsing; only blank cells count as absent.
        """
        if isinstance(v, str):
            cleaned = _NON_NUMERIC_CHARS.sub("", v)
            return cleaned if cleaned else v
        return v

    @field_validator("booking_date", "value_date", mode="before")
    @classmethod
    def datetime_cell_to_date(cls, v: Any) -> Any:
        """Workbook date cells arrive as midnight datetimes."""
        if isinstance(v, datetime):
            return v.date()
        return v
