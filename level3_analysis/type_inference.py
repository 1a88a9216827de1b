"""Heuristic column type inference for Level 3.

Values are tested as text, in order:
1. Number: pandas ``to_numeric`` parses it to a finite value
   (integers, decimals, exponent notation, optional sign)
2. Date: pandas ``to_datetime`` with ``format="mixed"`` parses it
   (dateutil grammar, month-first for ambiguous day/month)
3. Otherwise the value is plain text

A column is a number (or date) column only when that evidence beats the
other kind and covers at least half of all values, missing ones included.
Everything else is a string column.
"""

import logging
from typing import Any, Iterable

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


class ColumnType:
    """Inferred column type constants."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"


def is_missing(value: Any) -> bool:
    """Missing means absent (None) or the empty string."""
    return value is None or value == ""


def looks_like_number(text: str) -> bool:
    number = pd.to_numeric(pd.Series([text], dtype=object), errors="coerce").astype(float).iloc[0]
    return bool(np.isfinite(number))


def looks_like_date(text: str) -> bool:
    try:
        parsed = pd.to_datetime(
            pd.Series([text], dtype=object), errors="coerce", format="mixed", utc=True
        ).iloc[0]
    except (ValueError, OverflowError, TypeError):
        return False
    return bool(pd.notna(parsed))


def _count_dates(texts: pd.Series) -> int:
    if texts.empty:
        return 0
    try:
        parsed = pd.to_datetime(texts, errors="coerce", format="mixed", utc=True)
    except (ValueError, OverflowError, TypeError) as e:
        # One unparsable value can sink the vectorized call; retry value by value
        logger.debug(f"Vectorized date parsing failed ({e}); parsing values one by one")
        return sum(1 for text in texts if looks_like_date(text))
    return int(parsed.notna().sum())


def count_type_evidence(values: Iterable[Any]) -> tuple[int, int]:
    """Count values that look like numbers and values that look like dates.

    Missing and whitespace-only values contribute to neither count.

    Returns:
        Tuple of (number count, date count)
    """
    texts = pd.Series(
        [str(value).strip() for value in values if not is_missing(value)], dtype=object
    )
    texts = texts[texts != ""]
    if texts.empty:
        return 0, 0

    numbers = pd.to_numeric(texts, errors="coerce").astype(float)
    numeric_mask = numbers.notna() & np.isfinite(numbers)
    number_count = int(numeric_mask.sum())

    date_count = _count_dates(texts[~numeric_mask])
    return number_count, date_count


def decide_column_type(number_count: int, date_count: int, total_count: int) -> str:
    """Majority rule over all values, ties fall back to string."""
    if number_count > date_count and number_count >= total_count / 2:
        return ColumnType.NUMBER
    if date_count > number_count and date_count >= total_count / 2:
        return ColumnType.DATE
    return ColumnType.STRING


def infer_column_type(values: list[Any]) -> str:
    """Infer the type of a column from all of its values.

    Args:
        values: Every value of the column, missing ones included

    Returns:
        One of ColumnType.STRING, ColumnType.NUMBER, ColumnType.DATE
    """
    number_count, date_count = count_type_evidence(values)
    return decide_column_type(number_count, date_count, len(values))
