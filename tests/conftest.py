"""Shared fixtures for TabPrep tests."""

from __future__ import annotations

import io
from typing import Any, Callable

import openpyxl
import pytest

BANK_HEADERS = [
    "bankId",
    "accountId",
    "bookingDate",
    "valueDate",
    "conceptCode",
    "concept",
    "amount",
    "direction",
    "currency",
    "balance",
    "counterpartyName",
    "counterpartyIdType",
    "counterpartyIdNumber",
    "counterpartyAccount",
    "reference",
    "rawRowId",
]

BANK_ROW = [
    "icbc",
    "acct-1",
    "2025-12-01",
    "",
    "",
    "Pago factura",
    1500,
    "debit",
    "ARS",
    10000,
    "Comercio X",
    "CUIT",
    "20304050607",
    "alias123",
    "ref-1",
    "row-1",
]


def build_workbook(rows: list[list[Any]], title: str = "Data") -> bytes:
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.title = title
    for row in rows:
        sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    workbook.close()
    return buffer.getvalue()


def read_workbook_rows(data: bytes, sheet: str) -> list[tuple[Any, ...]]:
    workbook = openpyxl.load_workbook(io.BytesIO(data))
    try:
        return [tuple(row) for row in workbook[sheet].iter_rows(values_only=True)]
    finally:
        workbook.close()


@pytest.fixture
def workbook_bytes() -> Callable[..., bytes]:
    return build_workbook


@pytest.fixture
def bank_workbook() -> bytes:
    return build_workbook([BANK_HEADERS, BANK_ROW])
