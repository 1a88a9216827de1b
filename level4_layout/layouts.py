"""Output layout definitions for Level 4.

A layout is a named, fixed, ordered list of output column keys. It does
not depend on the input's column names; keys are looked up in each
validated record by name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutDefinition:
    """Named output table shape."""

    name: str
    columns: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Layout name cannot be empty")
        if not self.columns:
            raise ValueError(f"Layout '{self.name}' must declare at least one column")
        # Accept any sequence but store a tuple
        object.__setattr__(self, "columns", tuple(self.columns))


BANK_MOVEMENT_DETAIL_LAYOUT = LayoutDefinition(
    name="movements",
    columns=(
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
    ),
)

BANK_MOVEMENT_SUMMARY_LAYOUT = LayoutDefinition(
    name="summary",
    columns=(
        "bookingDate",
        "concept",
        "amount",
        "direction",
        "currency",
        "balance",
    ),
)

BANK_MOVEMENT_LAYOUTS = (BANK_MOVEMENT_DETAIL_LAYOUT, BANK_MOVEMENT_SUMMARY_LAYOUT)

# Default layouts per registered record schema
SCHEMA_LAYOUTS: dict[str, tuple[LayoutDefinition, ...]] = {
    "bank_movement": BANK_MOVEMENT_LAYOUTS,
}
