"""Named record checks that settings files can refer to."""

from .checks import PydanticRecordCheck, RecordCheck
from .schemas import BankMovement

SCHEMA_REGISTRY: dict[str, type] = {
    "bank_movement": BankMovement,
}


def available_schemas() -> list[str]:
    return sorted(SCHEMA_REGISTRY)


def get_schema_check(name: str) -> RecordCheck:
    """Build the record check registered under ``name``.

    Raises:
        KeyError: If no schema is registered under that name
    """
    try:
        model = SCHEMA_REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"Unknown record schema '{name}'. Available schemas: {available_schemas()}"
        ) from None
    return PydanticRecordCheck(model)
