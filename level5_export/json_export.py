"""JSON rendering for Level 5."""

import json
from datetime import date
from enum import Enum
from typing import Any


def _json_default(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return str(value)


def render_json_payload(payload: dict[str, Any], indent: int = 2) -> str:
    """Serialize a result payload; dates become ISO strings."""
    return json.dumps(payload, indent=indent, ensure_ascii=False, default=_json_default)
