"""JSON encoding of notification events."""

import json
from dataclasses import fields, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any


def jsonable(value: Any) -> Any:
    """Convert ``value`` into plain JSON types.

    Decimals become strings so amounts keep their exact digits; enums
    become their value; dates and datetimes become ISO strings. Dataclass
    instances (events, loans, payments) become dicts field by field.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [jsonable(v) for v in value]
    return value


def to_json(value: Any, pretty: bool = False) -> str:
    """Serialize ``value`` to a JSON string, keeping non-ASCII names readable."""
    return json.dumps(jsonable(value), indent=2 if pretty else None, ensure_ascii=False, default=str)
