"""Value conversion between domain types and BSON-safe types."""

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from bson.decimal128 import Decimal128


def to_bson_value(value: Any) -> Any:
    """Convert a value for storage."""
    if isinstance(value, Decimal):
        return Decimal128(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value
    elif isinstance(value, date):
        # BSON only has datetimes
        return datetime.combine(value, time.min)
    elif isinstance(value, dict):
        return {k: to_bson_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [to_bson_value(v) for v in value]
    return value


def from_bson_value(value: Any) -> Any:
    """Convert a stored value back to domain types."""
    if isinstance(value, Decimal128):
        return value.to_decimal()
    elif isinstance(value, dict):
        return {k: from_bson_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [from_bson_value(v) for v in value]
    return value
