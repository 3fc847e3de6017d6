from __future__ import annotations

from typing import Any, Optional

from ..core.constants import MAX_USER_ID_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_user_id(value: str) -> str:
    user_id = require_non_empty(value, "User id")
    if len(user_id) > MAX_USER_ID_LENGTH:
        raise ValidationError(f"User id must be at most {MAX_USER_ID_LENGTH} characters")
    return user_id


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a whole number")
    try:
        number = int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number") from None
    if isinstance(value, float) and number != value:
        raise ValidationError(f"{field_name} must be a whole number")
    return number


def require_non_negative_int(value: Any, field_name: str) -> int:
    number = require_int(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return number


def parse_optional_int(value: Any) -> Optional[int]:
    """Read a form/JSON field as int; blank or non-numeric reads as missing."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_optional_number(value: Any) -> Optional[int | float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None
