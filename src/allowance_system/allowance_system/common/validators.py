from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name}を入力してください")
    return value.strip()


def require_positive_int(value: Any, field_name: str) -> int:
    """Accept ints and digit strings (form posts); reject bools, floats and <= 0."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name}は正の整数で入力してください")
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field_name}は正の整数で入力してください")
    return value


def require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name}は0以上の整数で入力してください")
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if not isinstance(value, int) or value < 0:
        raise ValidationError(f"{field_name}は0以上の整数で入力してください")
    return value
