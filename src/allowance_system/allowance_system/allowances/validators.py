from __future__ import annotations

from typing import Any, Optional

from ..common.validators import require_non_empty, require_positive_int
from ..core.exceptions import ValidationError


def validate_custom_activity(description: Optional[str], amount: Any) -> tuple[str, int]:
    """Free-text activity (CUSTOM): both the description and the amount are mandatory."""
    if description is None or amount is None:
        raise ValidationError("手入力その他を選択した場合、内容と金額を必ず入力してください。")
    return require_non_empty(description, "内容"), require_positive_int(amount, "金額")
