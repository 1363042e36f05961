from __future__ import annotations

from typing import Optional

from ...core.constants import LEGACY_OTHER_AMOUNT
from ...core.enums import ActivityCode
from .base import AllowanceCalculator


class StandardAllowanceCalculator(AllowanceCalculator):
    """Hard-coded rule: every base amount is the built-in default.

    Used when no amount master is available. Also pays the legacy OTHER code.
    """

    def rate(self, code: str, default: int) -> int:
        return default

    def unlisted_amount(self, activity: Optional[ActivityCode]) -> int:
        if activity is ActivityCode.OTHER:
            return LEGACY_OTHER_AMOUNT
        return 0
