from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .catalog import find_activity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionCheck:
    allowed: bool
    message: Optional[str] = None


def can_select_activity(activity_id: str, is_work_day: bool) -> SelectionCheck:
    """Decide whether an activity may be recorded on the given kind of day.

    Holiday-only activities (A, B) are rejected on work days. Unknown ids are
    allowed; the calculator resolves them to 0.
    """
    activity = find_activity(activity_id)
    if activity is None:
        return SelectionCheck(allowed=True)

    if activity.requires_holiday and is_work_day:
        logger.info("holiday-only activity %s rejected on a work day", activity.id)
        return SelectionCheck(
            allowed=False,
            message=f"{activity.label}は休日のみ選択可能です。勤務日には選択できません。",
        )
    return SelectionCheck(allowed=True)
