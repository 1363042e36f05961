from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ...core.constants import (
    DESIGNATED_COMPETITION_AMOUNT,
    DISASTER_AMOUNT,
    DISASTER_MASTER_CODE,
    HOLIDAY_COMPONENT_AMOUNT,
    HOLIDAY_FULL_DAY_AMOUNT,
    HOLIDAY_HALF_DAY_AMOUNT,
    INSIDE_LONG_DRIVING_AMOUNT,
    LOCAL_DRIVING_AMOUNT,
    NON_DESIGNATED_COMPETITION_AMOUNT,
    OUTSIDE_DRIVING_AMOUNT,
    TRAINING_TRIP_AMOUNT,
)
from ...core.enums import ActivityCode, DestinationCode
from ..model import CalculationInput

logger = logging.getLogger(__name__)

_CAMP_OR_EXPEDITION = (ActivityCode.E, ActivityCode.F)
_LOCAL_DESTINATIONS = (DestinationCode.INSIDE_SHORT, DestinationCode.SCHOOL)


class AllowanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for stipend amounts).

    The resolution order lives here once; subclasses only decide where base
    amounts come from (``rate``) and what activities outside the rule table
    are worth (``unlisted_amount``). The first matching rule wins:

    1. disaster duty
    2. driving: outside the region, >=120km in-region, then local (C/E/F only)
    3. E/F without driving (flat, regardless of work day)
    4. A, B (0 on work days), C (half day uses B's rate), D, G
    5. anything else
    """

    @abstractmethod
    def rate(self, code: str, default: int) -> int:
        raise NotImplementedError

    def unlisted_amount(self, activity: Optional[ActivityCode]) -> int:
        return 0

    def calculate(self, inp: CalculationInput) -> int:
        activity = ActivityCode.parse(inp.activity_id)
        amount = self._resolve(activity, inp)
        logger.debug("%s: %s -> %d", type(self).__name__, inp, amount)
        return amount

    def _resolve(self, activity: Optional[ActivityCode], inp: CalculationInput) -> int:
        if activity is ActivityCode.DISASTER:
            return self.rate(DISASTER_MASTER_CODE, DISASTER_AMOUNT)

        if inp.is_driving:
            amount = self._driving_amount(activity, inp)
            if amount is not None:
                return amount

        if activity in _CAMP_OR_EXPEDITION:
            return self.rate(activity.value, HOLIDAY_COMPONENT_AMOUNT)

        if activity is ActivityCode.A:
            if inp.is_work_day:
                return 0
            return self.rate(ActivityCode.A.value, HOLIDAY_FULL_DAY_AMOUNT)

        if activity is ActivityCode.B:
            if inp.is_work_day:
                return 0
            return self.rate(ActivityCode.B.value, HOLIDAY_HALF_DAY_AMOUNT)

        if activity is ActivityCode.C:
            if inp.is_half_day:
                return self.rate(ActivityCode.B.value, HOLIDAY_HALF_DAY_AMOUNT)
            return self.rate(ActivityCode.C.value, DESIGNATED_COMPETITION_AMOUNT)

        if activity is ActivityCode.D:
            return self.rate(ActivityCode.D.value, NON_DESIGNATED_COMPETITION_AMOUNT)

        if activity is ActivityCode.G:
            return self.rate(ActivityCode.G.value, TRAINING_TRIP_AMOUNT)

        return self.unlisted_amount(activity)

    def _driving_amount(self, activity: Optional[ActivityCode], inp: CalculationInput) -> Optional[int]:
        """Driving rules; None means no driving rule applies and resolution continues."""
        destination = DestinationCode.parse(inp.destination_id)

        if destination is DestinationCode.OUTSIDE:
            return self._long_distance_amount(OUTSIDE_DRIVING_AMOUNT, activity, inp)

        if destination is DestinationCode.INSIDE_LONG:
            return self._long_distance_amount(INSIDE_LONG_DRIVING_AMOUNT, activity, inp)

        if destination in _LOCAL_DESTINATIONS:
            if activity is ActivityCode.C:
                return self.rate(ActivityCode.C.value, DESIGNATED_COMPETITION_AMOUNT)

            if activity is ActivityCode.E:
                # 5100 local driving minus the 2400 holiday component on work days.
                if inp.is_work_day:
                    return LOCAL_DRIVING_AMOUNT - HOLIDAY_COMPONENT_AMOUNT
                return HOLIDAY_COMPONENT_AMOUNT

            if activity is ActivityCode.F:
                if not inp.is_work_day:
                    return self.rate(ActivityCode.F.value, HOLIDAY_COMPONENT_AMOUNT)
                if inp.is_accommodation:
                    return LOCAL_DRIVING_AMOUNT + self.rate(ActivityCode.F.value, HOLIDAY_COMPONENT_AMOUNT)
                return LOCAL_DRIVING_AMOUNT

        return None

    def _long_distance_amount(self, base: int, activity: Optional[ActivityCode], inp: CalculationInput) -> int:
        if activity is ActivityCode.E:
            # The holiday component is folded into the driving amount.
            return base - HOLIDAY_COMPONENT_AMOUNT if inp.is_work_day else base

        if activity is ActivityCode.F and inp.is_accommodation:
            return base + self.rate(ActivityCode.F.value, HOLIDAY_COMPONENT_AMOUNT)

        return base
