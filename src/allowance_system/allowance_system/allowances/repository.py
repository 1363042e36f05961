from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AllowanceEntry, AmountMasterEntry


class AllowanceTypeRepository(Protocol):
    def list_all(self) -> Sequence[AmountMasterEntry]:
        raise NotImplementedError

    def get_by_code(self, code: str) -> Optional[AmountMasterEntry]:
        raise NotImplementedError

    def update_base_amount(self, *, code: str, base_amount: int) -> bool:
        raise NotImplementedError


class AllowanceRepository(Protocol):
    def replace_for_date(self, entry: AllowanceEntry) -> int:
        """Delete the user's entry for the date (if any) and insert this one."""

        raise NotImplementedError

    def delete_for_date(self, *, user_id: str, work_date: date) -> bool:
        raise NotImplementedError

    def list_for_period(self, *, user_id: str, start_date: date, end_date: date) -> Sequence[AllowanceEntry]:
        raise NotImplementedError
