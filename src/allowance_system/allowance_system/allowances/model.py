from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional, Union


@dataclass(frozen=True)
class CalculationInput:
    """Input tuple of the rule engine (not persisted)."""

    activity_id: str
    is_driving: bool
    destination_id: str
    is_work_day: bool
    is_accommodation: bool = False
    # Only meaningful for the designated competition (C).
    is_half_day: bool = False


@dataclass(frozen=True)
class AmountMasterEntry:
    """Administrator-configured base amount for one activity code (allowance_types)."""

    code: str
    base_amount: int
    display_name: Optional[str] = None
    requires_holiday: bool = False


MasterRecord = Union[AmountMasterEntry, Mapping[str, Any]]


class AmountMaster:
    """Immutable snapshot of the amount master used for a single calculation."""

    def __init__(self, entries: Iterable[MasterRecord] = ()):
        self._entries = tuple(self._coerce(e) for e in entries)

    @staticmethod
    def _coerce(record: MasterRecord) -> AmountMasterEntry:
        if isinstance(record, AmountMasterEntry):
            return record
        return AmountMasterEntry(code=str(record.get("code")), base_amount=int(record.get("base_amount") or 0))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def amount_for(self, code: str) -> int:
        """First entry with this code, 0 when absent or unset."""
        for entry in self._entries:
            if entry.code == code:
                return int(entry.base_amount or 0)
        return 0


@dataclass(frozen=True)
class AllowanceEntry:
    """Domain entity: one recorded stipend for a user on a date."""

    user_id: str
    work_date: date
    activity_id: str
    destination_id: str
    is_driving: bool
    is_accommodation: bool
    amount: int
    destination_detail: str = ""
    entry_id: Optional[int] = None
