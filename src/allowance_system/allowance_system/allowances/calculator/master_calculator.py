from __future__ import annotations

from typing import Iterable, Optional, Union

from ..model import AmountMaster, MasterRecord
from .base import AllowanceCalculator


class MasterAllowanceCalculator(AllowanceCalculator):
    """Master-aware rule: configured base amounts override the defaults.

    A code that is missing from the master, or configured as 0, keeps its
    default. There is no OTHER rate here; unlisted activities are worth 0.
    """

    def __init__(self, master: Optional[Union[AmountMaster, Iterable[MasterRecord]]] = None):
        if isinstance(master, AmountMaster):
            self._master = master
        else:
            self._master = AmountMaster(master or ())

    @property
    def master(self) -> AmountMaster:
        return self._master

    def rate(self, code: str, default: int) -> int:
        amount = self._master.amount_for(code)
        return amount if amount > 0 else default
