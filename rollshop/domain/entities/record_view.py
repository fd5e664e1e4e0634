from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.domain.entities.transaction_record import TransactionRecord


class Role(str, Enum):
    MANAGER = "manager"
    STAFF = "staff"
    GUEST = "guest"


@dataclass(frozen=True)
class FullRecordView:
    record: TransactionRecord
    kind: Literal["manager"] = "manager"


@dataclass(frozen=True)
class StaffRecordView:
    id: str
    time: str  # display string in the business timezone
    customers: tuple[CustomerRoll, ...]
    selected_customers: tuple[CustomerRoll, ...]
    staff_id: str
    service_name: str
    amount: int
    money: int
    refusal_type: str
    pick_strategy: PickStrategy
    winner_count: int
    kind: Literal["staff"] = "staff"

    @property
    def selected_customer(self) -> CustomerRoll | None:
        return self.selected_customers[0] if self.selected_customers else None


@dataclass(frozen=True)
class PublicRollSummary:
    transaction_time: str
    customer_rolls: str
    selected: str
    staff_id: str
    service_name: str
    amount: int
    money: int
    kind: Literal["guest"] = "guest"


RecordView = Union[FullRecordView, StaffRecordView, PublicRollSummary]
