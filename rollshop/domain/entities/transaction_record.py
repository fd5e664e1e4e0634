from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy

NO_REFUSAL = "none"
UNFILLED = "unfilled"


@dataclass(frozen=True)
class TransactionRecord:
    id: str
    time: datetime
    customers: tuple[CustomerRoll, ...]
    selected_customers: tuple[CustomerRoll, ...]  # sorted, truncated subset of customers
    staff_id: str
    service_name: str
    amount: int  # slot count
    money: int
    refusal_type: str = NO_REFUSAL
    pick_strategy: PickStrategy = PickStrategy.MAX
    winner_count: int = 1

    @property
    def selected_customer(self) -> CustomerRoll | None:
        """First winner, kept for single-winner consumers."""
        return self.selected_customers[0] if self.selected_customers else None
