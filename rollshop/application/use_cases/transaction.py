from __future__ import annotations

import secrets
import time
from collections.abc import Sequence
from datetime import datetime, timezone

from rollshop.application.use_cases.selection import pick_customers_by_roll
from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.domain.entities.transaction_record import NO_REFUSAL, UNFILLED, TransactionRecord

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_record_id() -> str:
    suffix = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"T-{time.time_ns() // 1_000_000}-{suffix}"


def create_transaction_record(
    customers: Sequence[CustomerRoll],
    staff_id: str,
    service_name: str,
    amount: int,
    money: int,
    refusal_type: str = NO_REFUSAL,
    pick_strategy: PickStrategy = PickStrategy.MAX,
    winner_count: int = 1,
    now: datetime | None = None,
) -> TransactionRecord:
    """Build an immutable record for one raffle round.

    Slot counts are not checked here; callers reject non-positive values first.
    """
    strategy = PickStrategy(pick_strategy)
    selected = pick_customers_by_roll(customers, strategy, winner_count)
    return TransactionRecord(
        id=generate_record_id(),
        time=now or datetime.now(timezone.utc),
        customers=tuple(customers),
        selected_customers=tuple(selected),
        staff_id=(staff_id or "").strip() or UNFILLED,
        service_name=(service_name or "").strip() or UNFILLED,
        amount=amount,
        money=money,
        refusal_type=refusal_type,
        pick_strategy=strategy,
        winner_count=winner_count,
    )
