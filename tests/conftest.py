from __future__ import annotations

from datetime import datetime, timezone

import pytest

from rollshop.application.use_cases.transaction import create_transaction_record
from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy

FIXED_TIME = datetime(2024, 1, 26, 6, 5, 9, tzinfo=timezone.utc)


@pytest.fixture
def make_record():
    def _make(
        rolls=(("Alice", 672), ("Bob", 127)),
        staff_id="Mira",
        service_name="sketch",
        amount=1,
        money=0,
        refusal_type="none",
        pick_strategy=PickStrategy.MIN,
        winner_count=None,
        now=FIXED_TIME,
    ):
        customers = [CustomerRoll(customer_id=name, roll_value=value) for name, value in rolls]
        return create_transaction_record(
            customers,
            staff_id=staff_id,
            service_name=service_name,
            amount=amount,
            money=money,
            refusal_type=refusal_type,
            pick_strategy=pick_strategy,
            winner_count=amount if winner_count is None else winner_count,
            now=now,
        )

    return _make
