from __future__ import annotations

from collections.abc import Sequence

from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy


def pick_customers_by_roll(
    customers: Sequence[CustomerRoll],
    pick: PickStrategy,
    winner_count: int,
) -> list[CustomerRoll]:
    """Rank rolls by the strategy and keep the first ``winner_count``.

    The sort is stable, so among equal values the earlier roll wins.
    """
    if not customers or winner_count <= 0:
        return []
    if PickStrategy(pick) is PickStrategy.MAX:
        ranked = sorted(customers, key=lambda c: -c.roll_value)
    else:
        ranked = sorted(customers, key=lambda c: c.roll_value)
    return ranked[:winner_count]
