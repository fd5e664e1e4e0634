"""
Tests for winner selection.
"""

from __future__ import annotations

import random

from rollshop.application.use_cases.selection import pick_customers_by_roll
from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy


def _rolls(*pairs: tuple[str, int]) -> list[CustomerRoll]:
    return [CustomerRoll(customer_id=name, roll_value=value) for name, value in pairs]


def test_tie_keeps_input_order():
    rolls = _rolls(("A", 50), ("B", 90), ("C", 90))
    assert pick_customers_by_roll(rolls, PickStrategy.MAX, 1) == _rolls(("B", 90))


def test_min_strategy_orders_ascending():
    rolls = _rolls(("A", 50), ("B", 3), ("C", 3), ("D", 70))
    assert pick_customers_by_roll(rolls, PickStrategy.MIN, 3) == _rolls(("B", 3), ("C", 3), ("A", 50))


def test_empty_input_or_non_positive_count():
    assert pick_customers_by_roll([], PickStrategy.MAX, 3) == []
    assert pick_customers_by_roll(_rolls(("A", 1)), PickStrategy.MAX, 0) == []
    assert pick_customers_by_roll(_rolls(("A", 1)), PickStrategy.MIN, -2) == []


def test_count_larger_than_rolls_returns_all():
    rolls = _rolls(("A", 1), ("B", 2))
    assert pick_customers_by_roll(rolls, PickStrategy.MAX, 5) == _rolls(("B", 2), ("A", 1))


def test_input_is_not_mutated():
    rolls = _rolls(("A", 1), ("B", 2))
    pick_customers_by_roll(rolls, PickStrategy.MAX, 1)
    assert rolls == _rolls(("A", 1), ("B", 2))


def test_subset_and_monotonicity():
    rng = random.Random(7)
    for _ in range(50):
        rolls = _rolls(*((f"c{i}", rng.randint(0, 20)) for i in range(rng.randint(1, 12))))
        count = rng.randint(1, 15)
        for strategy in PickStrategy:
            selected = pick_customers_by_roll(rolls, strategy, count)
            assert len(selected) == min(count, len(rolls))
            assert all(s in rolls for s in selected)
            rest = list(rolls)
            for s in selected:
                rest.remove(s)
            for s in selected:
                for other in rest:
                    if strategy is PickStrategy.MAX:
                        assert s.roll_value >= other.roll_value
                    else:
                        assert s.roll_value <= other.roll_value
