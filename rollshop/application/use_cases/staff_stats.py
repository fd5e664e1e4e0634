from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from rollshop.domain.entities.staff_stat import StaffStat
from rollshop.domain.entities.transaction_record import NO_REFUSAL, TransactionRecord

EXPORT_HEADER = (
    "Staff ID",
    "Service",
    "Slots",
    "Transactions",
    "Total Money",
    "Refusal Types",
    "Salary",
)

Cell = str | int


def aggregate_staff_stats(records: Iterable[TransactionRecord], salary_rate: float = 0.5) -> list[StaffStat]:
    """Fold records into one entry per (staff, service), in first-seen order."""
    stats: dict[tuple[str, str], StaffStat] = {}
    for record in records:
        key = (record.staff_id, record.service_name)
        stat = stats.get(key)
        if stat is None:
            stat = StaffStat(staff_id=record.staff_id, service_name=record.service_name)
            stats[key] = stat
        stat.total_count += record.amount
        stat.transaction_count += 1
        stat.total_money += record.money
        stat.refusal_summary[record.refusal_type] = stat.refusal_summary.get(record.refusal_type, 0) + 1
        # rounded per record, not on the total
        stat.salary += _round_half_up(record.money * salary_rate)
    return list(stats.values())


def build_staff_export_table(stats: Sequence[StaffStat]) -> list[list[Cell]]:
    table: list[list[Cell]] = [list(EXPORT_HEADER)]
    total_count = total_transactions = total_money = total_salary = 0
    for stat in stats:
        table.append(
            [
                stat.staff_id,
                stat.service_name,
                stat.total_count,
                stat.transaction_count,
                stat.total_money,
                _refusal_text(stat.refusal_summary),
                stat.salary,
            ]
        )
        total_count += stat.total_count
        total_transactions += stat.transaction_count
        total_money += stat.total_money
        total_salary += stat.salary
    table.append(["Total", "-", total_count, total_transactions, total_money, "-", total_salary])
    return table


def _refusal_text(summary: dict[str, int]) -> str:
    parts = [f"{label} ({count})" for label, count in summary.items() if label != NO_REFUSAL]
    return ", ".join(parts) or "no refusals"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
