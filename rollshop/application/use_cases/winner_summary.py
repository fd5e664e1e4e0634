from __future__ import annotations

from collections.abc import Iterable

from rollshop.domain.entities.transaction_record import TransactionRecord
from rollshop.domain.entities.winner_summary import WinnerSummary


def summarize_winners(records: Iterable[TransactionRecord]) -> list[WinnerSummary]:
    """How often each customer has been selected, most frequent first."""
    won: dict[str, list[str]] = {}
    for record in records:
        for customer in record.selected_customers:
            won.setdefault(customer.customer_id, []).append(record.id)
    summaries = [
        WinnerSummary(customer_id=customer_id, count=len(ids), record_ids=tuple(ids))
        for customer_id, ids in won.items()
    ]
    return sorted(summaries, key=lambda s: -s.count)
