from dataclasses import dataclass


@dataclass(frozen=True)
class WinnerSummary:
    customer_id: str
    count: int
    record_ids: tuple[str, ...]
