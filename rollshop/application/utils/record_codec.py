from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from rollshop.application.exceptions import RecordImportError
from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.domain.entities.transaction_record import NO_REFUSAL, TransactionRecord

BACKUP_VERSION = "1.0"


def serialize_roll(roll: CustomerRoll) -> dict[str, Any]:
    return {"customerId": roll.customer_id, "rollValue": roll.roll_value}


def deserialize_roll(data: dict[str, Any]) -> CustomerRoll:
    return CustomerRoll(customer_id=str(data["customerId"]), roll_value=int(data["rollValue"]))


def serialize_record(record: TransactionRecord) -> dict[str, Any]:
    first = record.selected_customer
    return {
        "id": record.id,
        "time": record.time.isoformat(),
        "customers": [serialize_roll(c) for c in record.customers],
        "selectedCustomers": [serialize_roll(c) for c in record.selected_customers],
        "selectedCustomer": serialize_roll(first) if first else None,
        "staffId": record.staff_id,
        "serviceName": record.service_name,
        "amount": record.amount,
        "money": record.money,
        "refusalType": record.refusal_type,
        "pickStrategy": record.pick_strategy.value,
        "winnerCount": record.winner_count,
    }


def deserialize_record(data: dict[str, Any]) -> TransactionRecord:
    """Rebuild a record; ``selectedCustomer`` is derived and ignored on input."""
    return TransactionRecord(
        id=str(data["id"]),
        time=_parse_time(data["time"]),
        customers=tuple(deserialize_roll(c) for c in data.get("customers") or []),
        selected_customers=tuple(deserialize_roll(c) for c in data.get("selectedCustomers") or []),
        staff_id=str(data.get("staffId", "")),
        service_name=str(data.get("serviceName", "")),
        amount=int(data.get("amount", 0)),
        money=int(data.get("money", 0)),
        refusal_type=str(data.get("refusalType") or NO_REFUSAL),
        pick_strategy=PickStrategy(data.get("pickStrategy", PickStrategy.MAX.value)),
        winner_count=int(data.get("winnerCount", 1)),
    )


def serialize_records(records: Sequence[TransactionRecord]) -> list[dict[str, Any]]:
    return [serialize_record(r) for r in records]


def deserialize_records(items: Sequence[dict[str, Any]]) -> list[TransactionRecord]:
    return [deserialize_record(item) for item in items]


def build_backup(records: Sequence[TransactionRecord], now: datetime | None = None) -> dict[str, Any]:
    export_time = now or datetime.now(timezone.utc)
    return {
        "records": serialize_records(records),
        "exportTime": export_time.isoformat(),
        "version": BACKUP_VERSION,
    }


def parse_backup(payload: Any) -> list[TransactionRecord]:
    """Accept a backup envelope or a bare list of records."""
    if isinstance(payload, dict) and isinstance(payload.get("records"), list):
        items = payload["records"]
    elif isinstance(payload, list):
        items = payload
    else:
        raise RecordImportError("Invalid backup format")

    try:
        records = deserialize_records(items)
    except (KeyError, TypeError, ValueError) as e:
        raise RecordImportError(f"Invalid record in backup: {e}") from e

    if not records:
        raise RecordImportError("Backup holds no records")
    return records


def _parse_time(value: Any) -> datetime:
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
