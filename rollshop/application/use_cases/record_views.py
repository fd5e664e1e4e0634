from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone, tzinfo

from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.record_view import (
    FullRecordView,
    PublicRollSummary,
    RecordView,
    Role,
    StaffRecordView,
)
from rollshop.domain.entities.transaction_record import TransactionRecord

ROLL_SEPARATOR = "、"


def filter_records_for_view(
    records: Sequence[TransactionRecord],
    role: Role,
    viewer_id: str | None = None,
    tz: tzinfo = timezone.utc,
) -> list[RecordView]:
    role = Role(role)
    if role is Role.MANAGER:
        return [FullRecordView(record=r) for r in records]
    if role is Role.STAFF:
        return [to_staff_view(r, tz) for r in records if r.staff_id == viewer_id]
    return [to_public_summary(r, tz) for r in records]


def to_staff_view(record: TransactionRecord, tz: tzinfo = timezone.utc) -> StaffRecordView:
    return StaffRecordView(
        id=record.id,
        time=_localize(record.time, tz).strftime("%Y/%m/%d %H:%M:%S"),
        customers=record.customers,
        selected_customers=record.selected_customers,
        staff_id=record.staff_id,
        service_name=record.service_name,
        amount=record.amount,
        money=record.money,
        refusal_type=record.refusal_type,
        pick_strategy=record.pick_strategy,
        winner_count=record.winner_count,
    )


def to_public_summary(record: TransactionRecord, tz: tzinfo = timezone.utc) -> PublicRollSummary:
    return PublicRollSummary(
        transaction_time=_localize(record.time, tz).strftime("%H:%M"),
        customer_rolls=_join_rolls(record.customers),
        selected=_join_rolls(record.selected_customers),
        staff_id=record.staff_id,
        service_name=record.service_name,
        amount=record.amount,
        money=record.money,
    )


def _join_rolls(rolls: Sequence[CustomerRoll]) -> str:
    return ROLL_SEPARATOR.join(c.display() for c in rolls)


def _localize(moment: datetime, tz: tzinfo) -> datetime:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz)
