from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from rollshop.domain.entities.customer_roll import CustomerRoll
from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.domain.entities.record_view import FullRecordView, PublicRollSummary, RecordView, StaffRecordView
from rollshop.domain.entities.staff_stat import StaffStat
from rollshop.domain.entities.transaction_record import NO_REFUSAL, TransactionRecord
from rollshop.domain.entities.winner_summary import WinnerSummary


class CustomerRollSchema(BaseModel):
    customer_id: str
    roll_value: int

    @staticmethod
    def from_entity(roll: CustomerRoll) -> "CustomerRollSchema":
        return CustomerRollSchema(customer_id=roll.customer_id, roll_value=roll.roll_value)


def _rolls(rolls: tuple[CustomerRoll, ...]) -> list[CustomerRollSchema]:
    return [CustomerRollSchema.from_entity(r) for r in rolls]


class TransactionRecordSchema(BaseModel):
    id: str
    time: datetime
    customers: list[CustomerRollSchema]
    selected_customers: list[CustomerRollSchema]
    selected_customer: CustomerRollSchema | None = None
    staff_id: str
    service_name: str
    amount: int
    money: int
    refusal_type: str
    pick_strategy: PickStrategy
    winner_count: int

    @staticmethod
    def from_entity(record: TransactionRecord) -> "TransactionRecordSchema":
        first = record.selected_customer
        return TransactionRecordSchema(
            id=record.id,
            time=record.time,
            customers=_rolls(record.customers),
            selected_customers=_rolls(record.selected_customers),
            selected_customer=CustomerRollSchema.from_entity(first) if first else None,
            staff_id=record.staff_id,
            service_name=record.service_name,
            amount=record.amount,
            money=record.money,
            refusal_type=record.refusal_type,
            pick_strategy=record.pick_strategy,
            winner_count=record.winner_count,
        )


class ParseRequestSchema(BaseModel):
    text: str


class ParseResponseSchema(BaseModel):
    rolls: list[CustomerRollSchema]


class RunRollRequestSchema(BaseModel):
    text: str
    staff_id: str = ""
    service_name: str = ""
    slots: int = 1
    pick_strategy: PickStrategy | None = None
    money: int = Field(default=0, ge=0)
    refusal_type: str = NO_REFUSAL
    language: Literal["en", "zh"] | None = None


class RunRollResponseSchema(BaseModel):
    record: TransactionRecordSchema
    message: str


class AnnouncementRequestSchema(BaseModel):
    staff_id: str = ""
    service_name: str = ""
    price_info: str = ""
    slots: int = 1
    pick_strategy: PickStrategy | None = None
    language: Literal["en", "zh"] | None = None


class AnnouncementResponseSchema(BaseModel):
    text: str


class FullRecordViewSchema(BaseModel):
    kind: Literal["manager"] = "manager"
    record: TransactionRecordSchema


class StaffRecordViewSchema(BaseModel):
    kind: Literal["staff"] = "staff"
    id: str
    time: str
    customers: list[CustomerRollSchema]
    selected_customers: list[CustomerRollSchema]
    selected_customer: CustomerRollSchema | None = None
    staff_id: str
    service_name: str
    amount: int
    money: int
    refusal_type: str
    pick_strategy: PickStrategy
    winner_count: int


class PublicRollSummarySchema(BaseModel):
    kind: Literal["guest"] = "guest"
    transaction_time: str
    customer_rolls: str
    selected: str
    staff_id: str
    service_name: str
    amount: int
    money: int


RecordViewSchema = Annotated[
    Union[FullRecordViewSchema, StaffRecordViewSchema, PublicRollSummarySchema],
    Field(discriminator="kind"),
]


def record_view_schema(view: RecordView) -> FullRecordViewSchema | StaffRecordViewSchema | PublicRollSummarySchema:
    if isinstance(view, FullRecordView):
        return FullRecordViewSchema(record=TransactionRecordSchema.from_entity(view.record))
    if isinstance(view, StaffRecordView):
        first = view.selected_customer
        return StaffRecordViewSchema(
            id=view.id,
            time=view.time,
            customers=_rolls(view.customers),
            selected_customers=_rolls(view.selected_customers),
            selected_customer=CustomerRollSchema.from_entity(first) if first else None,
            staff_id=view.staff_id,
            service_name=view.service_name,
            amount=view.amount,
            money=view.money,
            refusal_type=view.refusal_type,
            pick_strategy=view.pick_strategy,
            winner_count=view.winner_count,
        )
    if isinstance(view, PublicRollSummary):
        return PublicRollSummarySchema(
            transaction_time=view.transaction_time,
            customer_rolls=view.customer_rolls,
            selected=view.selected,
            staff_id=view.staff_id,
            service_name=view.service_name,
            amount=view.amount,
            money=view.money,
        )
    raise TypeError(f"Unknown record view: {type(view).__name__}")


class RecordsResponseSchema(BaseModel):
    items: list[RecordViewSchema]


class StaffStatSchema(BaseModel):
    staff_id: str
    service_name: str
    total_count: int
    transaction_count: int
    total_money: int
    refusal_summary: dict[str, int] = Field(default_factory=dict)
    salary: int

    @staticmethod
    def from_entity(stat: StaffStat) -> "StaffStatSchema":
        return StaffStatSchema(
            staff_id=stat.staff_id,
            service_name=stat.service_name,
            total_count=stat.total_count,
            transaction_count=stat.transaction_count,
            total_money=stat.total_money,
            refusal_summary=dict(stat.refusal_summary),
            salary=stat.salary,
        )


class WinnerSummarySchema(BaseModel):
    customer_id: str
    count: int
    record_ids: list[str]

    @staticmethod
    def from_entity(summary: WinnerSummary) -> "WinnerSummarySchema":
        return WinnerSummarySchema(
            customer_id=summary.customer_id,
            count=summary.count,
            record_ids=list(summary.record_ids),
        )


class PresetsResponseSchema(BaseModel):
    services: list[str]
    refusal_types: list[str]


class ImportResponseSchema(BaseModel):
    imported: int
