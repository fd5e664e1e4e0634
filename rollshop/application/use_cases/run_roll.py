from __future__ import annotations

import logging
from dataclasses import dataclass

from rollshop.application.exceptions import InvalidSlotCountError, NoRollsRecognizedError
from rollshop.application.ports.record_store import RecordStorePort
from rollshop.application.use_cases.result_message import render_roll_result_message
from rollshop.application.use_cases.transaction import create_transaction_record
from rollshop.application.utils.roll_parser import parse_customer_rolls
from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.domain.entities.transaction_record import NO_REFUSAL, TransactionRecord


@dataclass(frozen=True)
class RollOutcome:
    record: TransactionRecord
    message: str


class RunRollUseCase:
    """Parse a pasted chat log, pick winners and append the round to the store."""

    def __init__(self, store: RecordStorePort, default_language: str = "en") -> None:
        self._store = store
        self._default_language = default_language
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        text: str,
        staff_id: str,
        service_name: str,
        slots: int,
        pick_strategy: PickStrategy,
        money: int = 0,
        refusal_type: str = NO_REFUSAL,
        language: str | None = None,
    ) -> RollOutcome:
        customers = parse_customer_rolls(text)
        if not customers:
            raise NoRollsRecognizedError("No valid roll results were recognized. Check the chat log format.")
        if slots <= 0:
            raise InvalidSlotCountError("Slot count must be greater than 0.")

        record = create_transaction_record(
            customers,
            staff_id=staff_id,
            service_name=service_name,
            amount=slots,
            money=money,
            refusal_type=refusal_type,
            pick_strategy=pick_strategy,
            winner_count=slots,
        )
        self._store.append(record)

        self._logger.info(
            "Roll recorded",
            extra={"record_id": record.id, "staff_id": record.staff_id, "service": record.service_name},
        )
        message = render_roll_result_message(record, language or self._default_language)
        return RollOutcome(record=record, message=message)
