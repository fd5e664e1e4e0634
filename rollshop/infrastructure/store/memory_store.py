from __future__ import annotations

import threading
from collections.abc import Callable, Sequence

from rollshop.application.ports.record_store import RecordListener, RecordStorePort
from rollshop.domain.entities.transaction_record import TransactionRecord
from rollshop.infrastructure.store.listeners import ListenerRegistry


class MemoryRecordStore(RecordStorePort):
    def __init__(self, records: Sequence[TransactionRecord] | None = None) -> None:
        self._records: list[TransactionRecord] = list(records or [])
        self._lock = threading.Lock()
        self._listeners = ListenerRegistry()

    def get_all(self) -> list[TransactionRecord]:
        with self._lock:
            return list(self._records)

    def replace_all(self, records: Sequence[TransactionRecord]) -> None:
        with self._lock:
            self._records = list(records)
            snapshot = list(self._records)
        self._listeners.notify(snapshot)

    def append(self, record: TransactionRecord) -> None:
        with self._lock:
            self._records.append(record)
            snapshot = list(self._records)
        self._listeners.notify(snapshot)

    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        return self._listeners.add(listener)
