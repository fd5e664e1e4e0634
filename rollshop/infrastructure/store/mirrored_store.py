from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence

from rollshop.application.exceptions import RecordStoreError
from rollshop.application.ports.record_store import RecordListener, RecordStorePort
from rollshop.domain.entities.transaction_record import TransactionRecord
from rollshop.infrastructure.store.listeners import ListenerRegistry


class MirroredRecordStore(RecordStorePort):
    """Remote primary with a local backup copy.

    Reads fall back to the backup when the primary is unreachable, and an empty
    primary is seeded from a non-empty backup. Writes always reach the backup.
    """

    def __init__(self, primary: RecordStorePort, backup: RecordStorePort) -> None:
        self._primary = primary
        self._backup = backup
        self._listeners = ListenerRegistry()
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    def get_all(self) -> list[TransactionRecord]:
        with self._lock:
            try:
                records = self._primary.get_all()
            except RecordStoreError as e:
                self._logger.warning("Primary store unavailable, using backup", extra={"error": str(e)})
                return self._backup.get_all()

            backup_records = self._backup.get_all()
            if records:
                if records != backup_records:
                    self._backup.replace_all(records)
                return records

            if backup_records:
                self._logger.info("Seeding primary store from backup", extra={"record_count": len(backup_records)})
                self._push_primary(backup_records)
            return backup_records

    def replace_all(self, records: Sequence[TransactionRecord]) -> None:
        with self._lock:
            self._backup.replace_all(records)
            self._push_primary(records)
        self._listeners.notify(list(records))

    def append(self, record: TransactionRecord) -> None:
        with self._lock:
            self.replace_all([*self.get_all(), record])

    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        return self._listeners.add(listener)

    def _push_primary(self, records: Sequence[TransactionRecord]) -> None:
        try:
            self._primary.replace_all(records)
        except RecordStoreError as e:
            self._logger.error("Primary store sync failed, kept local copy", extra={"error": str(e)})
