from __future__ import annotations

import json
import logging
import threading
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from rollshop.application.ports.record_store import RecordListener, RecordStorePort
from rollshop.application.utils.record_codec import deserialize_records, serialize_records
from rollshop.domain.entities.transaction_record import TransactionRecord
from rollshop.infrastructure.store.listeners import ListenerRegistry


class JsonRecordStore(RecordStorePort):
    def __init__(self, file_path: str = "./data/roll_records.json") -> None:
        self._file_path = Path(file_path)
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._listeners = ListenerRegistry()
        self._logger = logging.getLogger(__name__)

    def get_all(self) -> list[TransactionRecord]:
        with self._lock:
            return self._load_records()

    def replace_all(self, records: Sequence[TransactionRecord]) -> None:
        with self._lock:
            self._save_data(serialize_records(records))
        self._logger.info("Records saved", extra={"record_count": len(records)})
        self._listeners.notify(list(records))

    def append(self, record: TransactionRecord) -> None:
        with self._lock:
            records = [*self._load_records(), record]
            self._save_data(serialize_records(records))
        self._logger.info("Record appended", extra={"record_id": record.id, "record_count": len(records)})
        self._listeners.notify(records)

    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        return self._listeners.add(listener)

    def _load_records(self) -> list[TransactionRecord]:
        """Load records from the JSON file, empty if missing or unreadable."""
        if not self._file_path.exists():
            return []

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return deserialize_records(data.get("records", []) if isinstance(data, dict) else data)
        except (json.JSONDecodeError, OSError, KeyError, TypeError, ValueError) as e:
            self._logger.warning(
                "Record file unreadable, starting empty",
                extra={"reason": str(self._file_path), "error": str(e)},
            )
            return []

    def _save_data(self, items: list[dict[str, Any]]) -> None:
        """Write the collection atomically through a temp file."""
        temp_path = self._file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump({"records": items, "version": 1}, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
