from __future__ import annotations

import logging
from typing import Any

from rollshop.application.ports.record_store import RecordStorePort
from rollshop.application.utils.record_codec import build_backup, parse_backup


class ExportRecordsUseCase:
    def __init__(self, store: RecordStorePort) -> None:
        self._store = store

    def execute(self) -> dict[str, Any]:
        return build_backup(self._store.get_all())


class ImportRecordsUseCase:
    """Replace the whole collection with the records of a backup file."""

    def __init__(self, store: RecordStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def execute(self, payload: Any) -> int:
        records = parse_backup(payload)
        self._store.replace_all(records)
        self._logger.info("Records imported", extra={"record_count": len(records)})
        return len(records)
