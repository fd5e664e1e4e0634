from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from rollshop.application.ports.record_store import RecordListener
from rollshop.domain.entities.transaction_record import TransactionRecord


class ListenerRegistry:
    def __init__(self) -> None:
        self._listeners: list[RecordListener] = []
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def add(self, listener: RecordListener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def remove() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return remove

    def notify(self, records: list[TransactionRecord]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(list(records))
            except Exception as e:
                self._logger.exception("Record listener failed", extra={"error": str(e)})
