from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence

import httpx

from rollshop.application.exceptions import RecordStoreError
from rollshop.application.ports.record_store import RecordListener, RecordStorePort
from rollshop.application.utils.record_codec import deserialize_records, serialize_records
from rollshop.core.config import settings
from rollshop.domain.entities.transaction_record import TransactionRecord
from rollshop.infrastructure.store.listeners import ListenerRegistry


class RemoteRecordStore(RecordStorePort):
    """Keeps the whole collection as one document in a realtime-database REST endpoint."""

    def __init__(
        self,
        database_url: str | None = None,
        records_path: str | None = None,
        auth_token: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        base_url = database_url or settings.REMOTE_DATABASE_URL
        if not base_url:
            raise ValueError("REMOTE_DATABASE_URL is required for the remote record store")
        path = (records_path or settings.REMOTE_RECORDS_PATH).strip("/")
        self._url = f"{base_url.rstrip('/')}/{path}.json"
        self._auth_token = auth_token or settings.REMOTE_AUTH_TOKEN
        self._client = client or httpx.Client(timeout=timeout or settings.REMOTE_TIMEOUT_SECONDS)
        self._listeners = ListenerRegistry()
        self._append_lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def get_all(self) -> list[TransactionRecord]:
        try:
            response = self._client.get(self._url, params=self._params())
            response.raise_for_status()
            if not response.content:
                return []
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.error("Remote read failed", extra={"error": str(e)})
            raise RecordStoreError(f"Remote read failed: {e}") from e

        if not data:
            return []
        if not isinstance(data, list):
            raise RecordStoreError("Remote document is not a record list")
        try:
            records = deserialize_records(data)
        except (KeyError, TypeError, ValueError) as e:
            raise RecordStoreError(f"Remote document holds an invalid record: {e}") from e

        self._logger.info("Records loaded from remote", extra={"record_count": len(records)})
        return records

    def replace_all(self, records: Sequence[TransactionRecord]) -> None:
        try:
            response = self._client.put(self._url, params=self._params(), json=serialize_records(records))
            response.raise_for_status()
        except httpx.HTTPError as e:
            self._logger.error("Remote write failed", extra={"error": str(e), "record_count": len(records)})
            raise RecordStoreError(f"Remote write failed: {e}") from e

        self._logger.info("Records synced to remote", extra={"record_count": len(records)})
        self._listeners.notify(list(records))

    def append(self, record: TransactionRecord) -> None:
        # read-modify-write of the whole document; serialized within this process only
        with self._append_lock:
            self.replace_all([*self.get_all(), record])

    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        return self._listeners.add(listener)

    def _params(self) -> dict[str, str]:
        if self._auth_token:
            return {"auth": self._auth_token}
        return {}
