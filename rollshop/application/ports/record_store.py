from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from rollshop.domain.entities.transaction_record import TransactionRecord

RecordListener = Callable[[list[TransactionRecord]], None]


class RecordStorePort(ABC):
    @abstractmethod
    def get_all(self) -> list[TransactionRecord]:
        raise NotImplementedError

    @abstractmethod
    def replace_all(self, records: Sequence[TransactionRecord]) -> None:
        raise NotImplementedError

    @abstractmethod
    def append(self, record: TransactionRecord) -> None:
        """Add one record to the end of the collection as a single step."""
        raise NotImplementedError

    @abstractmethod
    def subscribe(self, listener: RecordListener) -> Callable[[], None]:
        """
        Register a listener called with the full collection after each replace.
        Returns a callable that removes the listener.
        """
        raise NotImplementedError
