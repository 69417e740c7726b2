"""
Shared load/save behaviour for the persisted collections.

A store owns one key in the key-value storage. Every mutation is a complete
read-modify-write: load the current collection, change a copy, write the
whole collection back in one call, and return a fresh snapshot.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Callable, Generic, Optional, TypeVar

from models import LoadResult, RecoveryResult
from utils import get_logger, log_operation
from .serialization import decode
from .exceptions import CodecError
from .storage_service import KeyValueStorage, get_storage_service

logger = get_logger(__name__)

T = TypeVar("T")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CollectionStore(ABC, Generic[T]):
    """
    Base class for the Favorites and Shopping List stores.
    Subclasses supply the empty value, the validator, the encoder and the
    snapshot copy for their collection type.
    """

    collection_name = "collection"
    reset_note = "Stored data could not be read and was reset. A backup copy of it was kept."

    def __init__(self, storage: Optional[KeyValueStorage] = None, key: str = "",
                 clock: Optional[Clock] = None):
        self.storage = storage or get_storage_service()
        self.key = key
        self.clock = clock or utc_now

    # Hooks for subclasses

    @abstractmethod
    def _empty(self) -> T:
        """Value used when nothing usable is stored"""

    @abstractmethod
    def _validate(self, raw: Any) -> RecoveryResult[T]:
        """Recover a valid collection from decoded JSON"""

    @abstractmethod
    def _encode(self, collection: T) -> str:
        """Complete JSON text for the collection"""

    @abstractmethod
    def _snapshot(self, collection: T) -> T:
        """Independent deep copy handed back to callers"""

    # Load / save

    def load(self) -> LoadResult[T]:
        """
        Read the collection from storage.

        Missing data gives an empty collection. Unreadable or malformed data
        is recovered, written back once, and described in the returned note.
        Only storage failures raise.
        """
        raw_text = self.storage.get(self.key)
        if raw_text is None:
            return LoadResult(collection=self._empty())

        try:
            raw = decode(raw_text)
        except CodecError as e:
            return self._reset_unreadable(raw_text, e)

        result = self._validate(raw)
        if result.needs_healing:
            logger.warning(f"Healing stored {self.collection_name}: {result.note or 'repaired fields'}")
            self.save(result.value)

        return LoadResult(collection=self._snapshot(result.value), note=result.note)

    def _reset_unreadable(self, raw_text: str, error: CodecError) -> LoadResult[T]:
        backup_key = f"{self.key}_corrupted_{int(self.clock().timestamp() * 1000)}"
        with log_operation(logger, f"Resetting unreadable {self.collection_name}") as op:
            op.error(f"{error}; keeping a copy under '{backup_key}'")
            self.storage.set(backup_key, raw_text)
            empty = self._empty()
            self.save(empty)
        return LoadResult(collection=empty, note=self.reset_note)

    def save(self, collection: T) -> None:
        """Overwrite the stored collection with a complete serialized copy"""
        # A failed encode must leave the stored value intact
        text = self._encode(collection)
        self.storage.set(self.key, text)

    def _current(self) -> T:
        """Current collection for a read-modify-write"""
        return self.load().collection

    def _commit(self, collection: T) -> T:
        self.save(collection)
        return self._snapshot(collection)
