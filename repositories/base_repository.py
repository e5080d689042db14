"""
Base repository with common in-memory CRUD helpers.
Follows Single Responsibility Principle - only handles data access.
"""

import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

from core.logger import logger
from repositories.models import utcnow

T = TypeVar("T", bound=BaseModel)

Clock = Callable[[], datetime]


def new_id() -> str:
    return str(uuid.uuid4())


class BaseRepository(Generic[T]):
    """
    Base repository backed by a dict keyed by record ID (or natural key).
    All in-memory repositories inherit from this class.
    """

    def __init__(self, collection_name: str, clock: Optional[Clock] = None):
        """
        Initialize repository.

        Args:
            collection_name: Name used in log messages
            clock: Callable returning the current timestamp
        """
        self.collection_name = collection_name
        self._records: Dict[str, T] = {}
        self._clock = clock or utcnow

    def _new_id(self) -> str:
        return new_id()

    def _now(self) -> datetime:
        return self._clock()

    def _get(self, key: str) -> Optional[T]:
        return self._records.get(key)

    def _put(self, key: str, record: T) -> T:
        self._records[key] = record
        logger.debug(f"Stored record in {self.collection_name}: {key}")
        return record

    def _values(self) -> List[T]:
        return list(self._records.values())

    def _find_one(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """
        Find first record matching predicate.

        Args:
            predicate: Filter function

        Returns:
            Record if found, None otherwise
        """
        for record in self._records.values():
            if predicate(record):
                return record
        return None

    def _find_many(self, predicate: Callable[[T], bool]) -> List[T]:
        """
        Find all records matching predicate, in insertion order.

        Args:
            predicate: Filter function

        Returns:
            List of records
        """
        return [record for record in self._records.values() if predicate(record)]

    def _merge(self, key: str, update_data: Dict[str, Any]) -> Optional[T]:
        """
        Shallow-merge update data onto a stored record.

        Args:
            key: Record key
            update_data: Field values to overwrite

        Returns:
            Updated record, None if not found
        """
        record = self._get(key)
        if record is None:
            logger.debug(f"Record not found in {self.collection_name}: {key}")
            return None

        updated = record.model_copy(update=update_data)
        return self._put(key, updated)

    def load(
        self, records: Iterable[T], key: Callable[[T], str] = lambda r: r.id
    ) -> int:
        """
        Bulk-insert prebuilt records, used when seeding a fresh store.

        Args:
            records: Records to store
            key: Function returning the storage key of a record

        Returns:
            Number of records loaded
        """
        loaded = 0
        for record in records:
            self._records[key(record)] = record
            loaded += 1
        logger.debug(f"Loaded {loaded} records into {self.collection_name}")
        return loaded

    def count(self, predicate: Optional[Callable[[T], bool]] = None) -> int:
        """
        Count records matching predicate.

        Args:
            predicate: Filter function, if None counts all records

        Returns:
            Number of records
        """
        if predicate is None:
            return len(self._records)
        return sum(1 for record in self._records.values() if predicate(record))


def patch_fields(update: BaseModel) -> Dict[str, Any]:
    """Fields explicitly set on a partial update model, ignoring None values."""
    return {
        k: v for k, v in update.model_dump(exclude_unset=True).items() if v is not None
    }
