from typing import Any, Dict, List, Optional

from app.core.exceptions import StorageError
from app.storage.base import COLLECTIONS, Record, Storage


class MemoryStorage(Storage):
    """Collections kept in process memory, keyed by id."""

    name = "memory"

    def __init__(self):
        self._collections: Dict[str, Dict[int, Record]] = {collection: {} for collection in COLLECTIONS}
        self._next_ids: Dict[str, int] = {collection: 1 for collection in COLLECTIONS}

    def _records(self, collection: str) -> Dict[int, Record]:
        try:
            return self._collections[collection]
        except KeyError as e:
            raise StorageError(f"Unknown collection: {collection}") from e

    def _load_collection(self, collection: str, records: List[Record]) -> None:
        self._collections[collection] = {record["id"]: record for record in records}
        self._next_ids[collection] = max(self._collections[collection], default=0) + 1

    async def _persist(self, collection: str, records: Dict[int, Record]) -> None:
        """Hook called with the new state of a collection before it replaces the current one."""

    async def _commit(self, collection: str, records: Dict[int, Record]) -> None:
        await self._persist(collection, records)
        self._collections[collection] = records

    async def list(self, collection: str) -> List[Record]:
        records = self._records(collection)
        return [dict(records[record_id]) for record_id in sorted(records)]

    async def get(self, collection: str, record_id: int) -> Optional[Record]:
        record = self._records(collection).get(record_id)
        return dict(record) if record is not None else None

    async def find(self, collection: str, field: str, value: Any) -> List[Record]:
        return [record for record in await self.list(collection) if record.get(field) == value]

    async def insert(self, collection: str, fields: Record) -> Record:
        records = self._records(collection)
        record_id = self._next_ids[collection]
        record = {**fields, "id": record_id}

        await self._commit(collection, {**records, record_id: record})
        self._next_ids[collection] = record_id + 1
        return dict(record)

    async def update(self, collection: str, record_id: int, fields: Record) -> Optional[Record]:
        records = self._records(collection)
        if record_id not in records:
            return None

        record = {**records[record_id], **fields, "id": record_id}
        await self._commit(collection, {**records, record_id: record})
        return dict(record)

    async def delete(self, collection: str, record_id: int) -> Optional[Record]:
        records = self._records(collection)
        if record_id not in records:
            return None

        remaining = dict(records)
        record = remaining.pop(record_id)
        await self._commit(collection, remaining)
        return record
