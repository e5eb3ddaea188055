import asyncio
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from pydantic.alias_generators import to_camel

from app.core.exceptions import ConflictError, NotFoundError, RecordValidationError
from app.core.logger import logger
from app.services.references import resolve_reference
from app.storage import Record, Storage


class Reference(NamedTuple):
    field: str
    collection: str


class Dependent(NamedTuple):
    collection: str
    field: str
    message: str


def is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class EntityService:
    """
    CRUD over one collection with foreign key and delete-restriction checks.

    Subclasses describe the entity: its collection, required fields,
    outgoing references and the collections whose records point back at it.
    Every mutation runs its checks and the write under the shared store lock,
    so a reference cannot vanish between being resolved and being stored.
    """

    collection: str
    entity_name: str
    required_fields: Tuple[str, ...] = ()
    defaults: Dict[str, Any] = {}
    references: Tuple[Reference, ...] = ()
    dependents: Tuple[Dependent, ...] = ()

    def __init__(self, storage: Storage, lock: asyncio.Lock):
        self.storage = storage
        self._lock = lock

    @property
    def tag(self) -> str:
        return self.entity_name.upper()

    @property
    def not_found_message(self) -> str:
        return f"{self.entity_name} not found"

    def validate_fields(self, fields: Dict[str, Any]) -> None:
        """Entity specific value checks, run on create and on update."""

    async def list(self) -> List[Record]:
        records = await self.storage.list(self.collection)
        logger.info(f"[LIST {self.tag}] Fetched {len(records)} records")
        return records

    async def get(self, record_id: Optional[int]) -> Record:
        """
        Fetch a record by id.

        Args:
            record_id: Record id, None when the raw id could not be parsed

        Returns:
            Record: The stored record

        Raises:
            NotFoundError: No record with this id
        """
        record = await self.storage.get(self.collection, record_id) if record_id is not None else None

        if record is None:
            logger.warning(f"[GET {self.tag}] {self.entity_name} not found: ID {record_id}")
            raise NotFoundError(self.not_found_message)

        return record

    async def _check_references(self, fields: Dict[str, Any]) -> None:
        for reference in self.references:
            if reference.field in fields:
                await resolve_reference(self.storage, reference.collection, fields[reference.field], reference.field)

    async def create(self, fields: Dict[str, Any]) -> Record:
        """
        Create a record after checking required fields and references.

        Args:
            fields: Field values keyed by snake_case name

        Returns:
            Record: The created record with its assigned id

        Raises:
            RecordValidationError: Missing required field, invalid value or unresolved reference
            StorageError: The storage failed to persist the record
        """
        missing = [field for field in self.required_fields if is_missing(fields.get(field))]
        if missing:
            logger.warning(f"[CREATE {self.tag}] Missing required fields: {', '.join(missing)}")
            raise RecordValidationError(
                f"Missing required fields: {', '.join(to_camel(field) for field in missing)}"
            )

        values = {**self.defaults, **{key: value for key, value in fields.items() if value is not None}}
        self.validate_fields(values)

        async with self._lock:
            await self._check_references(values)
            record = await self.storage.insert(self.collection, values)

        logger.info(f"[CREATE {self.tag}] Created {self.entity_name.lower()} ID {record['id']}")
        return record

    async def update(self, record_id: Optional[int], fields: Dict[str, Any]) -> Record:
        """
        Apply a partial update; only the supplied fields change.

        Args:
            record_id: Record id
            fields: Fields to change, keyed by snake_case name

        Returns:
            Record: The full updated record

        Raises:
            NotFoundError: No record with this id
            RecordValidationError: Empty update, cleared required field or unresolved reference
        """
        async with self._lock:
            await self.get(record_id)

            if not fields:
                logger.warning(f"[UPDATE {self.tag}] Empty update for ID {record_id}")
                raise RecordValidationError("No fields provided for update")

            cleared = [field for field in self.required_fields if field in fields and is_missing(fields[field])]
            if cleared:
                raise RecordValidationError(f"Invalid {to_camel(cleared[0])}: value is required")

            self.validate_fields(fields)
            await self._check_references(fields)
            record = await self.storage.update(self.collection, record_id, fields)

        if record is None:
            raise NotFoundError(self.not_found_message)

        logger.info(f"[UPDATE {self.tag}] Updated {self.entity_name.lower()} ID {record_id}: {', '.join(fields)}")
        return record

    async def delete(self, record_id: Optional[int]) -> Record:
        """
        Delete a record unless other records still reference it.

        Args:
            record_id: Record id

        Returns:
            Record: The deleted record

        Raises:
            NotFoundError: No record with this id
            ConflictError: A dependent record references this one
        """
        async with self._lock:
            await self.get(record_id)

            for dependent in self.dependents:
                if await self.storage.find(dependent.collection, dependent.field, record_id):
                    logger.warning(
                        f"[DELETE {self.tag}] Blocked for ID {record_id}: "
                        f"referenced from {dependent.collection}.{dependent.field}"
                    )
                    raise ConflictError(dependent.message)

            record = await self.storage.delete(self.collection, record_id)

        if record is None:
            raise NotFoundError(self.not_found_message)

        logger.info(f"[DELETE {self.tag}] Deleted {self.entity_name.lower()} ID {record_id}")
        return record
