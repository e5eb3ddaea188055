from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Record = Dict[str, Any]

TEACHERS = "teachers"
COURSES = "courses"
STUDENTS = "students"
TESTS = "tests"

COLLECTIONS = (TEACHERS, COURSES, STUDENTS, TESTS)


class Storage(ABC):
    """
    Storage of the academic record collections.

    Records are plain dicts with snake_case keys and an integer ``id``
    assigned by the storage on insert. Every method returns copies, so
    callers may mutate what they receive.
    """

    name: str = "abstract"

    async def init(self) -> None:
        """Open connections or load persisted state."""

    async def close(self) -> None:
        """Release whatever ``init`` acquired."""

    @abstractmethod
    async def list(self, collection: str) -> List[Record]:
        """All records of a collection, ordered by id."""

    @abstractmethod
    async def get(self, collection: str, record_id: int) -> Optional[Record]:
        ...

    @abstractmethod
    async def find(self, collection: str, field: str, value: Any) -> List[Record]:
        """Records whose ``field`` equals ``value``, ordered by id."""

    @abstractmethod
    async def insert(self, collection: str, fields: Record) -> Record:
        ...

    @abstractmethod
    async def update(self, collection: str, record_id: int, fields: Record) -> Optional[Record]:
        """Apply ``fields`` to an existing record, None if there is no such id."""

    @abstractmethod
    async def delete(self, collection: str, record_id: int) -> Optional[Record]:
        """Remove a record and return it, None if there is no such id."""
