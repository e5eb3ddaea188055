from typing import Any

from pydantic.alias_generators import to_camel

from app.core.exceptions import RecordValidationError
from app.core.logger import logger
from app.storage import COURSES, STUDENTS, TEACHERS, TESTS, Record, Storage

ENTITY_NAMES = {
    TEACHERS: "teacher",
    COURSES: "course",
    STUDENTS: "student",
    TESTS: "test",
}


async def resolve_reference(storage: Storage, collection: str, record_id: Any, field: str) -> Record:
    """
    Resolve a foreign key to the record it points at.

    Args:
        storage: Storage holding the referenced collection
        collection: Referenced collection name
        record_id: Value of the foreign key field
        field: Foreign key field name, used in the error message

    Returns:
        Record: The referenced record

    Raises:
        RecordValidationError: The key is not an id or no such record exists
    """
    record = None
    if isinstance(record_id, int) and not isinstance(record_id, bool):
        record = await storage.get(collection, record_id)

    if record is None:
        label = to_camel(field)
        logger.warning(f"[REFERENCE CHECK] Unresolved {label}: {record_id!r}")
        raise RecordValidationError(f"Invalid {label}: {ENTITY_NAMES[collection]} not found")

    return record
