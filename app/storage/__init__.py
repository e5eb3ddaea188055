from app.core.config import Settings
from app.storage.base import COLLECTIONS, COURSES, STUDENTS, TEACHERS, TESTS, Record, Storage
from app.storage.database import DatabaseStorage
from app.storage.json_file import JsonFileStorage
from app.storage.memory import MemoryStorage

__all__ = [
    "COLLECTIONS",
    "COURSES",
    "STUDENTS",
    "TEACHERS",
    "TESTS",
    "DatabaseStorage",
    "JsonFileStorage",
    "MemoryStorage",
    "Record",
    "Storage",
    "build_storage",
]


def build_storage(settings: Settings) -> Storage:
    """Storage backend selected by ``STORAGE_BACKEND``."""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "database":
        return DatabaseStorage(settings.DATABASE_URL)
    if backend == "json":
        return JsonFileStorage(settings.DATA_DIR)
    if backend == "memory":
        return MemoryStorage()
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
