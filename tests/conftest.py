"""
pytest configuration and fixtures: a records store per storage backend and an API client
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.records import RecordsStore
from app.storage import DatabaseStorage, JsonFileStorage, MemoryStorage

BACKENDS = ["memory", "json", "database"]


def build_storage(backend: str, tmp_path):
    if backend == "memory":
        return MemoryStorage()
    if backend == "json":
        return JsonFileStorage(tmp_path / "data")
    return DatabaseStorage(f"sqlite+aiosqlite:///{tmp_path / 'records.db'}")


@pytest_asyncio.fixture(params=BACKENDS)
async def store(request, tmp_path):
    """Initialized records store, once per storage backend."""
    records = RecordsStore(build_storage(request.param, tmp_path))
    await records.init()
    yield records
    await records.close()


@pytest.fixture
def client():
    """API client over a fresh in-memory store."""
    app = create_app(RecordsStore(MemoryStorage()))
    with TestClient(app) as test_client:
        yield test_client
