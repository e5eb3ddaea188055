import json
from pathlib import Path
from typing import Dict, List, Union

from pydantic.alias_generators import to_camel, to_snake
from starlette.concurrency import run_in_threadpool

from app.core.exceptions import StorageError
from app.core.logger import logger
from app.storage.base import COLLECTIONS, Record
from app.storage.memory import MemoryStorage
from app.utils.fs_atomic import atomic_write_json


class JsonFileStorage(MemoryStorage):
    """
    In-memory collections mirrored to one JSON file per collection.

    Each file holds a pretty-printed array of objects with camelCase keys,
    e.g. ``data/teachers.json``. The whole file is rewritten on every
    mutation; the in-memory state only changes once the write succeeded.
    """

    name = "json"

    def __init__(self, data_dir: Union[str, Path]):
        super().__init__()
        self.data_dir = Path(data_dir)

    def path_for(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    async def init(self) -> None:
        for collection in COLLECTIONS:
            records = await run_in_threadpool(self._read_collection, collection)
            self._load_collection(collection, records)
            logger.debug(f"[JSON STORAGE] Loaded {len(records)} records from {self.path_for(collection)}")
        logger.info(f"[JSON STORAGE] Data directory: {self.data_dir}")

    def _read_collection(self, collection: str) -> List[Record]:
        path = self.path_for(collection)
        if not path.exists():
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"[JSON STORAGE] Error parsing {path}: {e}")
            return []
        except OSError as e:
            logger.error(f"[JSON STORAGE] Error reading {path}: {e}")
            raise StorageError(f"Failed to read {collection}") from e

        if not isinstance(data, list):
            logger.error(f"[JSON STORAGE] {path} does not contain a JSON array")
            return []

        return [
            {to_snake(key): value for key, value in item.items()}
            for item in data
            if isinstance(item, dict) and isinstance(item.get("id"), int)
        ]

    async def _persist(self, collection: str, records: Dict[int, Record]) -> None:
        payload = [
            {to_camel(key): value for key, value in records[record_id].items()}
            for record_id in sorted(records)
        ]
        path = self.path_for(collection)
        try:
            await run_in_threadpool(atomic_write_json, path, payload)
        except OSError as e:
            logger.error(f"[JSON STORAGE] Error writing {path}: {e}")
            raise StorageError(f"Failed to save {collection}") from e
