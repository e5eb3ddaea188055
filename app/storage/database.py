from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Type

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core.database import Base, build_engine, build_session_factory
from app.core.exceptions import StorageError
from app.core.logger import logger
from app.models import Course, Student, Teacher, Test
from app.storage.base import COURSES, STUDENTS, TEACHERS, TESTS, Record, Storage

MODELS: Dict[str, Type[Base]] = {
    TEACHERS: Teacher,
    COURSES: Course,
    STUDENTS: Student,
    TESTS: Test,
}


class DatabaseStorage(Storage):
    """Collections stored as SQLAlchemy tables, one session per operation."""

    name = "database"

    def __init__(self, url: str):
        self.url = url
        self._engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker[AsyncSession]] = None

    async def init(self) -> None:
        self._engine = build_engine(self.url)
        self._sessions = build_session_factory(self._engine)
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.critical(f"[DATABASE] Database initialization failed: {e}")
            raise StorageError("Database is unavailable") from e
        logger.info(f"[DATABASE] Tables are ready: {', '.join(MODELS)}")

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessions = None
            logger.debug("[DATABASE] Engine disposed")

    @staticmethod
    def _model(collection: str) -> Type[Base]:
        try:
            return MODELS[collection]
        except KeyError as e:
            raise StorageError(f"Unknown collection: {collection}") from e

    @staticmethod
    def _to_record(instance: Base) -> Record:
        return {attr.key: getattr(instance, attr.key) for attr in inspect(instance).mapper.column_attrs}

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        if self._sessions is None:
            raise StorageError("Database storage is not initialized")

        async with self._sessions() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(f"[DATABASE] {operation} failed: {e}")
                raise StorageError("Database operation failed") from e

    async def list(self, collection: str) -> List[Record]:
        model = self._model(collection)
        async with self._session(f"list {collection}") as session:
            result = await session.execute(select(model).order_by(model.id))
            return [self._to_record(instance) for instance in result.scalars().all()]

    async def get(self, collection: str, record_id: int) -> Optional[Record]:
        model = self._model(collection)
        async with self._session(f"get {collection} {record_id}") as session:
            instance = await session.get(model, record_id)
            return self._to_record(instance) if instance is not None else None

    async def find(self, collection: str, field: str, value: Any) -> List[Record]:
        model = self._model(collection)
        async with self._session(f"find {collection} by {field}") as session:
            result = await session.execute(
                select(model).where(getattr(model, field) == value).order_by(model.id)
            )
            return [self._to_record(instance) for instance in result.scalars().all()]

    async def insert(self, collection: str, fields: Record) -> Record:
        model = self._model(collection)
        async with self._session(f"insert into {collection}") as session:
            instance = model(**fields)
            session.add(instance)
            await session.commit()
            await session.refresh(instance)
            return self._to_record(instance)

    async def update(self, collection: str, record_id: int, fields: Record) -> Optional[Record]:
        model = self._model(collection)
        async with self._session(f"update {collection} {record_id}") as session:
            instance = await session.get(model, record_id)
            if instance is None:
                return None

            for key, value in fields.items():
                setattr(instance, key, value)

            await session.commit()
            await session.refresh(instance)
            return self._to_record(instance)

    async def delete(self, collection: str, record_id: int) -> Optional[Record]:
        model = self._model(collection)
        async with self._session(f"delete from {collection} {record_id}") as session:
            instance = await session.get(model, record_id)
            if instance is None:
                return None

            record = self._to_record(instance)
            await session.delete(instance)
            await session.commit()
            return record
