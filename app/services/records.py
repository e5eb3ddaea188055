import asyncio

from app.core.logger import logger
from app.services.course import CourseService
from app.services.student import StudentService
from app.services.teacher import TeacherService
from app.services.test import TestService
from app.storage import Storage


class RecordsStore:
    """
    Academic records store: teachers, courses, students and tests over one storage.

    The storage is injected and owned by the store between ``init`` and
    ``close``. All entity services share one lock for their mutations.
    """

    def __init__(self, storage: Storage):
        self.storage = storage
        self._lock = asyncio.Lock()

        self.teachers = TeacherService(storage, self._lock)
        self.courses = CourseService(storage, self._lock)
        self.students = StudentService(storage, self._lock)
        self.tests = TestService(storage, self._lock)

    async def init(self) -> None:
        await self.storage.init()
        logger.success(f"Records store ready on {self.storage.name} storage")

    async def close(self) -> None:
        await self.storage.close()
        logger.debug(f"Records store on {self.storage.name} storage closed")
