from typing import Any, Dict, List, Optional

from app.core.exceptions import NotFoundError
from app.core.logger import logger
from app.services.base import EntityService
from app.storage import TESTS, Record
from app.utils.scores import average_percentage


class ScoredEntityService(EntityService):
    """Entity that tests point at through ``test_field``; adds test listing and averages."""

    test_field: str

    async def tests(self, record_id: Optional[int]) -> List[Record]:
        parent = await self.get(record_id)
        tests = await self.storage.find(TESTS, self.test_field, parent["id"])
        logger.info(f"[{self.tag} TESTS] {self.entity_name} ID {parent['id']} has {len(tests)} tests")
        return tests

    async def average(self, record_id: Optional[int]) -> Dict[str, Any]:
        """
        Average percentage score across the tests of this record.

        Raises:
            NotFoundError: The record does not exist or has no tests
        """
        tests = await self.tests(record_id)
        if not tests:
            logger.warning(f"[{self.tag} AVERAGE] No tests for {self.entity_name.lower()} ID {record_id}")
            raise NotFoundError(f"No tests found for this {self.entity_name.lower()}")

        return {
            self.test_field: record_id,
            "test_count": len(tests),
            "average": average_percentage(tests),
        }
