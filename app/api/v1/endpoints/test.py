from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.api.deps import get_records
from app.api.v1.schemas.common import ErrorResponse
from app.api.v1.schemas.test import CreateTest, TestResponse, UpdateTest
from app.services.records import RecordsStore
from app.utils.ids import parse_id

router = APIRouter(
    prefix="/tests",
    tags=["Test"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.get("", response_model=List[TestResponse], status_code=status.HTTP_200_OK)
async def get_tests(records: RecordsStore = Depends(get_records)):
    return await records.tests.list()


@router.get("/{test_id}", response_model=TestResponse, status_code=status.HTTP_200_OK)
async def get_test(
        test_id: str = Path(..., description="Test record id"),
        records: RecordsStore = Depends(get_records)
):
    return await records.tests.get(parse_id(test_id))


@router.post("", response_model=TestResponse, status_code=status.HTTP_201_CREATED)
async def create_test(
        test: CreateTest,
        records: RecordsStore = Depends(get_records)
):
    """
    Record a test result for a student in a course.

    Args:
        test: Test fields; weight is optional
        records: Records store

    Returns:
        TestResponse: The created test record

    Raises:
        400 - Missing required fields, invalid mark/outOf, or studentId/courseId do not resolve
    """
    return await records.tests.create(test.model_dump())


@router.put("/{test_id}", response_model=TestResponse, status_code=status.HTTP_200_OK)
async def update_test(
        test_data: UpdateTest,
        test_id: str = Path(..., description="Test record id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Partial update of a test record. New studentId/courseId values must resolve.

    Raises:
        404 - Test not found
        400 - Empty update or unresolved reference
    """
    return await records.tests.update(parse_id(test_id), test_data.model_dump(exclude_unset=True))


@router.delete("/{test_id}", response_model=TestResponse, status_code=status.HTTP_200_OK)
async def delete_test(
        test_id: str = Path(..., description="Test record id"),
        records: RecordsStore = Depends(get_records)
):
    return await records.tests.delete(parse_id(test_id))
