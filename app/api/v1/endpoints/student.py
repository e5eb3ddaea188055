from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.api.deps import get_records
from app.api.v1.schemas.common import ErrorResponse
from app.api.v1.schemas.student import CreateStudent, StudentAverage, StudentResponse, UpdateStudent
from app.api.v1.schemas.test import TestResponse
from app.services.records import RecordsStore
from app.utils.ids import parse_id

router = APIRouter(
    prefix="/students",
    tags=["Student"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.get("", response_model=List[StudentResponse], status_code=status.HTTP_200_OK)
async def get_students(records: RecordsStore = Depends(get_records)):
    return await records.students.list()


@router.get("/{student_id}", response_model=StudentResponse, status_code=status.HTTP_200_OK)
async def get_student(
        student_id: str = Path(..., description="Student id"),
        records: RecordsStore = Depends(get_records)
):
    return await records.students.get(parse_id(student_id))


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
        student: CreateStudent,
        records: RecordsStore = Depends(get_records)
):
    """
    Create a student.

    Args:
        student: Student fields; homeroom is optional
        records: Records store

    Returns:
        StudentResponse: The created student

    Raises:
        400 - Missing required fields
    """
    return await records.students.create(student.model_dump())


@router.put("/{student_id}", response_model=StudentResponse, status_code=status.HTTP_200_OK)
async def update_student(
        student_data: UpdateStudent,
        student_id: str = Path(..., description="Student id"),
        records: RecordsStore = Depends(get_records)
):
    return await records.students.update(parse_id(student_id), student_data.model_dump(exclude_unset=True))


@router.delete("/{student_id}", response_model=StudentResponse, status_code=status.HTTP_200_OK)
async def delete_student(
        student_id: str = Path(..., description="Student id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Delete a student without test records.

    Raises:
        404 - Student not found
        400 - Student has test records
    """
    return await records.students.delete(parse_id(student_id))


@router.get("/{student_id}/tests", response_model=List[TestResponse], status_code=status.HTTP_200_OK)
async def get_student_tests(
        student_id: str = Path(..., description="Student id"),
        records: RecordsStore = Depends(get_records)
):
    """
    All test records of a student.

    Raises:
        404 - Student not found
    """
    return await records.students.tests(parse_id(student_id))


@router.get("/{student_id}/average", response_model=StudentAverage, status_code=status.HTTP_200_OK)
async def get_student_average(
        student_id: str = Path(..., description="Student id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Average percentage score across the student's tests, rounded to 2 places.

    Raises:
        404 - Student not found or has no tests
    """
    return await records.students.average(parse_id(student_id))
