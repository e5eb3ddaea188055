from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.api.deps import get_records
from app.api.v1.schemas.common import ErrorResponse
from app.api.v1.schemas.course import CourseAverage, CourseResponse, CreateCourse, UpdateCourse
from app.api.v1.schemas.test import TestResponse
from app.services.records import RecordsStore
from app.utils.ids import parse_id

router = APIRouter(
    prefix="/courses",
    tags=["Course"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.get("", response_model=List[CourseResponse], status_code=status.HTTP_200_OK)
async def get_courses(records: RecordsStore = Depends(get_records)):
    return await records.courses.list()


@router.get("/{course_id}", response_model=CourseResponse, status_code=status.HTTP_200_OK)
async def get_course(
        course_id: str = Path(..., description="Course id"),
        records: RecordsStore = Depends(get_records)
):
    return await records.courses.get(parse_id(course_id))


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
        course: CreateCourse,
        records: RecordsStore = Depends(get_records)
):
    """
    Create a course taught by an existing teacher.

    Args:
        course: Course fields; schedule is optional
        records: Records store

    Returns:
        CourseResponse: The created course

    Raises:
        400 - Missing required fields or teacherId does not resolve
    """
    return await records.courses.create(course.model_dump())


@router.put("/{course_id}", response_model=CourseResponse, status_code=status.HTTP_200_OK)
async def update_course(
        course_data: UpdateCourse,
        course_id: str = Path(..., description="Course id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Partial update of a course. A new teacherId must resolve to a teacher.

    Raises:
        404 - Course not found
        400 - Empty update or teacherId does not resolve
    """
    return await records.courses.update(parse_id(course_id), course_data.model_dump(exclude_unset=True))


@router.delete("/{course_id}", response_model=CourseResponse, status_code=status.HTTP_200_OK)
async def delete_course(
        course_id: str = Path(..., description="Course id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Delete a course without tests.

    Raises:
        404 - Course not found
        400 - Tests exist for this course
    """
    return await records.courses.delete(parse_id(course_id))


@router.get("/{course_id}/tests", response_model=List[TestResponse], status_code=status.HTTP_200_OK)
async def get_course_tests(
        course_id: str = Path(..., description="Course id"),
        records: RecordsStore = Depends(get_records)
):
    return await records.courses.tests(parse_id(course_id))


@router.get("/{course_id}/average", response_model=CourseAverage, status_code=status.HTTP_200_OK)
async def get_course_average(
        course_id: str = Path(..., description="Course id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Average percentage score of all tests in the course, rounded to 2 places.

    Raises:
        404 - Course not found or it has no tests
    """
    return await records.courses.average(parse_id(course_id))
