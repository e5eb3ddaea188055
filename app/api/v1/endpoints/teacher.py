from typing import List

from fastapi import APIRouter, Depends, Path, status

from app.api.deps import get_records
from app.api.v1.schemas.common import ErrorResponse
from app.api.v1.schemas.teacher import CreateTeacher, TeacherResponse, TeacherSummary, UpdateTeacher
from app.services.records import RecordsStore
from app.utils.ids import parse_id

router = APIRouter(
    prefix="/teachers",
    tags=["Teacher"],
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)


@router.get("", response_model=List[TeacherResponse], status_code=status.HTTP_200_OK)
async def get_teachers(records: RecordsStore = Depends(get_records)):
    """
    List all teachers.
    """
    return await records.teachers.list()


@router.get("/{teacher_id}", response_model=TeacherResponse, status_code=status.HTTP_200_OK)
async def get_teacher(
        teacher_id: str = Path(..., description="Teacher id"),
        records: RecordsStore = Depends(get_records)
):
    return await records.teachers.get(parse_id(teacher_id))


@router.post("", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
async def create_teacher(
        teacher: CreateTeacher,
        records: RecordsStore = Depends(get_records)
):
    """
    Create a teacher.

    Args:
        teacher: Teacher fields; room is optional
        records: Records store

    Returns:
        TeacherResponse: The created teacher with its id

    Raises:
        400 - Missing required fields
    """
    return await records.teachers.create(teacher.model_dump())


@router.put("/{teacher_id}", response_model=TeacherResponse, status_code=status.HTTP_200_OK)
async def update_teacher(
        teacher_data: UpdateTeacher,
        teacher_id: str = Path(..., description="Teacher id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Partial update of a teacher; only the supplied fields change.

    Raises:
        404 - Teacher not found
        400 - No fields provided for update
    """
    return await records.teachers.update(parse_id(teacher_id), teacher_data.model_dump(exclude_unset=True))


@router.delete("/{teacher_id}", response_model=TeacherResponse, status_code=status.HTTP_200_OK)
async def delete_teacher(
        teacher_id: str = Path(..., description="Teacher id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Delete a teacher that no course is assigned to.

    Raises:
        404 - Teacher not found
        400 - Teacher is still assigned to a course
    """
    return await records.teachers.delete(parse_id(teacher_id))


@router.get("/{teacher_id}/summary", response_model=TeacherSummary, status_code=status.HTTP_200_OK)
async def get_teacher_summary(
        teacher_id: str = Path(..., description="Teacher id"),
        records: RecordsStore = Depends(get_records)
):
    """
    Courses taught by the teacher with the number of tests in each.

    Args:
        teacher_id: Teacher id
        records: Records store

    Returns:
        TeacherSummary: teacherId, teacherName and the list of courses

    Raises:
        404 - Teacher not found
    """
    return await records.teachers.summary(parse_id(teacher_id))
