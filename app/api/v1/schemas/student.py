from typing import Optional

from app.api.v1.schemas.common import CamelModel, RequiredStr


class StudentResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    grade: int
    student_number: str
    homeroom: Optional[str] = None


class CreateStudent(CamelModel):
    first_name: RequiredStr
    last_name: RequiredStr
    grade: int
    student_number: RequiredStr
    homeroom: Optional[str] = None


class UpdateStudent(CamelModel):
    first_name: Optional[RequiredStr] = None
    last_name: Optional[RequiredStr] = None
    grade: Optional[int] = None
    student_number: Optional[RequiredStr] = None
    homeroom: Optional[str] = None


class StudentAverage(CamelModel):
    student_id: int
    test_count: int
    average: float
