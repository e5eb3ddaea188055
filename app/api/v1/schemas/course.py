from typing import Optional

from app.api.v1.schemas.common import CamelModel, RequiredStr


class CourseResponse(CamelModel):
    id: int
    code: str
    name: str
    teacher_id: int
    semester: str
    room: str
    schedule: Optional[str] = ""


class CreateCourse(CamelModel):
    code: RequiredStr
    name: RequiredStr
    teacher_id: int
    semester: RequiredStr
    room: RequiredStr
    schedule: Optional[str] = ""


class UpdateCourse(CamelModel):
    code: Optional[RequiredStr] = None
    name: Optional[RequiredStr] = None
    teacher_id: Optional[int] = None
    semester: Optional[RequiredStr] = None
    room: Optional[RequiredStr] = None
    schedule: Optional[str] = None


class CourseAverage(CamelModel):
    course_id: int
    test_count: int
    average: float
