from typing import List, Optional

from app.api.v1.schemas.common import CamelModel, RequiredStr


class TeacherResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    department: str
    room: Optional[str] = None


class CreateTeacher(CamelModel):
    first_name: RequiredStr
    last_name: RequiredStr
    email: RequiredStr
    department: RequiredStr
    room: Optional[str] = None


class UpdateTeacher(CamelModel):
    first_name: Optional[RequiredStr] = None
    last_name: Optional[RequiredStr] = None
    email: Optional[RequiredStr] = None
    department: Optional[RequiredStr] = None
    room: Optional[str] = None


class TeacherCourseSummary(CamelModel):
    course_id: int
    course_name: str
    test_count: int


class TeacherSummary(CamelModel):
    teacher_id: int
    teacher_name: str
    courses: List[TeacherCourseSummary]
