from typing import Optional

from pydantic import Field

from app.api.v1.schemas.common import CamelModel, RequiredStr


class TestResponse(CamelModel):
    id: int
    student_id: int
    course_id: int
    test_name: str
    date: str
    mark: float
    out_of: float
    weight: Optional[float] = None


class CreateTest(CamelModel):
    student_id: int
    course_id: int
    test_name: RequiredStr
    date: RequiredStr
    mark: float = Field(ge=0)
    out_of: float = Field(gt=0)
    weight: Optional[float] = Field(default=None, ge=0)


class UpdateTest(CamelModel):
    student_id: Optional[int] = None
    course_id: Optional[int] = None
    test_name: Optional[RequiredStr] = None
    date: Optional[RequiredStr] = None
    mark: Optional[float] = Field(default=None, ge=0)
    out_of: Optional[float] = Field(default=None, gt=0)
    weight: Optional[float] = Field(default=None, ge=0)
