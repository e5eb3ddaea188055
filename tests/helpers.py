"""
Field factories and seeding helpers shared by the store and API tests
"""

from typing import Any, Dict


def teacher_fields(**overrides) -> Dict[str, Any]:
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@school.test",
        "department": "Mathematics",
    }
    fields.update(overrides)
    return fields


def course_fields(teacher_id: int, **overrides) -> Dict[str, Any]:
    fields = {
        "code": "MTH101",
        "name": "Algebra",
        "teacher_id": teacher_id,
        "semester": "Fall",
        "room": "B12",
    }
    fields.update(overrides)
    return fields


def student_fields(**overrides) -> Dict[str, Any]:
    fields = {
        "first_name": "Alan",
        "last_name": "Turing",
        "grade": 11,
        "student_number": "S-1001",
    }
    fields.update(overrides)
    return fields


def graded_test_fields(student_id: int, course_id: int, mark: float = 8, out_of: float = 10, **overrides) -> Dict[str, Any]:
    fields = {
        "student_id": student_id,
        "course_id": course_id,
        "test_name": "Quiz",
        "date": "2024-10-01",
        "mark": mark,
        "out_of": out_of,
    }
    fields.update(overrides)
    return fields


async def seed_course(store, **overrides):
    """Create a teacher and one course taught by them."""
    teacher = await store.teachers.create(teacher_fields())
    course = await store.courses.create(course_fields(teacher["id"], **overrides))
    return teacher, course
