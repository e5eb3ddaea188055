from .course import Course
from .student import Student
from .teacher import Teacher
from .test import Test

__all__ = [
    "Course",
    "Student",
    "Teacher",
    "Test",
]
