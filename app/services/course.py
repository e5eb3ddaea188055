from app.services.base import Dependent, Reference
from app.services.scored import ScoredEntityService
from app.storage import COURSES, TEACHERS, TESTS


class CourseService(ScoredEntityService):
    collection = COURSES
    entity_name = "Course"
    required_fields = ("code", "name", "teacher_id", "semester", "room")
    defaults = {"schedule": ""}
    references = (Reference("teacher_id", TEACHERS),)
    dependents = (
        Dependent(TESTS, "course_id", "Cannot delete course: tests exist for this course"),
    )
    test_field = "course_id"
