from app.services.base import Dependent
from app.services.scored import ScoredEntityService
from app.storage import STUDENTS, TESTS


class StudentService(ScoredEntityService):
    collection = STUDENTS
    entity_name = "Student"
    required_fields = ("first_name", "last_name", "grade", "student_number")
    defaults = {"homeroom": None}
    dependents = (
        Dependent(TESTS, "student_id", "Cannot delete student with existing test records"),
    )
    test_field = "student_id"
