from numbers import Real
from typing import Any, Dict

from app.core.exceptions import RecordValidationError
from app.services.base import EntityService, Reference
from app.storage import COURSES, STUDENTS, TESTS


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class TestService(EntityService):
    __test__ = False

    collection = TESTS
    entity_name = "Test"
    required_fields = ("student_id", "course_id", "test_name", "date", "mark", "out_of")
    defaults = {"weight": None}
    references = (
        Reference("student_id", STUDENTS),
        Reference("course_id", COURSES),
    )

    def validate_fields(self, fields: Dict[str, Any]) -> None:
        if "mark" in fields and not (_is_number(fields["mark"]) and fields["mark"] >= 0):
            raise RecordValidationError("Invalid mark: must be a non-negative number")
        if "out_of" in fields and not (_is_number(fields["out_of"]) and fields["out_of"] > 0):
            raise RecordValidationError("Invalid outOf: must be a positive number")
        if fields.get("weight") is not None and not (_is_number(fields["weight"]) and fields["weight"] >= 0):
            raise RecordValidationError("Invalid weight: must be a non-negative number")
