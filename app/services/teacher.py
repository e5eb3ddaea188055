from typing import Any, Dict, Optional

from app.core.logger import logger
from app.services.base import Dependent, EntityService
from app.storage import COURSES, TEACHERS, TESTS


class TeacherService(EntityService):
    collection = TEACHERS
    entity_name = "Teacher"
    required_fields = ("first_name", "last_name", "email", "department")
    dependents = (
        Dependent(COURSES, "teacher_id", "Cannot delete teacher assigned to a course"),
    )

    async def summary(self, teacher_id: Optional[int]) -> Dict[str, Any]:
        """
        Courses taught by a teacher with the number of tests recorded in each.

        Args:
            teacher_id: Teacher id

        Returns:
            dict: teacher_id, teacher_name and a list of courses with course_id, course_name, test_count

        Raises:
            NotFoundError: Teacher does not exist
        """
        teacher = await self.get(teacher_id)
        courses = await self.storage.find(COURSES, "teacher_id", teacher["id"])

        summary_courses = []
        for course in courses:
            tests = await self.storage.find(TESTS, "course_id", course["id"])
            summary_courses.append({
                "course_id": course["id"],
                "course_name": course["name"],
                "test_count": len(tests),
            })

        logger.info(f"[TEACHER SUMMARY] Teacher ID {teacher['id']} teaches {len(summary_courses)} courses")

        return {
            "teacher_id": teacher["id"],
            "teacher_name": f"{teacher['first_name']} {teacher['last_name']}",
            "courses": summary_courses,
        }
