from fastapi import APIRouter
from app.api.v1.endpoints import health, teacher, course, student, test

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(teacher.router)
api_router.include_router(course.router)
api_router.include_router(student.router)
api_router.include_router(test.router)
