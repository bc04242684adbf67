"""Student directory endpoints."""

from fastapi import APIRouter, status

from registrar.api.dependencies import EngineDep
from registrar.api.models import (
    APIResponse,
    StudentCreate,
    StudentResponse,
    student_to_response,
)

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(engine: EngineDep) -> APIResponse[list[StudentResponse]]:
    """List all students in the order they were added."""
    return APIResponse(data=[student_to_response(s) for s in engine.list_students()])


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(student: StudentCreate, engine: EngineDep) -> APIResponse[StudentResponse]:
    """Add a new student."""
    created = engine.add_student(student.id, student.name)
    return APIResponse(data=student_to_response(created))


@router.get("/{student_id}", response_model=APIResponse[StudentResponse])
def get_student(student_id: str, engine: EngineDep) -> APIResponse[StudentResponse]:
    """Get a student by id."""
    return APIResponse(data=student_to_response(engine.get_student(student_id)))
