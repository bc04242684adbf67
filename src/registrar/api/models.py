"""Pydantic models for REST API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Course models


class CourseCreate(BaseModel):
    """Request model for adding a course."""

    code: str = Field(..., min_length=1, max_length=20)
    name: str = Field(..., min_length=1, max_length=255)
    credits: int = Field(..., ge=1)
    capacity: int = Field(..., ge=0)


class CourseResponse(BaseModel):
    """Response model for a course."""

    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    credits: int
    capacity: int
    enrolled: int
    available_seats: int
    is_full: bool


def course_to_response(course: Any) -> CourseResponse:
    """Convert a CourseView to CourseResponse."""
    return CourseResponse.model_validate(course)


# Student models


class StudentCreate(BaseModel):
    """Request model for adding a student."""

    id: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    registered_courses: list[str]


def student_to_response(student: Any) -> StudentResponse:
    """Convert a StudentView to StudentResponse."""
    return StudentResponse(
        id=student.id,
        name=student.name,
        registered_courses=list(student.registered_courses),
    )


# Queue models


class RegistrationCreate(BaseModel):
    """Request model for submitting a registration request."""

    student_id: str = Field(..., min_length=1)
    course_code: str = Field(..., min_length=1)


class RegistrationRequestResponse(BaseModel):
    """Response model for a queued request."""

    model_config = ConfigDict(from_attributes=True)

    student_id: str
    course_code: str


class QueuedResponse(BaseModel):
    """Response model for a newly queued request."""

    request: RegistrationRequestResponse
    position: int


class ProcessedRequestResponse(BaseModel):
    """Response model for one settled request."""

    student_id: str
    student_name: str
    course_code: str
    outcome: str
    accepted: bool


def processed_to_response(result: Any) -> ProcessedRequestResponse:
    """Convert a ProcessedRequest to ProcessedRequestResponse."""
    return ProcessedRequestResponse(
        student_id=result.request.student_id,
        student_name=result.student_name,
        course_code=result.request.course_code,
        outcome=result.outcome.value,
        accepted=result.accepted,
    )


class ProcessQueueResponse(BaseModel):
    """Response model for a queue processing run."""

    results: list[ProcessedRequestResponse]
    accepted: int
    rejected: int
