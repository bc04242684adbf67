"""Course catalog endpoints."""

from fastapi import APIRouter, Query, status

from registrar.api.dependencies import EngineDep
from registrar.api.models import (
    APIResponse,
    CourseCreate,
    CourseResponse,
    course_to_response,
)
from registrar.engine import SortMode

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=APIResponse[list[CourseResponse]])
def list_courses(
    engine: EngineDep, sort: SortMode = Query(default=SortMode.CODE)
) -> APIResponse[list[CourseResponse]]:
    """List all courses, ordered by code, credits, or available seats."""
    courses = engine.list_courses(sort)
    return APIResponse(data=[course_to_response(c) for c in courses])


@router.post(
    "",
    response_model=APIResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_course(course: CourseCreate, engine: EngineDep) -> APIResponse[CourseResponse]:
    """Add a new course to the catalog."""
    created = engine.add_course(
        code=course.code,
        name=course.name,
        credits=course.credits,
        capacity=course.capacity,
    )
    return APIResponse(data=course_to_response(created))


@router.get("/{code}", response_model=APIResponse[CourseResponse])
def get_course(code: str, engine: EngineDep) -> APIResponse[CourseResponse]:
    """Get a course by code (case-insensitive)."""
    return APIResponse(data=course_to_response(engine.get_course(code)))
