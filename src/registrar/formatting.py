"""Plain-text rendering of snapshots for the console front end."""

from __future__ import annotations

from typing import TYPE_CHECKING

from registrar.engine import Outcome

if TYPE_CHECKING:
    from registrar.catalog import CourseView
    from registrar.directory import StudentView
    from registrar.engine import ProcessedRequest
    from registrar.request_queue import RegistrationRequest

NAME_WIDTH = 45
RULE = "-" * 93

_OUTCOME_TEXT = {
    Outcome.ACCEPTED: "SUCCESS. Enrolled.",
    Outcome.COURSE_FULL: "FAILED. Course Full.",
    Outcome.ALREADY_ENROLLED: "FAILED. Already Enrolled.",
}


def truncate_name(name: str, width: int = NAME_WIDTH) -> str:
    """Shorten a name to fit a column, marking the cut with '...'."""
    if len(name) <= width:
        return name
    return name[: width - 3] + "..."


def format_course(course: CourseView) -> str:
    return (
        f"| {course.code:<8} | {truncate_name(course.name):<{NAME_WIDTH}} | "
        f"{course.credits:2d} Credits | Seats: {course.enrolled:3d}/{course.capacity:3d} |"
    )


def format_student(student: StudentView) -> str:
    courses = ", ".join(student.registered_courses)
    return f"[{student.id}] {student.name} - Courses: [{courses}]"


def format_request(position: int, request: RegistrationRequest) -> str:
    return f"{position:3d}. {request.student_id} -> {request.course_code}"


def format_result(result: ProcessedRequest) -> str:
    who = result.student_name or result.request.student_id
    return (
        f"Processing {who} for {result.request.course_code}... "
        f"{_OUTCOME_TEXT[result.outcome]}"
    )


def render_courses(courses: tuple[CourseView, ...] | list[CourseView]) -> str:
    lines = ["=== COURSE LIST ===", RULE]
    lines.extend(format_course(course) for course in courses)
    lines.append(RULE)
    return "\n".join(lines)
