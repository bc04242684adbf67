"""Unit tests for console formatting helpers."""

import pytest

from registrar.catalog import CourseView
from registrar.directory import StudentView
from registrar.engine import Outcome, ProcessedRequest
from registrar.formatting import (
    format_course,
    format_request,
    format_result,
    format_student,
    render_courses,
    truncate_name,
)
from registrar.request_queue import RegistrationRequest


@pytest.mark.unit
class TestFormatting:
    """Tests for text rendering."""

    def test_truncate_long_name(self) -> None:
        name = "Computer Organization and Assembly Language Programming"

        short = truncate_name(name)

        assert len(short) == 45
        assert short.endswith("...")
        assert short.startswith("Computer Organization")

    def test_short_name_unchanged(self) -> None:
        assert truncate_name("Linear Algebra") == "Linear Algebra"

    def test_format_course(self) -> None:
        course = CourseView("MTH204", "Linear Algebra", 3, 5, 2)

        line = format_course(course)

        assert line.startswith("| MTH204   | Linear Algebra")
        assert line.endswith("|  3 Credits | Seats:   2/  5 |")

    def test_format_student(self) -> None:
        student = StudentView("S1", "Ada Lovelace", ("MTH204", "CSC215"))

        assert format_student(student) == "[S1] Ada Lovelace - Courses: [MTH204, CSC215]"

    def test_format_request(self) -> None:
        assert format_request(2, RegistrationRequest("S1", "MTH204")) == "  2. S1 -> MTH204"

    @pytest.mark.parametrize(
        ("outcome", "text"),
        [
            (Outcome.ACCEPTED, "SUCCESS. Enrolled."),
            (Outcome.COURSE_FULL, "FAILED. Course Full."),
            (Outcome.ALREADY_ENROLLED, "FAILED. Already Enrolled."),
        ],
    )
    def test_format_result(self, outcome: Outcome, text: str) -> None:
        result = ProcessedRequest(RegistrationRequest("S1", "MTH204"), outcome)

        assert format_result(result) == f"Processing S1 for MTH204... {text}"

    def test_format_result_prefers_student_name(self) -> None:
        result = ProcessedRequest(
            RegistrationRequest("S1", "MTH204"), Outcome.ACCEPTED, student_name="Ada Lovelace"
        )

        assert format_result(result) == "Processing Ada Lovelace for MTH204... SUCCESS. Enrolled."

    def test_render_courses(self) -> None:
        rendered = render_courses([CourseView("MTH204", "Linear Algebra", 3, 5, 0)])

        lines = rendered.splitlines()
        assert lines[0] == "=== COURSE LIST ==="
        assert "MTH204" in lines[2]
        assert lines[1] == lines[-1]
