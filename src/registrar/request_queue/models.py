"""Data models for the Request Queue."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistrationRequest:
    """A pending request for a student to join a course."""

    student_id: str
    course_code: str
