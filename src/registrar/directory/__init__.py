"""Directory - Student records keyed by student id."""

from registrar.directory.directory import Directory
from registrar.directory.exceptions import (
    DirectoryError,
    DuplicateStudentError,
    StudentNotFoundError,
)
from registrar.directory.models import Student, StudentView

__all__ = [
    "Directory",
    "DirectoryError",
    "DuplicateStudentError",
    "Student",
    "StudentNotFoundError",
    "StudentView",
]
