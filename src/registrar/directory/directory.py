"""Directory - Insertion-ordered mapping of student ids to records."""

from __future__ import annotations

from registrar.directory.exceptions import DuplicateStudentError
from registrar.directory.models import Student


class Directory:
    """Key-unique container of student records.

    Enumeration follows insertion order.
    """

    def __init__(self) -> None:
        self._students: dict[str, Student] = {}

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student_id: object) -> bool:
        return student_id in self._students

    def add(self, student_id: str, name: str) -> Student:
        """Create a student record with an empty course list.

        Raises:
            DuplicateStudentError: If a student with the same id exists.
        """
        if student_id in self._students:
            raise DuplicateStudentError(f"Student with id '{student_id}' already exists")
        student = Student(id=student_id, name=name)
        self._students[student_id] = student
        return student

    def find(self, student_id: str) -> Student | None:
        return self._students.get(student_id)

    def all(self) -> list[Student]:
        return list(self._students.values())
