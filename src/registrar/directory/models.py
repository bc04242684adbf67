"""Data models for the Directory."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Student:
    """A student record.

    Attributes:
        id: Unique student identifier.
        name: Student's full name.
        registered_courses: Course codes in enrollment order, no duplicates.
    """

    id: str
    name: str
    registered_courses: list[str] = field(default_factory=list)

    def is_registered_for(self, code: str) -> bool:
        return code in self.registered_courses

    def snapshot(self) -> StudentView:
        """Return a read-only copy of the current student state."""
        return StudentView(
            id=self.id,
            name=self.name,
            registered_courses=tuple(self.registered_courses),
        )


@dataclass(frozen=True)
class StudentView:
    """Immutable snapshot of a student, handed out for display."""

    id: str
    name: str
    registered_courses: tuple[str, ...] = ()
