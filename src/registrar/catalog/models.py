"""Data models for the Catalog."""

from __future__ import annotations

from dataclasses import dataclass


def normalize_code(code: str) -> str:
    """Return the canonical (stripped, upper-case) form of a course code."""
    return code.strip().upper()


@dataclass
class Course:
    """A course offered in the catalog.

    Attributes:
        code: Unique course code, stored upper-case.
        name: Course title.
        credits: Credit hours.
        capacity: Maximum number of enrolled students.
        enrolled: Number of students currently enrolled.
    """

    code: str
    name: str
    credits: int
    capacity: int
    enrolled: int = 0

    def __post_init__(self) -> None:
        self.code = normalize_code(self.code)

    @property
    def available_seats(self) -> int:
        return self.capacity - self.enrolled

    @property
    def is_full(self) -> bool:
        return self.enrolled >= self.capacity

    def snapshot(self) -> CourseView:
        """Return a read-only copy of the current course state."""
        return CourseView(
            code=self.code,
            name=self.name,
            credits=self.credits,
            capacity=self.capacity,
            enrolled=self.enrolled,
        )


@dataclass(frozen=True)
class CourseView:
    """Immutable snapshot of a course, handed out for display."""

    code: str
    name: str
    credits: int
    capacity: int
    enrolled: int

    @property
    def available_seats(self) -> int:
        return self.capacity - self.enrolled

    @property
    def is_full(self) -> bool:
        return self.enrolled >= self.capacity
