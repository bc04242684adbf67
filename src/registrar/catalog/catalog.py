"""OrderedCatalog - Courses stored in a sorted array keyed by code."""

from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING

from registrar.catalog.exceptions import DuplicateCourseError
from registrar.catalog.models import normalize_code

if TYPE_CHECKING:
    from collections.abc import Iterator

    from registrar.catalog.models import Course


class OrderedCatalog:
    """Sorted associative container of courses keyed by course code.

    Codes and courses live in two parallel lists kept in ascending code
    order, so lookups are a binary search and in-order enumeration is a
    plain copy.
    """

    def __init__(self) -> None:
        self._codes: list[str] = []
        self._courses: list[Course] = []

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.find(code) is not None

    def __iter__(self) -> Iterator[Course]:
        return iter(list(self._courses))

    def insert(self, course: Course) -> None:
        """Add a course, keeping the catalog sorted by code.

        Args:
            course: The course to add. Its code is already normalized.

        Raises:
            DuplicateCourseError: If a course with the same code exists.
        """
        index = bisect_left(self._codes, course.code)
        if index < len(self._codes) and self._codes[index] == course.code:
            raise DuplicateCourseError(f"Course with code '{course.code}' already exists")
        self._codes.insert(index, course.code)
        self._courses.insert(index, course)

    def find(self, code: str) -> Course | None:
        """Look up a course by code, ignoring case.

        Returns:
            The stored course, or None if no course has that code.
        """
        key = normalize_code(code)
        index = bisect_left(self._codes, key)
        if index < len(self._codes) and self._codes[index] == key:
            return self._courses[index]
        return None

    def all_sorted(self) -> list[Course]:
        """Return every course in ascending code order."""
        return list(self._courses)
