"""Course orderings used for display."""

from __future__ import annotations

from typing import TYPE_CHECKING

from registrar.engine.models import SortMode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from registrar.catalog import CourseView

_SORT_KEYS: dict[SortMode, Callable[[CourseView], int] | None] = {
    SortMode.CODE: None,
    SortMode.CREDITS: lambda course: course.credits,
    SortMode.AVAILABLE_SEATS: lambda course: -course.available_seats,
}


def sort_courses(courses: Iterable[CourseView], mode: SortMode) -> list[CourseView]:
    """Return a new list of courses ordered for the given mode.

    The input must already be in code order. Both non-code modes use a
    stable sort, so courses with equal keys keep their code order.
    """
    key = _SORT_KEYS[SortMode(mode)]
    if key is None:
        return list(courses)
    return sorted(courses, key=key)
