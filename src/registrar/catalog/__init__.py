"""Catalog - Courses kept in ascending course-code order."""

from registrar.catalog.catalog import OrderedCatalog
from registrar.catalog.exceptions import (
    CatalogError,
    CourseNotFoundError,
    DuplicateCourseError,
)
from registrar.catalog.models import Course, CourseView, normalize_code

__all__ = [
    "CatalogError",
    "Course",
    "CourseNotFoundError",
    "CourseView",
    "DuplicateCourseError",
    "OrderedCatalog",
    "normalize_code",
]
