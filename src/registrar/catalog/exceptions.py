"""Custom exceptions for the Catalog."""


class CatalogError(Exception):
    """Base exception for Catalog errors."""


class DuplicateCourseError(CatalogError):
    """Course with the same normalized code already exists."""


class CourseNotFoundError(CatalogError):
    """Course with given code does not exist."""
