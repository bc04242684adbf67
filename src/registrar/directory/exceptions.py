"""Custom exceptions for the Directory."""


class DirectoryError(Exception):
    """Base exception for Directory errors."""


class DuplicateStudentError(DirectoryError):
    """Student with given id already exists."""


class StudentNotFoundError(DirectoryError):
    """Student with given id does not exist."""
