"""Registrar - in-memory course registration with queued batch enrollment."""

from registrar.catalog import Course, CourseView, OrderedCatalog
from registrar.directory import Directory, Student, StudentView
from registrar.engine import Outcome, ProcessedRequest, RegistrationEngine, SortMode
from registrar.request_queue import RegistrationRequest, RequestQueue

__all__ = [
    "Course",
    "CourseView",
    "Directory",
    "OrderedCatalog",
    "Outcome",
    "ProcessedRequest",
    "RegistrationEngine",
    "RegistrationRequest",
    "RequestQueue",
    "SortMode",
    "Student",
    "StudentView",
]

__version__ = "0.1.0"
