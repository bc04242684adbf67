"""Engine - Registration workflow over the catalog, directory and queue."""

from registrar.engine.engine import RegistrationEngine
from registrar.engine.exceptions import (
    EngineError,
    InconsistentStateError,
    InvalidArgumentError,
)
from registrar.engine.models import Outcome, ProcessedRequest, QueuedRequest, SortMode
from registrar.engine.sorting import sort_courses

__all__ = [
    "EngineError",
    "InconsistentStateError",
    "InvalidArgumentError",
    "Outcome",
    "ProcessedRequest",
    "QueuedRequest",
    "RegistrationEngine",
    "SortMode",
    "sort_courses",
]
