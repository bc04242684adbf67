"""Data models for the Engine module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from registrar.request_queue import RegistrationRequest


class Outcome(StrEnum):
    """Terminal state of a processed registration request."""

    ACCEPTED = "accepted"
    COURSE_FULL = "rejected_course_full"
    ALREADY_ENROLLED = "rejected_already_enrolled"


class SortMode(StrEnum):
    """Display orderings for the course list."""

    CODE = "code"
    CREDITS = "credits"
    AVAILABLE_SEATS = "seats"


@dataclass(frozen=True)
class QueuedRequest:
    """A request as it entered the queue.

    Attributes:
        request: The request that was appended.
        position: Its 1-based place in the queue at that moment.
    """

    request: RegistrationRequest
    position: int


@dataclass(frozen=True)
class ProcessedRequest:
    """A request together with the outcome it reached during processing.

    Attributes:
        request: The request taken off the queue.
        outcome: Which terminal state it ended in.
        student_name: Name of the requesting student when it was settled.
    """

    request: RegistrationRequest
    outcome: Outcome
    student_name: str = ""

    @property
    def accepted(self) -> bool:
        return self.outcome is Outcome.ACCEPTED
