"""RequestQueue - Ordered buffer consumed strictly first-in-first-out."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from registrar.request_queue.models import RegistrationRequest

if TYPE_CHECKING:
    from collections.abc import Iterator


class RequestQueue:
    """FIFO queue of registration requests.

    Performs no validation of its own; callers check that the student
    and course exist before enqueuing.
    """

    def __init__(self) -> None:
        self._pending: deque[RegistrationRequest] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def enqueue(self, student_id: str, course_code: str) -> RegistrationRequest:
        """Append a request and return it."""
        request = RegistrationRequest(student_id=student_id, course_code=course_code)
        self._pending.append(request)
        return request

    def dequeue(self) -> RegistrationRequest | None:
        """Remove and return the oldest request, or None when empty."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def drain(self) -> Iterator[RegistrationRequest]:
        """Yield requests oldest first, removing each one as it is yielded."""
        while self._pending:
            yield self._pending.popleft()

    def dequeue_all(self) -> list[RegistrationRequest]:
        """Remove and return every pending request in enqueue order."""
        return list(self.drain())

    def peek_all(self) -> tuple[RegistrationRequest, ...]:
        """Return a snapshot of pending requests without removing them."""
        return tuple(self._pending)
