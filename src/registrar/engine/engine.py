"""RegistrationEngine - Enrollment workflow over catalog, directory and queue."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from registrar.catalog import Course, CourseNotFoundError, OrderedCatalog, normalize_code
from registrar.directory import Directory, StudentNotFoundError
from registrar.engine.exceptions import InconsistentStateError, InvalidArgumentError
from registrar.engine.models import Outcome, ProcessedRequest, QueuedRequest, SortMode
from registrar.engine.sorting import sort_courses
from registrar.logging import get_logger
from registrar.request_queue import RequestQueue

if TYPE_CHECKING:
    from registrar.catalog import CourseView
    from registrar.directory import Student, StudentView
    from registrar.request_queue import RegistrationRequest

logger = get_logger(__name__)


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{field} must be a non-empty string")
    return value.strip()


def _require_int(value: Any, field: str, minimum: int) -> int:
    # bool is an int subclass but never a meaningful count
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be an integer, got {type(value).__name__}")
    if value < minimum:
        raise InvalidArgumentError(f"{field} must be at least {minimum}, got {value}")
    return value


class RegistrationEngine:
    """Owns the course catalog, the student directory and the request queue.

    Requests are validated when they are submitted and only take effect
    when the queue is processed. Processing drains the queue oldest first
    and settles each request completely before moving on to the next:

    - a full course rejects the request (``Outcome.COURSE_FULL``)
    - a course the student already holds rejects it (``Outcome.ALREADY_ENROLLED``)
    - otherwise the course gains a seat holder and the student gains the course

    One rejection never stops the batch.

    Every public operation runs under one lock, so concurrent callers (the
    API serves requests from a thread pool) see each operation as a whole.
    """

    def __init__(
        self,
        catalog: OrderedCatalog | None = None,
        directory: Directory | None = None,
        queue: RequestQueue | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            catalog: Course store. A new empty catalog if omitted.
            directory: Student store. A new empty directory if omitted.
            queue: Pending request buffer. A new empty queue if omitted.
        """
        self.catalog = catalog if catalog is not None else OrderedCatalog()
        self.directory = directory if directory is not None else Directory()
        self.queue = queue if queue is not None else RequestQueue()
        self._lock = threading.Lock()

    # --- Catalog Operations ---

    def add_course(self, code: str, name: str, credits: int, capacity: int) -> CourseView:
        """Add a course to the catalog.

        Args:
            code: Course code, matched case-insensitively and stored upper-case.
            name: Course title.
            credits: Credit hours, at least 1.
            capacity: Seat limit, at least 0.

        Returns:
            Snapshot of the created course.

        Raises:
            InvalidArgumentError: If any argument is empty or out of range.
            DuplicateCourseError: If the code is already in the catalog.
        """
        code = normalize_code(_require_text(code, "code"))
        name = _require_text(name, "name")
        credits = _require_int(credits, "credits", 1)
        capacity = _require_int(capacity, "capacity", 0)

        course = Course(code=code, name=name, credits=credits, capacity=capacity)
        with self._lock:
            self.catalog.insert(course)
            view = course.snapshot()
        logger.info("Course added: %s (%s)", view.code, view.name)
        return view

    def get_course(self, code: str) -> CourseView:
        """Get a course snapshot by code.

        Raises:
            InvalidArgumentError: If the code is empty.
            CourseNotFoundError: If no course has that code.
        """
        code = _require_text(code, "course code")
        with self._lock:
            return self._get_course(code).snapshot()

    def list_courses(self, sort_mode: SortMode | str = SortMode.CODE) -> tuple[CourseView, ...]:
        """Return every course, ordered for display.

        The stored catalog order is never changed.

        Raises:
            InvalidArgumentError: If the sort mode is unknown.
        """
        try:
            mode = SortMode(sort_mode)
        except ValueError:
            raise InvalidArgumentError(f"Unknown sort mode: {sort_mode!r}") from None
        with self._lock:
            courses = [course.snapshot() for course in self.catalog.all_sorted()]
        return tuple(sort_courses(courses, mode))

    # --- Directory Operations ---

    def add_student(self, student_id: str, name: str) -> StudentView:
        """Add a student with an empty course list.

        Raises:
            InvalidArgumentError: If the id or name is empty.
            DuplicateStudentError: If the id is already taken.
        """
        student_id = _require_text(student_id, "student id")
        name = _require_text(name, "name")

        with self._lock:
            view = self.directory.add(student_id, name).snapshot()
        logger.info("Student added: %s (%s)", view.id, view.name)
        return view

    def get_student(self, student_id: str) -> StudentView:
        """Get a student snapshot by id.

        Raises:
            InvalidArgumentError: If the id is empty.
            StudentNotFoundError: If no student has that id.
        """
        student_id = _require_text(student_id, "student id")
        with self._lock:
            return self._get_student(student_id).snapshot()

    def list_students(self) -> tuple[StudentView, ...]:
        """Return every student in the order they were added."""
        with self._lock:
            return tuple(student.snapshot() for student in self.directory.all())

    # --- Queue Operations ---

    def request_registration(self, student_id: str, course_code: str) -> int:
        """Queue a request for a student to join a course.

        The student is checked before the course.

        Returns:
            The request's 1-based position in the queue.

        Raises:
            InvalidArgumentError: If either identifier is empty.
            StudentNotFoundError: If the student does not exist.
            CourseNotFoundError: If the course does not exist.
        """
        return self.queue_registration(student_id, course_code).position

    def queue_registration(self, student_id: str, course_code: str) -> QueuedRequest:
        """Queue a request and return it with its position.

        Same checks as request_registration.
        """
        student_id = _require_text(student_id, "student id")
        course_code = _require_text(course_code, "course code")

        with self._lock:
            student = self._get_student(student_id)
            course = self._get_course(course_code)
            request = self.queue.enqueue(student.id, course.code)
            queued = QueuedRequest(request=request, position=len(self.queue))
        logger.info(
            "Request queued: %s -> %s (position %d)",
            request.student_id,
            request.course_code,
            queued.position,
        )
        return queued

    def pending_requests(self) -> tuple[RegistrationRequest, ...]:
        """Return the queued requests, oldest first, without consuming them."""
        with self._lock:
            return self.queue.peek_all()

    def process_queue(self) -> list[ProcessedRequest]:
        """Drain the queue and settle every request in order.

        Returns:
            One result per request, in the order they were queued. Empty
            if nothing was pending.

        Raises:
            InconsistentStateError: If a queued request names a student or
                course that is no longer on record. Requests behind it stay
                queued.
        """
        with self._lock:
            if not self.queue:
                logger.debug("No pending requests")
                return []

            logger.info("Processing %d queued request(s)", len(self.queue))
            results = [self._settle(request) for request in self.queue.drain()]

        accepted = sum(1 for result in results if result.accepted)
        logger.info(
            "Queue processed: %d accepted, %d rejected", accepted, len(results) - accepted
        )
        return results

    # --- Internals ---

    def _settle(self, request: RegistrationRequest) -> ProcessedRequest:
        student = self.directory.find(request.student_id)
        course = self.catalog.find(request.course_code)
        if student is None or course is None:
            raise InconsistentStateError(
                f"Queued request {request.student_id} -> {request.course_code} "
                "refers to a missing record"
            )

        if course.is_full:
            logger.warning("Processing %s for %s: course full", student.name, course.code)
            outcome = Outcome.COURSE_FULL
        elif student.is_registered_for(course.code):
            logger.warning("Processing %s for %s: already enrolled", student.name, course.code)
            outcome = Outcome.ALREADY_ENROLLED
        else:
            course.enrolled += 1
            student.registered_courses.append(course.code)
            logger.info("Processing %s for %s: enrolled", student.name, course.code)
            outcome = Outcome.ACCEPTED
        return ProcessedRequest(request=request, outcome=outcome, student_name=student.name)

    def _get_student(self, student_id: str) -> Student:
        student = self.directory.find(student_id)
        if student is None:
            raise StudentNotFoundError(f"Student with id '{student_id}' not found")
        return student

    def _get_course(self, code: str) -> Course:
        course = self.catalog.find(code)
        if course is None:
            raise CourseNotFoundError(f"Course with code '{normalize_code(code)}' not found")
        return course
