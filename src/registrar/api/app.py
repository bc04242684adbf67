"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registrar.api.dependencies import close_engine, init_engine
from registrar.api.models import APIResponse
from registrar.api.routes import courses, queue, students
from registrar.catalog import CourseNotFoundError, DuplicateCourseError
from registrar.config import RegistrarConfig
from registrar.directory import DuplicateStudentError, StudentNotFoundError
from registrar.engine import InconsistentStateError, InvalidArgumentError
from registrar.logging import get_logger
from registrar.seed import build_engine

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from registrar.engine import RegistrationEngine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    engine: RegistrationEngine | None = app.state.engine
    if engine is None:
        config: RegistrarConfig = app.state.config
        engine = build_engine(seed=config.seed, seed_file=config.seed_file)
        logger.info(
            "Engine ready with %d course(s) and %d student(s)",
            len(engine.catalog),
            len(engine.directory),
        )
    init_engine(engine)

    yield
    # Shutdown
    close_engine()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


def create_app(
    config: RegistrarConfig | None = None,
    engine: RegistrationEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Startup settings. Read from the environment if omitted.
        engine: Engine to serve. Built from ``config`` at startup if omitted.
    """
    app = FastAPI(
        title="Registrar API",
        description="REST API for course registration",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.config = config if config is not None else RegistrarConfig.from_env()
    app.state.engine = engine

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(CourseNotFoundError)
    async def course_not_found_handler(
        _request: Request, _exc: CourseNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Course not found")

    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        _request: Request, _exc: StudentNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Student not found")

    @app.exception_handler(DuplicateCourseError)
    async def duplicate_course_handler(
        _request: Request, _exc: DuplicateCourseError
    ) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, "Course with this code already exists")

    @app.exception_handler(DuplicateStudentError)
    async def duplicate_student_handler(
        _request: Request, _exc: DuplicateStudentError
    ) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, "Student with this id already exists")

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(
        _request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    @app.exception_handler(InconsistentStateError)
    async def inconsistent_state_handler(
        _request: Request, _exc: InconsistentStateError
    ) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # Include routers
    app.include_router(courses.router, prefix="/api/v1")
    app.include_router(students.router, prefix="/api/v1")
    app.include_router(queue.router, prefix="/api/v1")

    return app
