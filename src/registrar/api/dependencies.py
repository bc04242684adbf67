"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from registrar.engine import RegistrationEngine

# Engine instance owned by the running app (initialized on app startup)
_engine: RegistrationEngine | None = None


def init_engine(engine: RegistrationEngine) -> RegistrationEngine:
    """Install the RegistrationEngine served by the API."""
    global _engine  # noqa: PLW0603
    _engine = engine
    return _engine


def close_engine() -> None:
    """Release the RegistrationEngine instance."""
    global _engine  # noqa: PLW0603
    _engine = None


def get_engine() -> Generator[RegistrationEngine, None, None]:
    """Dependency that provides the RegistrationEngine instance."""
    if _engine is None:
        raise RuntimeError("RegistrationEngine not initialized. Call init_engine() first.")
    yield _engine


# Type alias for dependency injection
EngineDep = Annotated[RegistrationEngine, Depends(get_engine)]
