"""Exceptions for the Engine module."""


class EngineError(Exception):
    """Base exception for engine errors."""

    pass


class InvalidArgumentError(EngineError, ValueError):
    """An operation received a malformed value (empty id, bad number)."""

    pass


class InconsistentStateError(EngineError):
    """A queued request refers to a student or course that no longer exists."""

    pass
