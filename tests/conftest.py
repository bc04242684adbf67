"""Shared pytest fixtures and configuration."""

import pytest

from registrar.engine import RegistrationEngine


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def engine() -> RegistrationEngine:
    """Create an empty RegistrationEngine."""
    return RegistrationEngine()


@pytest.fixture
def small_engine() -> RegistrationEngine:
    """Engine with a one-seat course, a roomy course and two students."""
    e = RegistrationEngine()
    e.add_course("MTH204", "Linear Algebra", 3, 1)
    e.add_course("CSC215", "Data Structures and Algorithms", 4, 40)
    e.add_student("S1", "Ada Lovelace")
    e.add_student("S2", "Alan Turing")
    return e
