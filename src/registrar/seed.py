"""Demo data loaded into a fresh engine at startup."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from registrar.config import ConfigError, read_yaml_mapping
from registrar.engine import RegistrationEngine


@dataclass(frozen=True)
class CourseSeed:
    code: str
    name: str
    credits: int
    capacity: int


@dataclass(frozen=True)
class StudentSeed:
    id: str
    name: str


@dataclass(frozen=True)
class SeedData:
    """An initial batch of courses and students."""

    courses: tuple[CourseSeed, ...] = field(default_factory=tuple)
    students: tuple[StudentSeed, ...] = field(default_factory=tuple)


DEMO_SEED = SeedData(
    courses=(
        CourseSeed("CSC215", "Data Structures and Algorithms", 3, 40),
        CourseSeed("COM202", "Business and Professional Speech", 3, 50),
        CourseSeed("CSC211", "Computer Organization and Assembly Language", 3, 30),
        CourseSeed("MTH204", "Linear Algebra", 3, 5),  # low capacity to exercise rejections
        CourseSeed("REL101", "Islamic Studies", 3, 40),
    ),
    students=(
        StudentSeed("20241-35751", "Muhammad Haseeb Haroon"),
        StudentSeed("20241-12345", "Abdul Samad"),
        StudentSeed("20241-67890", "Mohammad Arslan"),
    ),
)


def seed_engine(engine: RegistrationEngine, data: SeedData | None = None) -> RegistrationEngine:
    """Apply a seed batch through the engine's public add operations."""
    data = DEMO_SEED if data is None else data
    for course in data.courses:
        engine.add_course(course.code, course.name, course.credits, course.capacity)
    for student in data.students:
        engine.add_student(student.id, student.name)
    return engine


def _entries(data: dict[str, Any], key: str, fields: tuple[str, ...]) -> list[dict[str, Any]]:
    entries = data.get(key, []) or []
    if not isinstance(entries, list):
        raise ConfigError(f"'{key}' must be a list")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ConfigError(f"Each entry in '{key}' must be a mapping")
        missing = [f for f in fields if f not in entry]
        if missing:
            raise ConfigError(f"Entry in '{key}' missing fields: {', '.join(missing)}")
    return entries


def load_seed_file(path: Path | str) -> SeedData:
    """Load seed data from YAML.

    Expected shape::

        courses:
          - {code: CSC215, name: Data Structures, credits: 3, capacity: 40}
        students:
          - {id: "20241-35751", name: Muhammad Haseeb Haroon}

    Raises:
        ConfigError: If the file is missing or malformed.
    """
    data = read_yaml_mapping(Path(path))
    courses = _entries(data, "courses", ("code", "name", "credits", "capacity"))
    students = _entries(data, "students", ("id", "name"))
    return SeedData(
        courses=tuple(
            CourseSeed(str(c["code"]), str(c["name"]), c["credits"], c["capacity"])
            for c in courses
        ),
        students=tuple(StudentSeed(str(s["id"]), str(s["name"])) for s in students),
    )


def build_engine(seed: bool = True, seed_file: Path | None = None) -> RegistrationEngine:
    """Create an engine, seeded from a file, the demo batch, or not at all."""
    engine = RegistrationEngine()
    if seed_file is not None:
        seed_engine(engine, load_seed_file(seed_file))
    elif seed:
        seed_engine(engine)
    return engine
