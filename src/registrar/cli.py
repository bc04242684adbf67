"""CLI entry point for the registrar.

- ``serve``: run the REST API under uvicorn
- ``shell``: interactive console menu over an in-memory engine
"""

from __future__ import annotations

from pathlib import Path

import click

from registrar.catalog import CatalogError
from registrar.config import ConfigError, RegistrarConfig, load_config
from registrar.directory import DirectoryError
from registrar.engine import EngineError, RegistrationEngine, SortMode
from registrar.formatting import (
    format_request,
    format_result,
    format_student,
    render_courses,
)
from registrar.logging import setup_logging
from registrar.seed import build_engine


MENU = """
MENU:
1. List Courses (Code Order)
2. List Courses (Sorted by Credits)
3. List Courses (Sorted by Availability)
4. Add New Course
5. Add New Student
6. Submit Registration Request (Add to Queue)
7. Process Registration Queue
8. View Students
9. View Pending Queue
0. Exit"""

_SORT_CHOICES = {
    "1": SortMode.CODE,
    "2": SortMode.CREDITS,
    "3": SortMode.AVAILABLE_SEATS,
}


def _resolve_config(config_path: Path | None, no_seed: bool) -> RegistrarConfig:
    config = load_config(config_path) if config_path else RegistrarConfig.from_env()
    if no_seed:
        config.seed = False
        config.seed_file = None
    return config


@click.group()
@click.version_option(package_name="registrar")
def main() -> None:
    """Course registration with a queued batch enrollment workflow."""
    pass


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a registrar YAML config file",
)
@click.option("--no-seed", is_flag=True, help="Start with an empty catalog and directory")
def serve(host: str, port: int, config_path: Path | None, no_seed: bool) -> None:
    """Serve the REST API."""
    import uvicorn  # noqa: PLC0415

    from registrar.api import create_app  # noqa: PLC0415

    try:
        config = _resolve_config(config_path, no_seed)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    setup_logging(log_dir=config.log_dir, level=config.log_level)
    uvicorn.run(create_app(config=config), host=host, port=port)


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a registrar YAML config file",
)
@click.option("--no-seed", is_flag=True, help="Start with an empty catalog and directory")
@click.option("-v", "--verbose", is_flag=True, help="Also echo log records to the console")
def shell(config_path: Path | None, no_seed: bool, verbose: bool) -> None:
    """Run the interactive registration menu."""
    try:
        config = _resolve_config(config_path, no_seed)
        setup_logging(log_dir=config.log_dir, level=config.log_level, console=verbose)
        engine = build_engine(seed=config.seed, seed_file=config.seed_file)
    except (ConfigError, EngineError, CatalogError, DirectoryError) as e:
        raise click.ClickException(str(e)) from e

    click.echo("Welcome to the University Registration System")
    run_menu(engine)
    click.echo("Exited")


def run_menu(engine: RegistrationEngine) -> None:
    """Prompt for menu choices until the user exits."""
    while True:
        click.echo(MENU)
        choice = click.prompt("Select Option", default="0", show_default=False).strip()
        if choice == "0":
            return
        try:
            _dispatch(engine, choice)
        except (CatalogError, DirectoryError, EngineError) as e:
            click.echo(f"Error: {e}", err=True)


def _dispatch(engine: RegistrationEngine, choice: str) -> None:
    if choice in _SORT_CHOICES:
        click.echo(render_courses(engine.list_courses(_SORT_CHOICES[choice])))
    elif choice == "4":
        code = click.prompt("Code")
        name = click.prompt("Name")
        credits = click.prompt("Credits", type=int)
        capacity = click.prompt("Capacity", type=int)
        course = engine.add_course(code, name, credits, capacity)
        click.echo(f"Course {course.code} added.")
    elif choice == "5":
        student_id = click.prompt("ID")
        name = click.prompt("Name")
        engine.add_student(student_id, name)
        click.echo("Student added successfully.")
    elif choice == "6":
        student_id = click.prompt("Student ID")
        code = click.prompt("Course Code")
        position = engine.request_registration(student_id, code)
        click.echo(f"Request added to processing queue. Position: {position}")
    elif choice == "7":
        results = engine.process_queue()
        if not results:
            click.echo("No pending requests.")
            return
        click.echo("--- Processing Queue ---")
        for result in results:
            click.echo(format_result(result))
        click.echo("------------------------")
    elif choice == "8":
        click.echo("=== STUDENT RECORDS ===")
        for student in engine.list_students():
            click.echo(format_student(student))
    elif choice == "9":
        pending = engine.pending_requests()
        if not pending:
            click.echo("No pending requests.")
        for position, request in enumerate(pending, start=1):
            click.echo(format_request(position, request))
    else:
        click.echo("Invalid option.")
