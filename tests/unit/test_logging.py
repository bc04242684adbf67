"""Unit tests for registrar logging configuration."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from registrar.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_registrar_logger():
    """Detach file handlers so temporary directories can be removed."""
    yield
    logger = logging.getLogger("registrar")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Log directory is created if it doesn't exist."""
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(log_dir=log_dir, console=False)

        assert log_dir.exists()

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        """Log messages are written to the file."""
        logger = setup_logging(log_dir=tmp_path, console=False)
        logger.info("test message 123")

        content = (tmp_path / "registrar.log").read_text()
        assert "test message 123" in content

    def test_log_format_includes_component_name(self, tmp_path: Path) -> None:
        """Log entries include level and the component logger name."""
        setup_logging(log_dir=tmp_path, console=False)
        logging.getLogger("registrar.engine.engine").info("component test")

        content = (tmp_path / "registrar.log").read_text()
        assert " | INFO" in content
        assert "registrar.engine.engine | component test" in content

    def test_log_level_configurable(self, tmp_path: Path) -> None:
        """Log level filters messages appropriately."""
        setup_logging(log_dir=tmp_path, level="WARNING", console=False)
        logger = logging.getLogger("registrar")
        logger.info("should not appear")
        logger.warning("should appear")

        content = (tmp_path / "registrar.log").read_text()
        assert "should not appear" not in content
        assert "should appear" in content

    @patch.dict(os.environ, {"REGISTRAR_LOG_LEVEL": "DEBUG"})
    def test_log_level_from_env(self, tmp_path: Path) -> None:
        """Log level can be set via environment variable."""
        logger = setup_logging(log_dir=tmp_path, console=False)

        assert logger.level == logging.DEBUG

    def test_log_dir_from_env(self, tmp_path: Path) -> None:
        """Log directory can be set via environment variable."""
        with patch.dict(os.environ, {"REGISTRAR_LOG_DIR": str(tmp_path)}):
            setup_logging(console=False)

        assert (tmp_path / "registrar.log").exists()

    def test_no_duplicate_handlers_on_repeated_setup(self, tmp_path: Path) -> None:
        """Repeated setup_logging calls don't add duplicate handlers."""
        setup_logging(log_dir=tmp_path, console=False)
        logger = setup_logging(log_dir=tmp_path, console=True)

        assert len(logger.handlers) == 2


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefixes_name(self) -> None:
        assert get_logger("engine").name == "registrar.engine"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("registrar.catalog").name == "registrar.catalog"
