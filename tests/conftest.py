"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from meshcheck.core.observability.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo setup_logging() calls made by a test (directly or via the CLI)."""
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    handlers = root.handlers[:]
    root_level, package_level = root.level, package.level
    raise_exceptions = logging.raiseExceptions
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(root_level)
    package.setLevel(package_level)
    logging.raiseExceptions = raise_exceptions


@pytest.fixture
def write_manifest(tmp_path: Path):
    """Write a manifest under tmp_path/k8s and return its path."""

    def _write(filename: str, content: str) -> Path:
        k8s = tmp_path / "k8s"
        k8s.mkdir(exist_ok=True)
        path = k8s / filename
        path.write_text(content)
        return path

    return _write
