"""Pytest configuration for boxplotchart tests."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure boxplotchart package is importable when running tests from repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists() and str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo handlers/level changes made by configure_logging() inside a test."""
    logger = logging.getLogger("boxplotchart")
    handlers = logger.handlers[:]
    level = logger.level
    yield
    for h in logger.handlers[:]:
        if h not in handlers:
            h.close()
            logger.removeHandler(h)
    for h in handlers:
        if h not in logger.handlers:
            logger.addHandler(h)
    logger.setLevel(level)
