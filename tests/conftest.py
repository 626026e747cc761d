"""Shared pytest fixtures for bibsort tests."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import bibsort.shared.logging_config as logging_config
from bibsort.shared.colors import Colors


@pytest.fixture(autouse=True)
def _restore_colors():
    """Color codes are class state; put them back after every test."""
    yield
    Colors.enable()


@pytest.fixture
def clean_logging():
    """Undo handlers and levels that setup_logging()/configure_file_logging() set."""
    logging_config._file_logging_configured = False
    root = logging.getLogger()
    package = logging.getLogger("bibsort")
    original_root_handlers = list(root.handlers)
    original_root_level = root.level
    original_package_level = package.level
    yield
    for h in list(root.handlers):
        if isinstance(h, RotatingFileHandler):
            h.close()
            root.removeHandler(h)
    root.handlers = original_root_handlers
    root.level = original_root_level
    package.handlers.clear()
    package.level = original_package_level
    logging_config._file_logging_configured = False


@pytest.fixture
def reference_titles():
    """The ten titles used throughout the sorting tests, unsorted."""
    return [
        "The Gumball Rally",
        "The 501st Legion",
        "The 600th Floor",
        "1917",
        "42nd Street",
        "350000000 Years of Solitude",
        "It's Garry Shandling's Show",
        "The 40-Year-Old Virgin",
        "The 30th Floor",
        "9 to 5",
    ]


@pytest.fixture
def reference_order():
    """reference_titles in bibliographic order."""
    return [
        "The 501st Legion",
        "The 40-Year-Old Virgin",
        "42nd Street",
        "The Gumball Rally",
        "It's Garry Shandling's Show",
        "9 to 5",
        "1917",
        "The 600th Floor",
        "The 30th Floor",
        "350000000 Years of Solitude",
    ]
