# tests/conftest.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula truth-table tests.

This module provides pytest configuration, fixtures, and utilities for testing
the formula front-end and the evaluation engine. It ensures proper module
path setup and provides common test infrastructure for all test modules.

The configuration handles:
- Python path setup for module imports
- Capture of records emitted through the Tabula logger
- Common formula fixtures
"""

import logging
import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import formula
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


class _RecordCollector(logging.Handler):
    """Logging handler that keeps formatted messages in memory."""

    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())

    @property
    def text(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def log_records():
    """Collect messages sent through the Tabula logger during one test.

    The Tabula logger does not propagate to the root logger, so pytest's
    ``caplog`` never sees its records.

    Yields:
        _RecordCollector: Handler whose ``messages`` list fills up during the test
    """
    from utils.logger import get_logger, LogLevel

    logger = get_logger()
    collector = _RecordCollector()
    logger.logger.addHandler(collector)
    try:
        yield collector
    finally:
        logger.logger.removeHandler(collector)
        logger.set_level(LogLevel.INFO)


@pytest.fixture
def basic_formula():
    """Provide a two-variable conjunction.

    Returns:
        str: Formula with one satisfying assignment out of four
    """
    return "ilpleut and fenetreouverte"


@pytest.fixture
def complex_formula():
    """Provide a formula using every connective.

    Returns:
        str: Formula over three variables
    """
    return "if a and not b then (c iff a or b)"
