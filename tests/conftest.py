"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add src and the project root to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from tinyunit.core.test_executor import IsolationPolicy, TestExecutor
from tinyunit.core.test_result import TestResult
from tinyunit.handlers.error_handler import ErrorHandler


@pytest.fixture
def result() -> TestResult:
    """Fresh aggregator for a single test."""
    return TestResult()


@pytest.fixture
def error_handler() -> ErrorHandler:
    return ErrorHandler()


@pytest.fixture
def executor(error_handler: ErrorHandler) -> TestExecutor:
    """Executor with the default lifecycle isolation."""
    return TestExecutor(IsolationPolicy.LIFECYCLE, error_handler)


@pytest.fixture
def reference_executor(error_handler: ErrorHandler) -> TestExecutor:
    """Executor that only guards the test method."""
    return TestExecutor(IsolationPolicy.TEST_BODY, error_handler)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Directory for configuration files written by a test."""
    path = tmp_path / "config"
    path.mkdir()
    return path
