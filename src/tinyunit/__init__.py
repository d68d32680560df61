"""
tinyunit: a minimal xUnit-style test framework.

Test cases name the method to run; TestExecutor runs it between optional
setUp/tearDown hooks and records the outcome into a TestResult; TestSuite runs
an ordered list of cases into one shared result.
"""

from .core import (
    IsolationPolicy,
    TestCase,
    TestExecutor,
    TestFailure,
    TestResult,
    TestSuite,
    check,
    run_test,
)

__version__ = "0.1.0"

__all__ = [
    "IsolationPolicy",
    "TestCase",
    "TestExecutor",
    "TestFailure",
    "TestResult",
    "TestSuite",
    "check",
    "run_test",
]
