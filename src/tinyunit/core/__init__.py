"""
Test-execution engine: result aggregation, test case resolution, the
executor and the suite.
"""

from .test_result import TestFailure, TestResult
from .test_case import TestCase, case_name, check, resolve_hook, resolve_test_method
from .test_executor import IsolationPolicy, TestExecutor, run_test
from .test_suite import TestSuite

__all__ = [
    "TestFailure",
    "TestResult",
    "TestCase",
    "case_name",
    "check",
    "resolve_hook",
    "resolve_test_method",
    "IsolationPolicy",
    "TestExecutor",
    "run_test",
    "TestSuite",
]
