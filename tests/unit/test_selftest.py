"""
The self-test suite run through the engine, and each self-test run directly.
"""

import pytest

from tinyunit import selftest
from tinyunit.core.test_executor import get_default_executor, run_test
from tinyunit.core.test_result import TestResult
from tinyunit.selftest import SELF_TESTS, TestCaseTest, WasRun, build_self_test_suite


def test_self_test_suite_passes():
    result = TestResult()

    build_self_test_suite().run(result)

    assert result.summary() == "5 run, 0 failed"


def test_self_test_suite_order():
    suite = build_self_test_suite()

    assert [case.name for case in suite] == list(SELF_TESTS)


@pytest.mark.parametrize("name", SELF_TESTS)
def test_each_self_test_passes_when_called_directly(name):
    getattr(TestCaseTest(name), name)()


def test_was_run_states():
    test = WasRun("test_method")
    assert test.was_run == 0

    test.setUp()
    assert test.was_run == -1

    test.test_method()
    test.tearDown()
    assert test.was_run == 1
    assert test.log == "SetUp TestMethod TearDown "


def test_broken_method_raises():
    with pytest.raises(RuntimeError, match="Broken Method"):
        WasRun("test_broken_method").test_broken_method()


def test_repeated_runs_keep_no_failure_history():
    for _ in range(50):
        build_self_test_suite().run(TestResult())
        run_test(WasRun("test_broken_method"), TestResult())

    assert get_default_executor().error_handler.get_error_summary()["total_errors"] == 0
    assert selftest._nested.error_handler.get_error_summary()["total_errors"] == 0
