"""
Self-tests: the framework tested with itself.

WasRun is a recording fixture whose log shows which lifecycle steps ran.
TestCaseTest exercises the executor, the result and the suite through it.
"""

from tinyunit.core.test_case import TestCase, check
from tinyunit.core.test_executor import TestExecutor
from tinyunit.core.test_result import TestResult
from tinyunit.core.test_suite import TestSuite
from tinyunit.handlers.error_handler import ErrorHandler


# Runs the cases the self-tests inspect; logs their failures at DEBUG only
_nested = TestExecutor(error_handler=ErrorHandler(history_size=0, quiet=True))


class WasRun(TestCase):
    def __init__(self, name: str):
        super().__init__(name)
        self.was_run = 0
        self.log = ""

    def setUp(self):
        self.was_run = -1
        self.log = "SetUp "

    def test_method(self):
        self.was_run = 1
        self.log = self.log + "TestMethod "

    def test_broken_method(self):
        raise RuntimeError("Broken Method")

    def tearDown(self):
        self.was_run = 1
        self.log = self.log + "TearDown "


class TestCaseTest(TestCase):
    def test_template_method(self):
        test = WasRun("test_method")
        result = TestResult()
        _nested.run_test(test, result)
        check(test.log == "SetUp TestMethod TearDown ", f"unexpected log {test.log!r}")

    def test_result(self):
        test = WasRun("test_method")
        result = TestResult()
        _nested.run_test(test, result)
        check(result.summary() == "1 run, 0 failed", result.summary())

    def test_failed_result(self):
        test = WasRun("test_broken_method")
        result = TestResult()
        _nested.run_test(test, result)
        check(result.summary() == "1 run, 1 failed", result.summary())

    def test_failed_result_formatting(self):
        result = TestResult()
        result.record_start()
        result.record_failure()
        check(result.summary() == "1 run, 1 failed", result.summary())

    def test_suite(self):
        suite = TestSuite()
        suite.add(WasRun("test_method"))
        suite.add(WasRun("test_broken_method"))
        result = TestResult()
        suite.run(result, executor=_nested)
        check(result.summary() == "2 run, 1 failed", result.summary())


SELF_TESTS = (
    "test_template_method",
    "test_result",
    "test_failed_result",
    "test_failed_result_formatting",
    "test_suite",
)


def build_self_test_suite() -> TestSuite:
    suite = TestSuite()
    for name in SELF_TESTS:
        suite.add(TestCaseTest(name))
    return suite
