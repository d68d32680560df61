"""
Error types and failure logging for the tinyunit framework.

Every failure the executor isolates passes through ErrorHandler so that it is
logged once, with its traceback, and turned into a TestFailure record.
"""

import logging
import traceback
from collections import deque
from itertools import islice
from typing import Any, Deque, Dict

from tinyunit.core.test_result import TestFailure


class TinyUnitError(Exception):
    """Base class for tinyunit errors."""
    pass


class ConfigurationError(TinyUnitError):
    """Raised when runner configuration cannot be loaded or is invalid."""
    pass


class UnresolvedTestMethodError(TinyUnitError):
    """Raised when a test case's name does not resolve to a callable method."""

    def __init__(self, test_name: str, owner: str):
        self.test_name = test_name
        self.owner = owner
        super().__init__(f"{owner} has no callable test method named '{test_name}'")


class CheckFailedError(AssertionError):
    """Raised by check() when its condition is false."""
    pass


class ErrorHandler:
    def __init__(self, show_tracebacks: bool = False, history_size: int = 100,
                 quiet: bool = False):
        """
        Args:
            show_tracebacks: Log failures and tracebacks at ERROR
            history_size: Most recent failures kept for get_error_summary()
            quiet: Log every failure at DEBUG only
        """
        self.show_tracebacks = show_tracebacks
        self.quiet = quiet
        self.logger = logging.getLogger('tinyunit.error_handler')
        self._seen: Deque[TestFailure] = deque(maxlen=history_size)

    def log_failure(self, test_name: str, phase: str, error: BaseException) -> TestFailure:
        """
        Log an isolated failure and build its record.

        Args:
            test_name: Name of the test case that failed
            phase: Lifecycle phase the error came from (setUp, test, tearDown)
            error: The caught exception

        Returns:
            TestFailure describing the error
        """
        failure = TestFailure(
            test_name=test_name,
            phase=phase,
            error_type=type(error).__name__,
            message=str(error),
        )
        self._seen.append(failure)

        if self.quiet:
            self.logger.debug(f"{test_name} [{phase}] {failure.error_type}: {failure.message}")
            return failure

        if isinstance(error, UnresolvedTestMethodError):
            self.logger.warning(f"{test_name} [{phase}] {failure.error_type}: {failure.message}")
            return failure

        # INFO unless tracebacks were asked for
        level = logging.ERROR if self.show_tracebacks else logging.INFO
        self.logger.log(level, f"{test_name} [{phase}] {failure.error_type}: {failure.message}")

        tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        self.logger.log(logging.ERROR if self.show_tracebacks else logging.DEBUG, tb)

        return failure

    def get_error_summary(self) -> Dict[str, Any]:
        """
        Return a summary of the failures kept in this handler's history.

        Returns:
            Dict with the total, counts per error type and the first failures
        """
        error_counts: Dict[str, int] = {}
        for failure in self._seen:
            error_counts[failure.error_type] = error_counts.get(failure.error_type, 0) + 1

        return {
            "total_errors": len(self._seen),
            "error_types": error_counts,
            "most_common_errors": sorted(error_counts.items(), key=lambda x: x[1], reverse=True)[:5],
            "error_details": [f.as_dict() for f in islice(self._seen, 10)],
        }

