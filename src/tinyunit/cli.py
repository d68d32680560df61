"""
CLI for the tinyunit framework.

Runs the framework's self-test suite and prints the one-line summary.
"""

import argparse
import sys
from typing import List, Optional

from tinyunit.core.test_executor import TestExecutor
from tinyunit.core.test_result import TestResult
from tinyunit.handlers.error_handler import ConfigurationError, ErrorHandler
from tinyunit.handlers.logging_handler import LoggingHandler
from tinyunit.selftest import build_self_test_suite
from tinyunit.utils.config_manager import RunnerConfigManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyunit",
        description="Run the tinyunit self-test suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                              # Print "<n> run, <m> failed"
  %(prog)s --fail-exit-code             # Exit 1 when any test failed
  %(prog)s --config runner.yaml -v      # Load settings, log progress to stderr
        """
    )

    parser.add_argument(
        '--config', '-c',
        help='JSON or YAML runner configuration file'
    )

    parser.add_argument(
        '--isolation',
        choices=['lifecycle', 'test_body'],
        help='Guard setUp/tearDown as well as the test method (lifecycle, default) '
             'or only the test method (test_body)'
    )

    parser.add_argument(
        '--workers', '-w',
        type=int,
        help='Run cases on this many threads (default: 1, in insertion order)'
    )

    parser.add_argument(
        '--fail-exit-code',
        action='store_const',
        const=True,
        help='Exit with status 1 when any test failed'
    )

    parser.add_argument(
        '--log-level',
        help='Logging level for stderr output (default: WARNING)'
    )

    parser.add_argument(
        '--log-file',
        help='Also write log records to this file'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Shortcut for --log-level INFO'
    )

    parser.add_argument(
        '--tracebacks',
        action='store_const',
        const=True,
        dest='show_tracebacks',
        help='Log failures with their tracebacks at ERROR level'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    log_level = args.log_level or ('INFO' if args.verbose else None)
    overrides = {
        'isolation': args.isolation,
        'workers': args.workers,
        'fail_exit_code': args.fail_exit_code,
        'log_level': log_level,
        'log_file': args.log_file,
        'show_tracebacks': args.show_tracebacks,
    }

    try:
        config = RunnerConfigManager().load_config(args.config, overrides)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger = LoggingHandler(config.log_level, config.log_file).setup_logging()

    executor = TestExecutor(config.isolation, ErrorHandler(config.show_tracebacks))
    suite = build_self_test_suite()
    result = TestResult()

    try:
        suite.run(result, executor=executor, workers=config.workers)
    except KeyboardInterrupt:
        print("\nRun interrupted by user", file=sys.stderr)
        return 1

    print(result.summary())

    logger.debug(f"Error summary: {executor.error_handler.get_error_summary()}")

    if not result.was_successful():
        logger.info(f"{result.fail_count} test(s) failed")
        if config.fail_exit_code:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
