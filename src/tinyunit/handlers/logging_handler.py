"""
Logging Handler for the tinyunit framework.

Provides logging configuration for the runner. Console output goes to stderr
so that stdout carries nothing but the run summary.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO


class LoggingHandler:
    """
    Logging handler for framework logging needs.
    """

    LOGGER_NAME = 'tinyunit'

    def __init__(self, log_level: str = "WARNING", log_file: Optional[str] = None,
                 stream: Optional[TextIO] = None):
        """
        Initialize the logging handler.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional log file path
            stream: Console stream, defaults to sys.stderr
        """
        self.log_level = getattr(logging, log_level.upper(), logging.WARNING)
        self.log_file = log_file
        self.stream = stream
        self.logger = None

    def setup_logging(self) -> logging.Logger:
        """
        Set up logging configuration for the framework logger.

        Returns:
            Configured logger instance
        """
        logger = logging.getLogger(self.LOGGER_NAME)
        logger.setLevel(self.log_level)

        # Remove existing handlers to avoid duplicates
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler(self.stream or sys.stderr)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if self.log_file:
            log_path = Path(self.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        self.logger = logger
        return logger

