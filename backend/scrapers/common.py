"""
Common utilities for the Course Populator data sources and jobs.

This module provides shared logging setup and the progress feed used by the
API client and the import job.
"""
import os
import logging
import threading
from typing import Callable, List, Optional


def setup_logger(name, log_file=None, level=logging.INFO):
    """
    Set up a logger with file and console handlers.

    Args:
        name: Name of the logger
        log_file: Path to the log file (optional)
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Define formatter
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Clear existing handlers
    logger.handlers = []
    # Handlers are attached here, so don't duplicate lines through the root logger
    logger.propagate = False

    # Add console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Add file handler if log_file is provided
    if log_file:
        # Ensure log directory exists
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Progress lines go through the import job logger
import_logger = logging.getLogger("backend.etl.course_import")

Listener = Callable[[str], None]


class ImportLog:
    """Append-only list of progress lines with listener callbacks."""

    def __init__(self, listeners: Optional[List[Listener]] = None, log: Optional[logging.Logger] = None):
        self._lines: List[str] = []
        self._lock = threading.Lock()
        self._listeners: List[Listener] = list(listeners or [])
        self._logger = log or import_logger

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def add(self, message: str, level: int = logging.INFO) -> None:
        """
        Append a line to the feed.

        Args:
            message: Text shown to the user
            level: Level used when forwarding the line to the logger
        """
        with self._lock:
            self._lines.append(message)
        self._logger.log(level, message)
        for listener in self._listeners:
            try:
                listener(message)
            except Exception as e:
                self._logger.error(f"Error in import log listener: {str(e)}")

    def error(self, message: str) -> None:
        self.add(message, level=logging.ERROR)

    def warning(self, message: str) -> None:
        self.add(message, level=logging.WARNING)

    @property
    def lines(self) -> List[str]:
        with self._lock:
            return list(self._lines)
