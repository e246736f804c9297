"""
Logging System for the Expression Engine

Centralized logger with verbosity levels. The library modules only emit
records through ``logging.getLogger(__name__)``; handlers are attached here,
by whoever drives the engine (normally the command-line front end).
"""

import logging
import sys
from typing import Optional
from enum import Enum


class LogLevel(Enum):
    """Verbosity levels"""
    SILENT = 0      # Nothing at all
    MINIMAL = 1     # Errors only
    MODERATE = 2    # Errors and warnings
    DETAILED = 3    # Plus informational messages
    VERBOSE = 4     # Everything including debug details


_STDLIB_LEVELS = {
    LogLevel.SILENT: logging.CRITICAL + 1,
    LogLevel.MINIMAL: logging.ERROR,
    LogLevel.MODERATE: logging.WARNING,
    LogLevel.DETAILED: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
}

LOGGER_NAME = 'symbolic_diff'


class DifferentiatorLogger:
    """
    Owns the package logger and its handlers; messages go to stderr so the
    command's result on stdout stays machine readable
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream=None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter('%(levelname)s: %(message)s')

        console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = "symbolic_diff.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%H:%M:%S'
            ))
            self.logger.addHandler(file_handler)

        self.set_level(log_level)

    def set_level(self, log_level: LogLevel):
        self.log_level = log_level
        self.logger.setLevel(_STDLIB_LEVELS[log_level])

    def is_enabled(self, log_level: LogLevel) -> bool:
        """Whether records at this verbosity would be emitted"""
        return self.logger.isEnabledFor(_STDLIB_LEVELS[log_level])

    def error(self, message: str):
        self.logger.error(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def info(self, message: str):
        self.logger.info(message)

    def debug(self, message: str):
        self.logger.debug(message)


# Global logger instance
_global_logger: Optional[DifferentiatorLogger] = None


def get_logger() -> DifferentiatorLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = DifferentiatorLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = DifferentiatorLogger(log_level=level)
    else:
        _global_logger.set_level(level)


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream=None) -> DifferentiatorLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = DifferentiatorLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger
