"""
Logging System for the Expression Kernel

Thin wrapper around the standard ``logging`` module with coarse verbosity
levels. The kernel itself only emits debug records (walk summaries) and
detail records (failures captured by the ``try_*`` helpers), so library use is
quiet unless the caller raises the level.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Verbosity levels for kernel logging"""
    SILENT = 0      # Nothing at all
    MINIMAL = 1     # Warnings only
    MODERATE = 2    # Informational messages
    DETAILED = 3    # Per-walk summaries
    VERBOSE = 4     # Everything, including debug details


class KernelLogger:
    """
    Centralized logger for the expression kernel
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('expression_kernel')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_kernel_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MODERATE):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def detail(self, message: str):
        """Walk summaries and failures captured by the try_* helpers"""
        if self._should_log(LogLevel.DETAILED):
            self.logger.info(message)

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[KernelLogger] = None


def get_logger() -> KernelLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = KernelLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None or (level == LogLevel.SILENT) != (_global_logger.log_level == LogLevel.SILENT):
        # Console handler presence depends on SILENT, rebuild
        _global_logger = KernelLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> KernelLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = KernelLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions
def log_info(message: str, level: LogLevel = LogLevel.MODERATE):
    get_logger().info(message, level)


def log_detail(message: str):
    get_logger().detail(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)
