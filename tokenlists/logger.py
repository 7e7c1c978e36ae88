"""
Structured logging system for tokenlists.

Provides centralized logging with console and optional file output,
plus counters summarising the diffs and bumps computed in a session.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics about the token lists processed in a session.
    """

    def __init__(
        self,
        name: str = "tokenlists",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files; no file is written when None
            enable_file: Write logs to file (requires log_dir)
            enable_console: Output logs to stderr
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.metrics = {
            "lists_diffed": 0,
            "tokens_added": 0,
            "tokens_removed": 0,
            "tokens_changed": 0,
            "validation_failures": 0,
            "bumps_by_kind": {},
        }

        # stdout carries command output, so log lines go to stderr
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file and log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"tokenlists_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if not self.logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_diff(self, added: int, removed: int, changed: int):
        """Record the outcome of one list diff."""
        self.metrics["lists_diffed"] += 1
        self.metrics["tokens_added"] += added
        self.metrics["tokens_removed"] += removed
        self.metrics["tokens_changed"] += changed

    def record_bump(self, kind: str):
        """Record a computed version bump by its kind name."""
        bumps = self.metrics["bumps_by_kind"]
        bumps[kind] = bumps.get(kind, 0) + 1

    def record_validation_failure(self):
        self.metrics["validation_failures"] += 1

    def get_metrics(self) -> dict:
        """Return a copy of the current metrics."""
        metrics_copy = self.metrics.copy()
        metrics_copy["bumps_by_kind"] = dict(self.metrics["bumps_by_kind"])
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Token List Session Metrics ===")
        self.info(f"Lists diffed: {metrics['lists_diffed']}")
        self.info(
            f"Tokens: +{metrics['tokens_added']} "
            f"-{metrics['tokens_removed']} ~{metrics['tokens_changed']}"
        )

        if metrics["bumps_by_kind"]:
            self.info("Bumps:")
            for kind, count in metrics["bumps_by_kind"].items():
                self.info(f"  {kind}: {count}")

        if metrics["validation_failures"]:
            self.info(f"Validation failures: {metrics['validation_failures']}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "tokenlists",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def configure_logger(level: str = "INFO", log_dir: Optional[Path] = None) -> StructuredLogger:
    """
    Reconfigure the global logger in place.

    Modules bind the global instance at import time, so the CLI rebuilds
    its handlers rather than replacing the object.
    """
    logger = get_logger()
    fresh = StructuredLogger(name=logger.logger.name, level=level, log_dir=log_dir)
    logger.logger = fresh.logger
    return logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
