"""
Structured logging for urlpreview.

Console and optional file output, plus counters that track how many
candidates were resolved and by which service.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Logger with console and file outputs.
    Tracks resolution metrics for batch runs.
    """

    def __init__(
        self,
        name: str = "urlpreview",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Args:
            name: Name of the underlying stdlib logger
            level: Threshold for the logger and its console output
            log_dir: Where daily log files go (default: logs/)
            enable_file: Write a daily urlpreview_YYYYMMDD.log
            enable_console: Echo to stdout, where CLI output also goes
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()

        self.metrics = {
            "resolutions_attempted": 0,
            "resolutions_matched": 0,
            "resolutions_unmatched": 0,
            "service_hits": {},
        }

        if enable_console:
            self._add_handler(
                logging.StreamHandler(sys.stdout),
                getattr(logging, level.upper()),
                '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            )

        if enable_file:
            log_dir = log_dir or Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / f"urlpreview_{datetime.now():%Y%m%d}.log"
            # File keeps DEBUG even when the console is quieter
            self._add_handler(
                logging.FileHandler(log_file, encoding='utf-8'),
                logging.DEBUG,
                '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            )

    def _add_handler(self, handler: logging.Handler, level: int, fmt: str):
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt='%Y-%m-%d %H:%M:%S'))
        self.logger.addHandler(handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_resolution(self, service: Optional[str]):
        """Record one resolution; service is None when nothing matched."""
        self.metrics["resolutions_attempted"] += 1
        if service is None:
            self.metrics["resolutions_unmatched"] += 1
            return
        self.metrics["resolutions_matched"] += 1
        hits = self.metrics["service_hits"]
        hits[service] = hits.get(service, 0) + 1

    def get_metrics(self) -> dict:
        """Return current metrics with the overall match rate."""
        metrics_copy = dict(self.metrics, service_hits=dict(self.metrics["service_hits"]))
        attempted = metrics_copy["resolutions_attempted"]
        metrics_copy["match_rate"] = (
            round(metrics_copy["resolutions_matched"] / attempted, 3) if attempted else 0
        )
        return metrics_copy

    def log_metrics_summary(self):
        metrics = self.get_metrics()

        self.info("=== Resolution Metrics ===")
        self.info(
            f"Resolved: {metrics['resolutions_matched']}/{metrics['resolutions_attempted']} "
            f"({metrics['match_rate'] * 100:.1f}%)"
        )

        if metrics["service_hits"]:
            self.info("Service Hits:")
            for service, count in sorted(metrics["service_hits"].items()):
                self.info(f"  {service}: {count}")


_global_logger: Optional[StructuredLogger] = None


def get_logger(name: str = "urlpreview", level: str = "INFO", **kwargs) -> StructuredLogger:
    """Process-wide logger; arguments only apply on the first call."""
    global _global_logger
    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)
    return _global_logger


def reset_logger():
    global _global_logger
    _global_logger = None
