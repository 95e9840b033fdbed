"""Shared logging configuration with per-module tags."""
from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict, MutableMapping

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(job_name)s] %(name)s: %(message)s"


class _JobNameFilter(logging.Filter):
    """Make sure every record carries the fields our formatter expects."""

    def __init__(self, job_name: str) -> None:
        super().__init__()
        self.job_name = job_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "job_name"):
            record.job_name = self.job_name
        if not hasattr(record, "tag"):
            record.tag = "-"
        return True


def build_logging_config(level: str = "INFO", job_name: str = "weather_relay") -> Dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "job_name": {
                "()": _JobNameFilter,
                "job_name": job_name,
            },
        },
        "formatters": {
            "default": {"format": DEFAULT_FORMAT},
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "default",
                "filters": ["job_name"],
            },
        },
        "root": {
            "level": level.upper(),
            "handlers": ["stdout"],
        },
        "loggers": {
            # urllib3 retries are noisy at INFO.
            "urllib3": {"level": "WARNING"},
        },
    }


def setup_logging(level: str = "INFO", job_name: str = "weather_relay") -> None:
    """Configure the root logger for scripts and manual helpers."""
    logging.config.dictConfig(build_logging_config(level=level, job_name=job_name))


class TaggedLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that stamps a static tag into every record."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]):
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("tag", self.extra["tag"])
        kwargs["extra"] = extra
        return f"[{self.extra['tag']}] {msg}", kwargs


def get_tagged_logger(name: str, tag: str) -> TaggedLoggerAdapter:
    """Return a logger whose messages are prefixed with ``tag``."""
    return TaggedLoggerAdapter(logging.getLogger(name), {"tag": tag})
