"""Logging configuration.

Provides either human-readable lines or JSON lines with:
- Category detection (path, shape, svg, cli, system)
- Extra fields passed via `logger.info(..., extra={...})`, with path
  command records dumped as JSON and the `commands` count lifted to the top
- Exception text when present
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from typing import TextIO

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def _json_safe(value: Any) -> Any:
    """Make an extra value JSON-serializable."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, list | tuple) and value and all(
        isinstance(v, BaseModel) for v in value
    ):
        return [v.model_dump(mode="json") for v in value]
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class StructuredFormatter(logging.Formatter):
    """JSON formatter, one object per line.

    A `commands` extra (the size of a path just built, loaded or joined) is
    written as a top-level field so path sizes can be filtered on directly.
    """

    # Logger name prefixes to categories
    CATEGORY_MAP = {
        "shapepath.builder": "path",
        "shapepath.shapes": "shape",
        "shapepath.samplers": "shape",
        "shapepath.svg": "svg",
        "shapepath.cli": "cli",
    }

    PROMOTED_FIELDS = ("commands",)

    def _get_category(self, logger_name: str) -> str:
        """Determine category from logger name (whole module prefixes only)."""
        for prefix, cat in self.CATEGORY_MAP.items():
            if logger_name == prefix or logger_name.startswith(prefix + "."):
                return cat
        return "system"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_record: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "category": self._get_category(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: _json_safe(val)
            for key, val in vars(record).items()
            if key not in _RECORD_FIELDS and not key.startswith("_")
        }
        for key in self.PROMOTED_FIELDS:
            if key in extra:
                log_record[key] = extra.pop(key)
        if extra:
            log_record["extra"] = extra

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def configure_logging(
    *,
    json_format: bool = False,
    log_level: int | str = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Configure application logging.

    Args:
        json_format: Use JSON formatting instead of human-readable lines
        log_level: Minimum log level (number or name such as "DEBUG")
        stream: Stream to write to (default: sys.stderr)
    """
    import sys

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper() if isinstance(log_level, str) else log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)5s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)
