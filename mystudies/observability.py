"""
Logging setup.

The tracker logs through module loggers (logging.getLogger(__name__)).
setup_logging() is called once by the CLI entry point; library users can
configure logging themselves and never call it.
"""

import json
import logging
from datetime import datetime, timezone

# Extra attributes surfaced by the JSON formatter when present on a record
EXTRA_FIELDS = ("event", "record_id", "field", "count", "path")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val if isinstance(val, (int, float, bool)) else str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """
    Configure the root logger.

    Args:
        level: Level name ("DEBUG", "INFO", ...). Unknown names fall back to WARNING.
        fmt: "json" for structured output, anything else for human-readable lines.

    Returns:
        The handler that was installed (handy for removing it again in tests).
    """
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
