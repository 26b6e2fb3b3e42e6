"""Structured Logging — one JSON object per log line for the forum API.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - Forum context (user_id, thread_id, comment_id, reply_id, resource_id) and
      error fields (error_code, error_category, path) appear only when set
    - setup_logging installs exactly one forum handler, however often the lifespan runs
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_KEYS = (
    "user_id", "thread_id", "comment_id", "reply_id", "resource_id",
    "error_code", "error_category", "path", "status_code",
)

HANDLER_NAME = "forum"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record and its forum extras as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key])
            for key in EXTRA_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the forum handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
