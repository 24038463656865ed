import logging
import json
import sys
import time
from typing import Any

from .config import config


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line; `context` extras are merged into the top level."""

    def format(self, record):
        payload = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": config.ENV,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            payload.update(ctx)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def log_context(**fields: Any) -> dict[str, Any]:
    """Build the `extra=` argument for a structured record."""
    return {"context": fields}


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """JSON logger on stderr, stdout is left to the CLI."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level or config.LOG_LEVEL)
    return logger
