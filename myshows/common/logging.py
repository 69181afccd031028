from __future__ import annotations

import json
import logging
import sys
import time
from typing import IO, Any, Mapping, MutableMapping, Optional



_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

# LogRecord attributes that never end up in the JSON payload
_RESERVED_ATTRS = frozenset((
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "taskName", "thread", "threadName",
))

_SENSITIVE_HEADERS = frozenset(("authorization", "authorization2", "cookie"))

_ROOT_LOGGER = "myshows"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: MutableMapping[str, Any] = {
            "ts": int(time.time() * 1000),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        for k, v in record.__dict__.items():
            if k not in _RESERVED_ATTRS:
                payload[k] = v

        return json.dumps(payload, ensure_ascii=False, default=str)


def init_logging(level: str = "INFO", *, stream: Optional[IO[str]] = None) -> None:
    root = logging.getLogger()

    # Idempotent: clear existing handlers to avoid duplication
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(_LEVELS.get(level.upper(), logging.INFO))
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name if name else _ROOT_LOGGER)


def redact_headers(headers: Optional[Mapping[str, str]]) -> dict[str, str]:
    """Copy of ``headers`` safe to log: credential-bearing values are masked."""

    redacted: dict[str, str] = {}
    for key, value in (headers or {}).items():
        redacted[key] = "***" if key.lower() in _SENSITIVE_HEADERS else value

    return redacted


# Library code must stay silent unless the host application configures logging.
logging.getLogger(_ROOT_LOGGER).addHandler(logging.NullHandler())
