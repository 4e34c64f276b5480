import json
import logging
import sys
import uuid
from typing import Any, Dict

from flask import g, request

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RESERVED = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "request_id"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if getattr(record, "request_id", None):
            base["request_id"] = record.request_id
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                base[key] = value
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, default=str)


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        try:
            record.request_id = getattr(g, "request_id", None)
        except RuntimeError:
            record.request_id = None
        return True


def configure_logging(log_level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = [handler]


def ensure_request_id():
    req_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
    g.request_id = req_id


def attach_request_id(response):
    req_id = getattr(g, "request_id", None)
    if req_id:
        response.headers["X-Request-Id"] = req_id
    return response
