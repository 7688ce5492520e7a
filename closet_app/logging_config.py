"""JSON logging for the ClosetIQ service.

Every record is rendered as a single JSON object. Closet payloads are scrubbed
before they reach a handler: owner ids, image links and purchase details are
removed, and whole closet items collapse to a short ``<item_id>:<category>``
label so a request with a large closet does not flood the log.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Iterator

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)

# Attributes every LogRecord carries; anything else on a record came from ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

_PRIVATE_KEYS = frozenset(
    {
        "user_id",
        "userId",
        "email",
        "image_url",
        "imageUrl",
        "price",
        "purchase_date",
        "purchaseDate",
    }
)
_EMAIL = re.compile(r"[\w.+\-]+@[\w\-]+(?:\.[\w\-]+)+")
_URL = re.compile(r"https?://\S+", re.IGNORECASE)
_INBOUND_ID = re.compile(r"[A-Za-z0-9._\-]{1,64}")


class JsonFormatter(logging.Formatter):
    """Render a record as the fixed envelope followed by its extra fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        document: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "event": getattr(record, "event", message),
            "message": message,
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and key not in document:
                document[key] = redact_for_log(value)
        if record.exc_info:
            document["exception"] = self.formatException(record.exc_info)
        return json.dumps(document, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Send all logging to stderr as JSON at ``level`` (``LOG_LEVEL`` by default)."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def _mask_text(text: str) -> str:
    return _URL.sub("[redacted-url]", _EMAIL.sub("[redacted-email]", text))


def _item_label(value: Any) -> str | None:
    """Return ``<item_id>:<category>`` when ``value`` is a closet item or item document."""

    if isinstance(value, Mapping):
        item_id = value.get("item_id", value.get("id"))
        category = value.get("category")
    else:
        item_id = getattr(value, "item_id", None)
        category = getattr(value, "category", None)
    if item_id is None or category is None:
        return None
    return f"{item_id}:{category}"


def redact_for_log(value: Any) -> Any:
    """Return a JSON-friendly copy of ``value`` with private closet details removed."""

    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, str):
        return _mask_text(value)
    label = _item_label(value)
    if label is not None:
        return label
    if isinstance(value, Mapping):
        return {
            key: "[redacted]" if key in _PRIVATE_KEYS else redact_for_log(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple, set, frozenset)):
        return [redact_for_log(item) for item in value]
    return _mask_text(str(value))


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Return the active correlation id, binding ``correlation_id`` or a new one if needed."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current is None:
        current = uuid.uuid4().hex
        CORRELATION_ID.set(current)
    return current


@contextlib.contextmanager
def request_correlation(inbound: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of one HTTP request.

    An id sent by the mobile client is reused when it is a short token of
    letters, digits, ``.``, ``_`` or ``-``; otherwise a fresh id is generated.
    """

    candidate = (inbound or "").strip()
    correlation_id = candidate if _INBOUND_ID.fullmatch(candidate) else uuid.uuid4().hex
    token = CORRELATION_ID.set(correlation_id)
    try:
        yield correlation_id
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with ``fields`` attached as scrubbed structured attributes."""

    exc_info = fields.pop("exc_info", None)
    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    extra = {
        key: "[redacted]" if key in _PRIVATE_KEYS else redact_for_log(value)
        for key, value in fields.items()
    }
    extra.update(event=event, correlation_id=correlation_id)
    logger.log(level, event, exc_info=exc_info, extra=extra)


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
    "request_correlation",
]
