"""Logging for prommongo.

``logger`` is a ``ContextualLogger``: a ``logging.LoggerAdapter`` whose
``with_context(**fields)`` returns a child adapter carrying extra structured
fields.  The fields are rendered as ``key=value`` pairs after the message.
"""

import logging
import sys
from typing import Any, MutableMapping

from prommongo.core.config import settings

_LOGGER_NAME = "prommongo"


class _ContextFormatter(logging.Formatter):
    """Append the adapter's context fields to each record."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
            message = f"{message} [{pairs}]"
        return message


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries structured context fields."""

    def __init__(self, logger: logging.Logger, extra: dict[str, Any] | None = None) -> None:
        super().__init__(logger, extra or {})

    def with_context(self, **fields: Any) -> "ContextualLogger":
        """Return a child logger with ``fields`` merged into this logger's context."""
        return ContextualLogger(self.logger, {**self.extra, **fields})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.pop("extra", None) or {})
        extra["context"] = {**self.extra, **extra.pop("context", {})}
        kwargs["extra"] = extra
        return msg, kwargs


def _configure(level: str) -> logging.Logger:
    base = logging.getLogger(_LOGGER_NAME)
    if not base.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            _ContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        base.addHandler(handler)
    base.setLevel(level.upper())
    return base


logger = ContextualLogger(_configure(settings.LOG_LEVEL))
