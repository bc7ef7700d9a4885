"""
Structured logging for Edgelog.

Provides a pre-configured logger that emits JSON-structured log records
with request context (endpoint kind, service, version, operation) for
easy filtering in log aggregation tools.
"""

from __future__ import annotations

import json
import logging
import uuid
from typing import Any

_CONTEXT_KEYS = ("request_id", "endpoint_kind", "service_id", "version", "operation")


class StructuredFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Attach any extras injected via EdgelogLogger.log_operation
        for key in _CONTEXT_KEYS:
            val = getattr(record, key, None)
            if val is not None:
                log_entry[key] = val
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = str(record.exc_info[1])
        return json.dumps(log_entry)


class EdgelogLogger:
    """Convenience wrapper around :mod:`logging` for endpoint operations."""

    def __init__(self, name: str = "edgelog") -> None:
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredFormatter())
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def log_operation(
        self,
        level: int,
        message: str,
        *,
        endpoint_kind: str | None = None,
        service_id: str | None = None,
        version: int | None = None,
        operation: str | None = None,
        request_id: str | None = None,
        exc_info: bool = False,
    ) -> None:
        """Emit a structured log record with operation context.

        Args:
            level: Logging level (e.g. logging.INFO).
            message: Human-readable message.
            endpoint_kind: Logging endpoint kind (e.g. 'bigquery').
            service_id: Service the call is scoped to.
            version: Service version the call is scoped to.
            operation: Operation name (e.g. 'create_bigquery').
            request_id: Optional correlation ID; auto-generated if omitted.
            exc_info: Whether to include exception info.
        """
        extra = {
            "endpoint_kind": endpoint_kind,
            "service_id": service_id,
            "version": version,
            "operation": operation,
            "request_id": request_id or uuid.uuid4().hex[:12],
        }
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.INFO, message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log_operation(logging.DEBUG, message, **kwargs)


# Module-level singleton
el_logger = EdgelogLogger()
