# This project was developed with assistance from AI tools.
"""Logging setup with per-request context (request id and tenant)."""

import logging
import sys
from contextvars import ContextVar

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
org_id_var: ContextVar[str | None] = ContextVar("org_id", default=None)


class LoggingContextFilter(logging.Filter):
    """Inject request_id and org_id from contextvars into each record.

    Placeholders are used when no request is in flight.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        record.org_id = org_id_var.get() or "-"
        return True


def configure_logging(level: int | str = logging.INFO) -> None:
    """Install a stdout handler with the request-context format on the root logger."""
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | rid=%(request_id)s | org=%(org_id)s | %(message)s"
        )
    )
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
