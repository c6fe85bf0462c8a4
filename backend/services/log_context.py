"""Logging setup with the current comparison id injected into each record"""

from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar

comparison_id_context: ContextVar[str | None] = ContextVar("comparison_id", default=None)


class ContextFilter(logging.Filter):
    """Prefixes log messages with the comparison id, if one is set"""

    def filter(self, record):
        comparison_id = comparison_id_context.get()
        if comparison_id:
            record.msg = f"[{comparison_id}] {record.msg}"
        return True


def new_comparison_id() -> str:
    """Start a new comparison and bind its id to the current context"""
    comparison_id = uuid.uuid4().hex[:8]
    comparison_id_context.set(comparison_id)
    return comparison_id


def setup_logging(level: str = "INFO"):
    """Call this once at app startup."""
    root_logger = logging.getLogger()

    # Clear any existing handlers (prevents duplicates)
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    handler.addFilter(ContextFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(level)
