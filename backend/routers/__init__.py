"""Routers module - FastAPI route handlers"""

from . import config, diff, pages

__all__ = ["config", "diff", "pages"]
