"""Models module - Pydantic data models"""

from .diff import (
    DiffRequest,
    DiffResult,
    DiffStats,
    DisplayRow,
    EditOperation,
    OpKind,
    RowKind,
)

__all__ = [
    "DiffRequest",
    "DiffResult",
    "DiffStats",
    "DisplayRow",
    "EditOperation",
    "OpKind",
    "RowKind",
]
