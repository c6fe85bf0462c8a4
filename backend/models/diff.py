"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, model_validator


class OpKind(str, Enum):
    """Line-level edit operation kinds"""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


class RowKind(str, Enum):
    """Classification of a side-by-side display row"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


class EditOperation(BaseModel):
    """A contiguous run of lines sharing one edit kind"""

    kind: OpKind
    lines: list[str]


class DisplayRow(BaseModel):
    """One aligned row of the side-by-side view"""

    kind: RowKind
    left_line_number: int | None = None  # 1-indexed
    left_text: str | None = None
    right_line_number: int | None = None  # 1-indexed
    right_text: str | None = None

    @model_validator(mode="after")
    def check_sides(self) -> "DisplayRow":
        has_left = self.left_line_number is not None and self.left_text is not None
        has_right = self.right_line_number is not None and self.right_text is not None

        expected = {
            RowKind.UNCHANGED: (True, True),
            RowKind.ADDED: (False, True),
            RowKind.REMOVED: (True, False),
        }[self.kind]
        if (has_left, has_right) != expected:
            raise ValueError(f"{self.kind.value} row has wrong sides populated")
        return self


class DiffStats(BaseModel):
    """Row counts per kind"""

    added: int = 0
    removed: int = 0
    unchanged: int = 0


class DiffResult(BaseModel):
    """Complete side-by-side comparison of two documents"""

    rows: list[DisplayRow]
    stats: DiffStats
    identical: bool


class DiffRequest(BaseModel):
    """Request to compare two already-decoded texts"""

    text_a: str
    text_b: str
