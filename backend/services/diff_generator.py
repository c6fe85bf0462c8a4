"""
Diff Generator Service - Compose line diffing and alignment for two documents
"""

from __future__ import annotations

from models.diff import DiffResult, DiffStats, DisplayRow, RowKind

from .alignment_renderer import AlignmentRenderer
from .line_differ import LineDiffer, split_lines


class DiffGenerator:
    """Generate side-by-side diffs for two decoded text documents"""

    def __init__(self):
        self.differ = LineDiffer()
        self.renderer = AlignmentRenderer()

    def generate_rows(self, text_a: str, text_b: str) -> list[DisplayRow]:
        """Split both texts into lines, diff them and align the result"""
        operations = self.differ.diff(split_lines(text_a), split_lines(text_b))
        return self.renderer.render(operations)

    def generate_diff(self, text_a: str, text_b: str) -> DiffResult:
        """Generate rows plus per-kind statistics"""
        rows = self.generate_rows(text_a, text_b)
        stats = self._count_rows(rows)

        return DiffResult(
            rows=rows,
            stats=stats,
            identical=stats.added == 0 and stats.removed == 0,
        )

    @staticmethod
    def _count_rows(rows: list[DisplayRow]) -> DiffStats:
        stats = DiffStats()
        for row in rows:
            if row.kind == RowKind.ADDED:
                stats.added += 1
            elif row.kind == RowKind.REMOVED:
                stats.removed += 1
            else:
                stats.unchanged += 1
        return stats


def diff(text_a: str, text_b: str) -> list[DisplayRow]:
    """Compare two texts and return their aligned display rows"""
    return DiffGenerator().generate_rows(text_a, text_b)
