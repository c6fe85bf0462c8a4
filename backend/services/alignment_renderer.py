"""Alignment Renderer - Project edit operations onto side-by-side rows"""

from __future__ import annotations

from collections.abc import Iterable

from models.diff import DisplayRow, EditOperation, OpKind, RowKind


class AlignmentRenderer:
    """Turn an edit script into numbered, two-column display rows"""

    def render(self, operations: Iterable[EditOperation]) -> list[DisplayRow]:
        left_line = 1
        right_line = 1
        rows: list[DisplayRow] = []

        for operation in operations:
            for line in operation.lines:
                if operation.kind == OpKind.INSERT:
                    rows.append(
                        DisplayRow(
                            kind=RowKind.ADDED,
                            right_line_number=right_line,
                            right_text=line,
                        )
                    )
                    right_line += 1
                elif operation.kind == OpKind.DELETE:
                    rows.append(
                        DisplayRow(
                            kind=RowKind.REMOVED,
                            left_line_number=left_line,
                            left_text=line,
                        )
                    )
                    left_line += 1
                else:
                    rows.append(
                        DisplayRow(
                            kind=RowKind.UNCHANGED,
                            left_line_number=left_line,
                            left_text=line,
                            right_line_number=right_line,
                            right_text=line,
                        )
                    )
                    left_line += 1
                    right_line += 1

        return rows
