"""
Line Differ - Minimal line-level edit scripts between two documents

Implements Myers' O(ND) shortest edit script over whole lines, in its
linear-space form: the middle snake of the remaining region is found by
searching forward and backward at once, and the two halves on either side
of it are diffed recursively. Working memory is O(N+M).

Common prefix and suffix are trimmed at every level. Regions where one side
is much shorter than the other are solved with an LCS table instead, since
there the table is smaller than the Myers search space.

Lines end at "\\r\\n", "\\n" or a lone "\\r". The lone "\\r" also counts, so
classic Mac files split into lines instead of collapsing into one.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from models.diff import EditOperation, OpKind

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

# Upper bound on LCS table cells for lopsided regions
TABLE_CELL_LIMIT = 1_000_000

Step = tuple[OpKind, str]


def split_lines(text: str) -> list[str]:
    """Split text into lines, dropping terminators and the phantom last line"""
    if not text:
        return []

    lines = LINE_BREAK_PATTERN.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


class LineDiffer:
    """Compute minimal edit scripts between two line sequences"""

    def diff(self, lines_a: Sequence[str], lines_b: Sequence[str]) -> list[EditOperation]:
        """Return merged equal/insert/delete runs transforming lines_a into lines_b"""
        steps = self._edit_steps(list(lines_a), list(lines_b))
        return self._group_runs(steps)

    @staticmethod
    def _common_prefix(a: list[str], b: list[str]) -> int:
        limit = min(len(a), len(b))
        count = 0
        while count < limit and a[count] == b[count]:
            count += 1
        return count

    @staticmethod
    def _common_suffix(a: list[str], b: list[str], prefix: int) -> int:
        limit = min(len(a), len(b)) - prefix
        count = 0
        while count < limit and a[-1 - count] == b[-1 - count]:
            count += 1
        return count

    @staticmethod
    def _prefers_table(n: int, m: int) -> bool:
        """True when an n*m table is no larger than the (n+m)*D Myers search"""
        cells = n * m
        # D is at least |n - m|
        return cells <= TABLE_CELL_LIMIT and cells <= (n + m) * abs(n - m)

    def _edit_steps(self, a: list[str], b: list[str]) -> list[Step]:
        """Single-line steps of a shortest edit script, in order"""
        prefix = self._common_prefix(a, b)
        suffix = self._common_suffix(a, b, prefix)

        middle_a = a[prefix : len(a) - suffix]
        middle_b = b[prefix : len(b) - suffix]

        steps: list[Step] = [(OpKind.EQUAL, line) for line in a[:prefix]]
        if not middle_a:
            steps.extend((OpKind.INSERT, line) for line in middle_b)
        elif not middle_b:
            steps.extend((OpKind.DELETE, line) for line in middle_a)
        elif self._prefers_table(len(middle_a), len(middle_b)):
            steps.extend(self._table_steps(middle_a, middle_b))
        else:
            steps.extend(self._bisect(middle_a, middle_b))
        steps.extend((OpKind.EQUAL, line) for line in a[len(a) - suffix :])
        return steps

    @staticmethod
    def _table_steps(a: list[str], b: list[str]) -> list[Step]:
        """Edit steps read off a suffix LCS length table"""
        n, m = len(a), len(b)
        # lengths[i][j] is the LCS length of a[i:] and b[j:]
        lengths = [[0] * (m + 1) for _ in range(n + 1)]
        for i in range(n - 1, -1, -1):
            row, below = lengths[i], lengths[i + 1]
            for j in range(m - 1, -1, -1):
                if a[i] == b[j]:
                    row[j] = below[j + 1] + 1
                else:
                    row[j] = max(below[j], row[j + 1])

        steps: list[Step] = []
        i = j = 0
        while i < n and j < m:
            if a[i] == b[j]:
                steps.append((OpKind.EQUAL, a[i]))
                i += 1
                j += 1
            elif lengths[i + 1][j] >= lengths[i][j + 1]:
                steps.append((OpKind.DELETE, a[i]))
                i += 1
            else:
                steps.append((OpKind.INSERT, b[j]))
                j += 1
        steps.extend((OpKind.DELETE, line) for line in a[i:])
        steps.extend((OpKind.INSERT, line) for line in b[j:])
        return steps

    def _bisect(self, a: list[str], b: list[str]) -> list[Step]:
        """Find the middle snake and diff the regions before and after it"""
        n, m = len(a), len(b)
        max_d = (n + m + 1) // 2
        offset = max_d
        size = 2 * max_d + 2
        # forward[offset + k] is the furthest x on diagonal k from the top left,
        # backward[offset + k] the same measured from the bottom right
        forward = [-1] * size
        backward = [-1] * size
        forward[offset + 1] = 0
        backward[offset + 1] = 0

        delta = n - m
        # With odd delta the paths can only meet on a forward step
        check_forward = delta % 2 != 0

        # Diagonals already run off the grid are skipped from then on
        k1_start = k1_end = k2_start = k2_end = 0

        for d in range(max_d):
            for k1 in range(-d + k1_start, d + 1 - k1_end, 2):
                k1_index = offset + k1
                if k1 == -d or (k1 != d and forward[k1_index - 1] < forward[k1_index + 1]):
                    x1 = forward[k1_index + 1]
                else:
                    x1 = forward[k1_index - 1] + 1
                y1 = x1 - k1
                while x1 < n and y1 < m and a[x1] == b[y1]:
                    x1 += 1
                    y1 += 1
                forward[k1_index] = x1

                if x1 > n:
                    k1_end += 2
                elif y1 > m:
                    k1_start += 2
                elif check_forward:
                    k2_index = offset + delta - k1
                    if 0 <= k2_index < size and backward[k2_index] != -1:
                        if x1 >= n - backward[k2_index]:
                            return self._split(a, b, x1, y1)

            for k2 in range(-d + k2_start, d + 1 - k2_end, 2):
                k2_index = offset + k2
                if k2 == -d or (k2 != d and backward[k2_index - 1] < backward[k2_index + 1]):
                    x2 = backward[k2_index + 1]
                else:
                    x2 = backward[k2_index - 1] + 1
                y2 = x2 - k2
                while x2 < n and y2 < m and a[n - x2 - 1] == b[m - y2 - 1]:
                    x2 += 1
                    y2 += 1
                backward[k2_index] = x2

                if x2 > n:
                    k2_end += 2
                elif y2 > m:
                    k2_start += 2
                elif not check_forward:
                    k1_index = offset + delta - k2
                    if 0 <= k1_index < size and forward[k1_index] != -1:
                        x1 = forward[k1_index]
                        y1 = offset + x1 - k1_index
                        if x1 >= n - x2:
                            return self._split(a, b, x1, y1)

        # Nothing in common
        return [(OpKind.DELETE, line) for line in a] + [(OpKind.INSERT, line) for line in b]

    def _split(self, a: list[str], b: list[str], x: int, y: int) -> list[Step]:
        return self._edit_steps(a[:x], b[:y]) + self._edit_steps(a[x:], b[y:])

    @staticmethod
    def _group_runs(steps: list[Step]) -> list[EditOperation]:
        """Merge steps into runs; each change block becomes delete run then insert run"""
        operations: list[EditOperation] = []
        equal: list[str] = []
        deleted: list[str] = []
        inserted: list[str] = []

        def flush_equal():
            if equal:
                operations.append(EditOperation(kind=OpKind.EQUAL, lines=equal.copy()))
                equal.clear()

        def flush_changes():
            if deleted:
                operations.append(EditOperation(kind=OpKind.DELETE, lines=deleted.copy()))
                deleted.clear()
            if inserted:
                operations.append(EditOperation(kind=OpKind.INSERT, lines=inserted.copy()))
                inserted.clear()

        for kind, line in steps:
            if kind == OpKind.EQUAL:
                flush_changes()
                equal.append(line)
            else:
                flush_equal()
                if kind == OpKind.DELETE:
                    deleted.append(line)
                else:
                    inserted.append(line)

        flush_equal()
        flush_changes()
        return operations
