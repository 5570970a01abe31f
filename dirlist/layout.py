"""Column-major grid layout for wide listings.

``plan_columns`` picks the largest column count whose rows fit the terminal
width, simulating every candidate count in a single pass over the entry
widths. A candidate is dropped for good as soon as its accumulated line
length exceeds the width. Candidate counts run from 1 to
``term_width // min_width`` even when that exceeds the entry count; such
layouts end in zero-width columns that rendering skips. ``render_grid`` then
prints the cells down each column before moving right.

Example with a 20-column terminal and three 5-cell names::

    >>> plan = plan_columns([5, 5, 5], 20)
    >>> plan.widths, plan.rows
    ((7, 5), 2)
"""

from __future__ import annotations

from dataclasses import dataclass

SPACER = 2
DEFAULT_TERM_WIDTH = 80


@dataclass(frozen=True)
class ColumnPlan:
    """Per-column widths plus the row count used for column-major indexing.

    Every column except the last includes the inter-column spacer. A width of
    ``0`` marks a column no entry reached.
    """

    widths: tuple[int, ...]
    rows: int

    @property
    def columns(self) -> int:
        return len(self.widths)

    @property
    def line_width(self) -> int:
        return sum(self.widths)


@dataclass
class _Candidate:
    """Running simulation state for one candidate column count."""

    columns: int
    rows: int
    widths: list[int]
    line_len: int = 0
    valid: bool = True


def _single_column(count: int, term_width: int) -> ColumnPlan:
    return ColumnPlan(widths=(term_width,), rows=max(count, 0))


def plan_columns(widths: list[int], term_width: int = DEFAULT_TERM_WIDTH) -> ColumnPlan:
    """Choose the widest column-major layout whose lines fit ``term_width``.

    ``widths`` holds each entry's display width in listing order, classify
    suffix included. Names wider than the terminal are never truncated; they
    force a single column and simply overflow the line.
    """
    count = len(widths)
    if count <= 1:
        return _single_column(count, term_width)

    min_width = min(min(w + SPACER for w in widths), term_width)
    num_possible = term_width // min_width if min_width > 0 else 0
    if num_possible <= 1:
        return _single_column(count, term_width)

    candidates: list[_Candidate] = []
    for columns in range(1, num_possible + 1):
        rows = (count + columns - 1) // columns
        candidates.append(_Candidate(columns=columns, rows=rows, widths=[0] * columns))

    for idx, width in enumerate(widths):
        for cand in candidates:
            if not cand.valid:
                continue
            col = idx // cand.rows
            real_width = width if col == cand.columns - 1 else width + SPACER
            if real_width > cand.widths[col]:
                cand.line_len += real_width - cand.widths[col]
                cand.widths[col] = real_width
                if cand.line_len > term_width:
                    cand.valid = False

    for cand in reversed(candidates):
        if cand.valid:
            return ColumnPlan(widths=tuple(cand.widths), rows=cand.rows)
    return _single_column(count, term_width)


def render_grid(cells: list[str], widths: list[int], plan: ColumnPlan) -> list[str]:
    """Lay out pre-rendered ``cells`` row by row following ``plan``.

    ``cells`` may contain color escapes; ``widths`` gives their visible
    widths. Padding is only added between columns, never after the last
    populated column on a line.
    """
    count = len(cells)
    if count == 0:
        return []

    rows = max(plan.rows, 1)
    lines: list[str] = []
    for row in range(rows):
        parts: list[str] = []
        col = 0
        while True:
            idx = col * rows + row
            if idx >= count:
                break
            parts.append(cells[idx])
            next_col = col + 1
            next_idx = next_col * rows + row
            if next_col >= plan.columns or plan.widths[next_col] == 0 or next_idx >= count:
                break
            parts.append(" " * max(plan.widths[col] - widths[idx], 0))
            col = next_col
        lines.append("".join(parts))
    return lines
