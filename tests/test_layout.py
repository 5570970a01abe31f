"""Column planning and grid rendering tests.

Covers the greedy column-count search, its degenerate cases, and the
column-major row output built from a plan.
"""

from __future__ import annotations

import unittest

from dirlist.layout import SPACER, ColumnPlan, plan_columns, render_grid


def _simulated_line_width(widths: list[int], columns: int) -> int:
    """Line width of an independent column-major layout with ``columns`` columns."""
    rows = (len(widths) + columns - 1) // columns
    column_widths = [0] * columns
    for idx, width in enumerate(widths):
        col = idx // rows
        real = width if col == columns - 1 else width + SPACER
        column_widths[col] = max(column_widths[col], real)
    return sum(column_widths)


class PlanColumnsTests(unittest.TestCase):
    def test_three_equal_names_fill_two_columns_on_narrow_terminal(self) -> None:
        plan = plan_columns([5, 5, 5], 20)

        self.assertEqual(plan.columns, 2)
        self.assertEqual(plan.widths, (7, 5))
        self.assertEqual(plan.rows, 2)
        self.assertLessEqual(plan.line_width, 20)

    def test_empty_and_single_entry_use_one_column(self) -> None:
        empty = plan_columns([], 80)
        self.assertEqual(empty.columns, 1)
        self.assertEqual(render_grid([], [], empty), [])

        single = plan_columns([5], 80)
        self.assertEqual(single.columns, 1)
        self.assertGreaterEqual(single.widths[0], 5)

    def test_name_wider_than_terminal_forces_single_column(self) -> None:
        plan = plan_columns([30, 2], 20)

        self.assertEqual(plan, ColumnPlan(widths=(20,), rows=2))
        lines = render_grid(["x" * 30, "ab"], [30, 2], plan)
        self.assertEqual(lines, ["x" * 30, "ab"])

    def test_only_one_name_fits_per_line_when_minimum_width_is_large(self) -> None:
        plan = plan_columns([12, 15, 14], 20)

        self.assertEqual(plan.columns, 1)
        self.assertEqual(plan.widths, (20,))

    def test_wide_first_entry_limits_column_count(self) -> None:
        widths = [10, 3, 3, 3, 3, 3, 3, 3]
        plan = plan_columns(widths, 20)

        self.assertEqual(plan.widths, (12, 5, 3))
        self.assertEqual(plan.rows, 3)
        self.assertGreater(_simulated_line_width(widths, 4), 20)

    def test_candidates_are_not_limited_to_entry_count(self) -> None:
        cells = ["aaaaa", "bbbbb", "ccccc"]
        widths = [5, 5, 5]
        plan = plan_columns(widths, 80)

        self.assertEqual(plan.columns, 80 // 7)
        self.assertEqual(plan.widths, (7, 7, 7) + (0,) * 8)
        self.assertEqual(plan.rows, 1)
        self.assertEqual(render_grid(cells, widths, plan), ["aaaaa  bbbbb  ccccc"])

    def test_chosen_column_count_is_maximal(self) -> None:
        samples = [
            ([4, 9, 2, 7, 7, 1, 12, 3, 5, 6, 8, 2, 2, 10], 40),
            ([1] * 50, 30),
            ([6, 6, 6, 6, 6, 6, 6], 25),
            ([3, 14, 3, 3, 3, 3, 22, 3, 3, 5], 60),
        ]
        for widths, term_width in samples:
            with self.subTest(widths=widths, term_width=term_width):
                plan = plan_columns(widths, term_width)
                self.assertLessEqual(plan.line_width, term_width)
                self.assertEqual(plan.line_width, _simulated_line_width(widths, plan.columns))

                num_possible = term_width // min(w + SPACER for w in widths)
                for bigger in range(plan.columns + 1, num_possible + 1):
                    self.assertGreater(_simulated_line_width(widths, bigger), term_width)


class RenderGridTests(unittest.TestCase):
    def test_entries_fill_down_columns_first(self) -> None:
        cells = ["aaaaa", "bbbbb", "ccccc"]
        widths = [5, 5, 5]
        lines = render_grid(cells, widths, plan_columns(widths, 20))

        self.assertEqual(lines, ["aaaaa  ccccc", "bbbbb"])

    def test_padding_only_between_populated_columns(self) -> None:
        cells = ["aaaaaaaaaa", "bbb", "ccc", "ddd", "eee", "fff", "ggg", "hhh"]
        widths = [len(cell) for cell in cells]
        lines = render_grid(cells, widths, plan_columns(widths, 20))

        self.assertEqual(
            lines,
            [
                "aaaaaaaaaa  ddd  ggg",
                "bbb         eee  hhh",
                "ccc         fff",
            ],
        )

    def test_stops_at_column_no_entry_reached(self) -> None:
        cells = ["aaa", "bbb", "ccc", "ddd"]
        widths = [3, 3, 3, 3]
        plan = plan_columns(widths, 15)

        self.assertEqual(plan.widths, (5, 5, 0))
        self.assertEqual(render_grid(cells, widths, plan), ["aaa  ccc", "bbb  ddd"])

    def test_escape_sequences_do_not_affect_padding(self) -> None:
        cells = ["\x1b[34mdir\x1b[0m", "a", "b"]
        widths = [3, 1, 1]
        plan = ColumnPlan(widths=(5, 1), rows=2)

        lines = render_grid(cells, widths, plan)
        self.assertEqual(lines, ["\x1b[34mdir\x1b[0m  b", "a"])


if __name__ == "__main__":
    unittest.main()
