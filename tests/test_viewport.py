"""Cursor movement and scroll reconciliation tests."""

from __future__ import annotations

import unittest

from pykilo import viewport as nav
from pykilo.buffer import Cursor, TextBuffer
from pykilo.input import keys
from pykilo.viewport import Viewport


class ScrollTests(unittest.TestCase):
    def test_scroll_down_keeps_cursor_on_last_visible_row(self) -> None:
        buffer = TextBuffer.from_lines([str(i) for i in range(50)])
        view = Viewport(screen_rows=10, screen_cols=20)

        view.scroll(buffer, Cursor(x=0, y=25))

        self.assertEqual(view.row_offset, 16)

    def test_scroll_up_puts_cursor_on_first_row(self) -> None:
        buffer = TextBuffer.from_lines([str(i) for i in range(50)])
        view = Viewport(screen_rows=10, screen_cols=20, row_offset=30)

        view.scroll(buffer, Cursor(x=0, y=5))

        self.assertEqual(view.row_offset, 5)

    def test_horizontal_scroll_uses_render_column(self) -> None:
        buffer = TextBuffer.from_lines(["\t\tx"])
        view = Viewport(screen_rows=5, screen_cols=10)

        view.scroll(buffer, Cursor(x=2, y=0))

        self.assertEqual(view.render_x, 16)
        self.assertEqual(view.col_offset, 7)

        view.scroll(buffer, Cursor(x=0, y=0))
        self.assertEqual(view.col_offset, 0)

    def test_virtual_row_has_render_column_zero(self) -> None:
        buffer = TextBuffer.from_lines(["abc"])
        view = Viewport(screen_rows=5, screen_cols=10)
        view.scroll(buffer, Cursor(x=0, y=1))
        self.assertEqual(view.render_x, 0)

    def test_cursor_stays_inside_viewport_after_any_scroll(self) -> None:
        buffer = TextBuffer.from_lines(["x" * (i % 37) for i in range(120)])
        view = Viewport(screen_rows=7, screen_cols=9)
        for y in (0, 119, 3, 60, 61, 0, 120):
            cursor = Cursor(x=min(30, len(buffer.rows[y].chars) if y < 120 else 0), y=y)
            with self.subTest(y=y):
                view.scroll(buffer, cursor)
                self.assertLessEqual(view.row_offset, cursor.y)
                self.assertLess(cursor.y, view.row_offset + view.screen_rows)
                self.assertLessEqual(view.col_offset, view.render_x)
                self.assertLess(view.render_x, view.col_offset + view.screen_cols)


class MoveCursorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.buffer = TextBuffer.from_lines(["abcdef", "ab", "abcd"])

    def test_right_at_row_end_wraps_to_next_row(self) -> None:
        cursor = Cursor(x=6, y=0)
        nav.move_cursor(self.buffer, cursor, keys.RIGHT)
        self.assertEqual(cursor, Cursor(x=0, y=1))

    def test_left_at_row_start_wraps_to_previous_row_end(self) -> None:
        cursor = Cursor(x=0, y=1)
        nav.move_cursor(self.buffer, cursor, keys.LEFT)
        self.assertEqual(cursor, Cursor(x=6, y=0))

    def test_left_at_origin_stays(self) -> None:
        cursor = Cursor()
        nav.move_cursor(self.buffer, cursor, keys.LEFT)
        self.assertEqual(cursor, Cursor())

    def test_vertical_move_clamps_column_to_shorter_row(self) -> None:
        cursor = Cursor(x=5, y=0)
        nav.move_cursor(self.buffer, cursor, keys.DOWN)
        self.assertEqual(cursor, Cursor(x=2, y=1))

    def test_down_stops_at_virtual_row(self) -> None:
        cursor = Cursor(x=3, y=2)
        nav.move_cursor(self.buffer, cursor, keys.DOWN)
        nav.move_cursor(self.buffer, cursor, keys.DOWN)
        self.assertEqual(cursor, Cursor(x=0, y=3))

    def test_right_on_virtual_row_does_nothing(self) -> None:
        cursor = Cursor(x=0, y=3)
        nav.move_cursor(self.buffer, cursor, keys.RIGHT)
        self.assertEqual(cursor, Cursor(x=0, y=3))

    def test_home_and_end(self) -> None:
        cursor = Cursor(x=3, y=0)
        nav.end(self.buffer, cursor)
        self.assertEqual(cursor.x, 6)
        nav.home(cursor)
        self.assertEqual(cursor.x, 0)

    def test_end_on_virtual_row_is_column_zero(self) -> None:
        cursor = Cursor(x=0, y=3)
        nav.end(self.buffer, cursor)
        self.assertEqual(cursor.x, 0)


class PagingTests(unittest.TestCase):
    def test_page_down_moves_a_screenful_past_bottom_edge(self) -> None:
        buffer = TextBuffer.from_lines([str(i) for i in range(100)])
        view = Viewport(screen_rows=10, screen_cols=20)
        cursor = Cursor()

        nav.page(buffer, cursor, view, keys.PAGE_DOWN)

        self.assertEqual(cursor.y, 19)

    def test_page_up_moves_a_screenful_above_top_edge(self) -> None:
        buffer = TextBuffer.from_lines([str(i) for i in range(100)])
        view = Viewport(screen_rows=10, screen_cols=20, row_offset=40)
        cursor = Cursor(y=45)

        nav.page(buffer, cursor, view, keys.PAGE_UP)

        self.assertEqual(cursor.y, 30)

    def test_paging_clamps_at_buffer_edges(self) -> None:
        buffer = TextBuffer.from_lines([str(i) for i in range(5)])
        view = Viewport(screen_rows=10, screen_cols=20)
        cursor = Cursor(y=2)

        nav.page(buffer, cursor, view, keys.PAGE_DOWN)
        self.assertEqual(cursor.y, 5)

        nav.page(buffer, cursor, view, keys.PAGE_UP)
        self.assertEqual(cursor.y, 0)

    def test_page_clamps_column_to_landing_row(self) -> None:
        buffer = TextBuffer.from_lines(["long line here", "x"] * 20)
        view = Viewport(screen_rows=4, screen_cols=20)
        cursor = Cursor(x=10, y=0)

        nav.page(buffer, cursor, view, keys.PAGE_DOWN)

        self.assertEqual(cursor.y, 7)
        self.assertEqual(cursor.x, 1)


if __name__ == "__main__":
    unittest.main()
