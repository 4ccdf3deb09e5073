"""Tests for locating the edges of visual lines."""

from inkline.dom.cursors import Cursor, cursor
from inkline.dom.nodes import document, element, text
from inkline.html.boundaries import (
    normalize_boundary,
    skip_unrendered_to_end_of_line,
    skip_unrendered_to_start_of_line,
)


class TestEndOfLine:
    """Tests for walking to the end of a line."""

    def test_stops_before_br(self):
        """Test skipping inline and whitespace nodes up to a br."""
        empty, space, br = element("b"), text(" "), element("br")
        document(element("p", "ab", empty, space, br, "cd"))
        point = cursor(empty)

        assert skip_unrendered_to_end_of_line(point) is True
        assert point == Cursor(br, False)

    def test_reaches_end_of_block(self):
        """Test that trailing whitespace leads to the end of the block."""
        space = text(" ")
        p = element("p", "ab", space)
        document(p)
        point = cursor(space)

        assert skip_unrendered_to_end_of_line(point) is True
        assert point == Cursor(p, True)

    def test_stops_before_next_block(self):
        """Test that a following block ends the line."""
        space = text(" ")
        second = element("p", "cd")
        document(element("div", "ab", space, second))
        point = cursor(space)

        assert skip_unrendered_to_end_of_line(point) is True
        assert point == Cursor(second, False)

    def test_rendered_text_leaves_point_untouched(self):
        """Test that meeting rendered content fails without moving."""
        space, cd = text(" "), text("cd")
        document(element("p", space, cd))
        point = cursor(space)

        assert skip_unrendered_to_end_of_line(point) is False
        assert point == Cursor(space, False)


class TestStartOfLine:
    """Tests for walking to the start of a line."""

    def test_after_br(self):
        """Test that a point right after a br is at the start of a line."""
        cd = text("cd")
        document(element("p", "ab", element("br"), cd))
        point = cursor(cd)

        assert skip_unrendered_to_start_of_line(point) is True
        assert point == Cursor(cd, False)

    def test_start_of_block(self):
        """Test that the first position of a block starts a line."""
        cd = text("cd")
        document(element("p", "ab"), element("p", cd))
        point = cursor(cd)

        assert skip_unrendered_to_start_of_line(point) is True
        assert point == Cursor(cd, False)

    def test_skips_whitespace_after_block(self):
        """Test that whitespace after a block is part of the new line's start."""
        space, cd = text(" "), text("cd")
        document(element("div", element("p", "ab"), space, cd))
        point = cursor(cd)

        assert skip_unrendered_to_start_of_line(point) is True
        assert point == Cursor(space, False)

    def test_rendered_text_leaves_point_untouched(self):
        """Test that rendered content before the point fails without moving."""
        cd = text("cd")
        document(element("p", "ab", cd))
        point = cursor(cd)

        assert skip_unrendered_to_start_of_line(point) is False
        assert point == Cursor(cd, False)

    def test_br_at_end_of_block_does_not_start_a_line(self):
        """Test that a point behind a trailing br belongs to the line before it."""
        space = text(" ")
        p = element("p", "ab", element("br"), space)
        document(p)

        behind_space = cursor(space)
        at_end = cursor(p, True)

        assert skip_unrendered_to_start_of_line(behind_space) is False
        assert behind_space == Cursor(space, False)
        assert skip_unrendered_to_start_of_line(at_end) is False
        assert at_end == Cursor(p, True)

    def test_empty_line_of_single_br(self):
        """Test that a block holding only a br starts its line before the br."""
        br = element("br")
        p = element("p", br)
        document(p)
        point = cursor(p, True)

        assert skip_unrendered_to_start_of_line(point) is True
        assert point == Cursor(br, False)


class TestNormalizeBoundary:
    """Tests for canonical line positions."""

    def test_prefers_start_of_line(self):
        """Test that a point at the start of a line stays there."""
        cd = text("cd")
        document(element("p", "ab", element("br"), cd))
        point = cursor(cd)

        assert normalize_boundary(point) is True
        assert point == Cursor(cd, False)

    def test_moves_past_br(self):
        """Test that the end of a line is normalized to after its br."""
        space, cd = text(" "), text("cd")
        document(element("p", "ab", space, element("br"), cd))
        point = cursor(space)

        assert normalize_boundary(point) is True
        assert point == Cursor(cd, False)
        assert normalize_boundary(point) is True
        assert point == Cursor(cd, False)

    def test_moves_to_end_of_block_after_last_br(self):
        """Test that whitespace after the last br does not form a line."""
        space = text(" ")
        p = element("p", "ab", space, element("br"), text(" "))
        document(p)
        point = cursor(space)

        assert normalize_boundary(point) is True
        assert point == Cursor(p, True)

    def test_trailing_whitespace_goes_to_end_of_block(self):
        """Test normalizing unrendered whitespace at the end of a block."""
        space = text(" ")
        p = element("p", "ab", element("br"), space)
        document(p)
        point = cursor(space)

        assert normalize_boundary(point) is True
        assert point == Cursor(p, True)

    def test_inside_text_line(self):
        """Test that a point between rendered text cannot be normalized."""
        cd = text("cd")
        document(element("p", "ab", cd, "ef"))
        point = cursor(cd)

        assert normalize_boundary(point) is False
        assert point == Cursor(cd, False)
