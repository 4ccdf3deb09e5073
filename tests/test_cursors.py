"""Tests for tree cursors."""

from inkline.dom.cursors import Cursor, cursor
from inkline.dom.nodes import element, fragment, text


class TestStepping:
    """Tests for single steps."""

    def test_next_enters_element(self):
        """Test that stepping forward before an element enters it."""
        ab = text("ab")
        p = element("p", ab)
        fragment(p)
        point = cursor(p)

        assert point.next() is True
        assert point == Cursor(ab, False)

    def test_next_steps_over_text(self):
        """Test that text nodes are atomic."""
        ab, br = text("ab"), element("br")
        element("p", ab, br)
        point = cursor(ab)

        point.next()

        assert point == Cursor(br, False)

    def test_next_steps_over_void(self):
        """Test that void elements are not entered."""
        br, cd = element("br"), text("cd")
        element("p", br, cd)
        point = cursor(br)

        point.next()

        assert point == Cursor(cd, False)

    def test_next_from_last_child_reaches_parent_end(self):
        """Test stepping forward off the last child."""
        ab = text("ab")
        p = element("p", ab)
        fragment(p)
        point = cursor(ab)

        point.next()

        assert point == Cursor(p, True)
        assert point.at_end is True

    def test_next_enters_empty_element_at_end(self):
        """Test that an empty element is entered at its end."""
        b = element("b")
        fragment(b)
        point = cursor(b)

        point.next()

        assert point == Cursor(b, True)

    def test_prev_enters_previous_element_at_end(self):
        """Test that stepping back lands inside a previous element."""
        b, cd = element("b", "ab"), text("cd")
        element("p", b, cd)
        point = cursor(cd)

        point.prev()

        assert point == Cursor(b, True)

    def test_prev_from_end_reaches_last_child(self):
        """Test stepping back from the end of a container."""
        ab, br = text("ab"), element("br")
        p = element("p", ab, br)
        point = cursor(p, True)

        point.prev()
        assert point == Cursor(br, False)
        point.prev()
        assert point == Cursor(ab, False)

    def test_prev_from_first_child_reaches_parent(self):
        """Test stepping back off the first child."""
        ab = text("ab")
        p = element("p", ab)
        fragment(p)
        point = cursor(ab)

        point.prev()

        assert point == Cursor(p, False)

    def test_running_off_the_tree(self):
        """Test that steps at the edges of the tree fail without moving."""
        root = fragment(text("a"))
        start = cursor(root)
        end = cursor(root, True)

        assert start.prev() is False
        assert start == Cursor(root, False)
        assert end.next() is False
        assert end == Cursor(root, True)


class TestWalking:
    """Tests for conditional walks, skips and commits."""

    def test_next_while(self):
        """Test walking forward while a condition holds."""
        a, b, c = text(" "), text(" "), text("c")
        element("p", a, b, c)
        point = cursor(a)

        assert point.next_while(lambda p: p.node.data == " ") is True
        assert point.node is c

    def test_prev_while_runs_off(self):
        """Test that a walk off the tree reports False."""
        root = fragment(text("a"))
        point = cursor(root.first_child)

        assert point.prev_while(lambda p: True) is False

    def test_skip_next_does_not_enter(self):
        """Test skipping past an element without entering it."""
        b, cd = element("b", "ab"), text("cd")
        element("p", b, cd)
        point = cursor(b)

        point.skip_next()

        assert point == Cursor(cd, False)

    def test_skip_prev_does_not_enter(self):
        """Test skipping before the previous element."""
        b, cd = element("b", "ab"), text("cd")
        p = element("p", b, cd)
        point = cursor(cd)

        point.skip_prev()
        assert point == Cursor(b, False)

        end = cursor(p, True)
        end.skip_prev()
        assert end == Cursor(cd, False)

    def test_clone_and_set_from(self):
        """Test that clones are independent until committed."""
        ab, cd = text("ab"), text("cd")
        element("p", ab, cd)
        point = cursor(ab)
        scratch = point.clone()

        scratch.next()
        assert point == Cursor(ab, False)

        point.set_from(scratch)
        assert point == Cursor(cd, False)
