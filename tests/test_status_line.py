"""Tests for the switch-session status line."""

from buf_cycle.status_line import find_first_visible, label, label_width, render


class TestLabel:
    def test_plain(self):
        assert label("notes", current=False, left_edge=False) == " notes "

    def test_plain_left_edge(self):
        assert label("notes", current=False, left_edge=True) == "notes "

    def test_current(self):
        assert label("notes", current=True, left_edge=False) == " <notes>"

    def test_current_left_edge(self):
        assert label("notes", current=True, left_edge=True) == "<notes>"

    def test_width_matches_label(self):
        for current in (True, False):
            for left in (True, False):
                assert label_width("abc", current, left) == len(label("abc", current, left))


class TestRender:
    def test_everything_fits(self):
        assert render(["a", "b", "c"], 1, 80) == "a  <b> c "

    def test_first_item_current(self):
        assert render(["Alpha", "Beta", "Gamma"], 0, 80) == "<Alpha> Beta  Gamma "

    def test_empty(self):
        assert render([], 0, 10) == ""

    def test_stops_before_overflow(self):
        assert render(["aaaa", "bbbb", "cccc"], 0, 10) == "<aaaa>"

    def test_scrolls_one_position_per_overflow(self):
        names = ["aaaa", "bbbb", "cccc", "dddd"]
        firsts = [find_first_visible(names, i, 10) for i in range(len(names))]
        assert firsts == [0, 1, 2, 3]
        for i, name in enumerate(names):
            assert render(names, i, 10).startswith(f"<{name}>")

    def test_scrolls_only_when_needed(self):
        names = ["a", "b", "c", "d", "e", "f"]
        # "a  b  c  d  <e>" is 15 columns, fits in 16
        assert find_first_visible(names, 4, 16) == 0
        assert find_first_visible(names, 5, 16) > 0

    def test_never_wider_than_width_and_current_marked(self):
        names = ["alpha", "be", "gamma-ray", "d", "epsilon", "zz"]
        min_width = max(len(n) + 2 for n in names)
        for width in range(min_width, 45):
            for i, name in enumerate(names):
                out = render(names, i, width)
                assert len(out) <= width
                assert f"<{name}>" in out

    def test_label_wider_than_line_is_clipped(self):
        assert render(["abcdefgh"], 0, 4) == "<abc"
