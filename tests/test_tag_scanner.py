"""
Tests for parsers/tag_scanner.py.

Covers:
- match_tag: names, value groups, failure positions
- scan_content: text/tag alternation, lone and invalid "@", value edge cases
- scan_tag_list: project tag tails
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from plaintasks.models.nodes import Tag, Text
from plaintasks.parsers.tag_scanner import match_tag, scan_content, scan_tag_list


# ---------------------------------------------------------------------------
# match_tag
# ---------------------------------------------------------------------------

class TestMatchTag:
    def test_name_only(self):
        assert match_tag("@today rest", 0) == (Tag("today"), 6)

    def test_name_with_value(self):
        assert match_tag("@due(friday) x", 0) == (Tag("due", "friday"), 12)

    def test_name_charset(self):
        assert match_tag("@a-b_c1.", 0) == (Tag("a-b_c1"), 7)

    def test_offset(self):
        assert match_tag("x @y", 2) == (Tag("y"), 4)

    @pytest.mark.parametrize("text", ["@", "@ x", "@1abc", "@_x", "@(v)", "x"])
    def test_no_tag(self, text):
        assert match_tag(text, 0) == (None, 0)

    def test_value_stops_at_first_close(self):
        assert match_tag("@x(a(b)c)", 0) == (Tag("x", "a(b"), 7)


# ---------------------------------------------------------------------------
# scan_content
# ---------------------------------------------------------------------------

class TestScanContent:
    def test_plain_text(self):
        assert scan_content("buy milk") == (Text("buy milk"),)

    def test_empty(self):
        assert scan_content("") == ()

    def test_starts_and_ends_with_tag(self):
        assert scan_content("@a mid @b") == (Tag("a"), Text(" mid "), Tag("b"))

    def test_adjacent_tags(self):
        assert scan_content("@a@b(1)") == (Tag("a"), Tag("b", "1"))

    def test_lone_at_merges_into_one_run(self):
        assert scan_content("a @ b") == (Text("a @ b"),)

    def test_trailing_at(self):
        assert scan_content("trailing @") == (Text("trailing @"),)

    def test_invalid_name_merges(self):
        assert scan_content("x @1st @ok") == (Text("x @1st "), Tag("ok"))

    def test_unterminated_value_keeps_bare_tag(self):
        assert scan_content("@due(abc") == (Tag("due"), Text("(abc"))

    def test_empty_value_keeps_bare_tag(self):
        assert scan_content("@due() x") == (Tag("due"), Text("() x"))

    def test_value_may_contain_at(self):
        assert scan_content("@note(a@b) x") == (Tag("note", "a@b"), Text(" x"))

    def test_value_with_spaces(self):
        assert scan_content("@done(26-10-17 14:30)") == (Tag("done", "26-10-17 14:30"),)

    def test_value_not_closed_before_cr(self):
        assert scan_content("@due(a\rb)") == (Tag("due"), Text("(ab)"))

    def test_stops_at_newline(self):
        assert scan_content("a @b\nc") == (Text("a "), Tag("b"))

    def test_cr_skipped(self):
        assert scan_content("a\r b\r") == (Text("a b"),)

    def test_never_two_text_runs_in_a_row(self):
        segments = scan_content("a @ @1 @- b @ok c @ @(x) d")
        for left, right in zip(segments, segments[1:]):
            assert not (isinstance(left, Text) and isinstance(right, Text))


# ---------------------------------------------------------------------------
# scan_tag_list
# ---------------------------------------------------------------------------

class TestScanTagList:
    @pytest.mark.parametrize("text", ["", " ", " \t ", "\r"])
    def test_blank(self, text):
        assert scan_tag_list(text) == ()

    def test_tags(self):
        assert scan_tag_list(" @a  @b(x) ") == (Tag("a"), Tag("b", "x"))

    def test_requires_leading_whitespace(self):
        assert scan_tag_list("@a") is None

    def test_rejects_text(self):
        assert scan_tag_list(" @a words") is None
