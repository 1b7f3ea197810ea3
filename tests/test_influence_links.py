"""
Unit tests for influence line formatting, location and insertion.
"""

from boh_linker.services import influence_links
from boh_linker.services.influence_links import (
    LocatedLine,
    add_influence,
    append,
    contains_id,
    format_influence,
    locate,
)


def _markers(line):
    return line.count(influence_links.SEPARATOR)


class TestLocate:
    """Test suite for finding the influence line."""

    def test_no_marker(self):
        assert locate("just a description") is None
        assert locate("") is None

    def test_single_marker_with_trailing_text(self):
        located = locate("[Moth](:/abc) ⬩ text")
        assert located == LocatedLine(prefix="", line="[Moth](:/abc) ⬩", suffix=" text")

    def test_run_of_markers_after_leading_text(self):
        body = "Intro\n\n[Moth](:/abc) ⬩ [Candle](:/xyz) ⬩\n\nDescription"
        located = locate(body)
        assert located.prefix == "Intro\n\n"
        assert located.line == "[Moth](:/abc) ⬩ [Candle](:/xyz) ⬩"
        assert located.suffix == "\n\nDescription"

    def test_only_first_run_is_used(self):
        body = "[Moth](:/abc) ⬩\n\nmiddle\n\n[Candle](:/xyz) ⬩"
        located = locate(body)
        assert located.line == "[Moth](:/abc) ⬩"
        assert located.suffix == "\n\nmiddle\n\n[Candle](:/xyz) ⬩"

    def test_marker_does_not_span_lines(self):
        assert locate("[Moth](:/abc)\n⬩") is None


class TestAddInfluence:
    """Test suite for inserting links."""

    def test_format(self):
        assert format_influence("Moth", "abc") == "[Moth](:/abc) ⬩"

    def test_appends_before_trailing_text(self):
        body = add_influence("[Moth](:/abc) ⬩ text", "Candle", "xyz")
        assert body == "[Moth](:/abc) ⬩ [Candle](:/xyz) ⬩ text"

    def test_prepends_when_no_line(self):
        assert add_influence("desc", "Moth", "abc") == "[Moth](:/abc) ⬩\n\ndesc"

    def test_empty_body_gets_just_the_link(self):
        assert add_influence("", "Moth", "abc") == "[Moth](:/abc) ⬩"

    def test_existing_id_is_not_duplicated(self):
        body = "[Moth](:/abc) ⬩ [Candle](:/xyz) ⬩\n\ndesc"
        assert add_influence(body, "Moth", "abc") == body

    def test_contains_id_is_substring_match(self):
        assert contains_id("[Moth](:/abcdef) ⬩", "bcd")
        assert not contains_id("[Moth](:/abc) ⬩", "xyz")

    def test_locate_append_locate_adds_one_marker(self):
        body = "Rose\n\n[Moth](:/abc) ⬩ [Candle](:/xyz) ⬩ tail\n\ndesc"
        before = locate(body)
        after = locate(append(before, format_influence("Lamp", "lmp")))
        assert _markers(after.line) == _markers(before.line) + 1
        assert after.prefix == before.prefix
        assert after.suffix == before.suffix
